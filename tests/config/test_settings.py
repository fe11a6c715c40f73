"""Tests for CheckoutSettings — unified settings with TOML source."""

from decimal import Decimal
from pathlib import Path

import click
import pytest

from checkoutctl.config.settings import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    CheckoutSettings,
    find_config,
)
from tests.conftest import write_config


class TestDefaults:
    def test_sample_store_defaults(self, tmp_path: Path) -> None:
        settings = CheckoutSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.shipping.rate_per_kg == Decimal(10)
        assert settings.shipping.weigh_by_quantity is False
        assert settings.account.holder == "John Doe"
        assert [item.name for item in settings.catalog][:2] == ["Cheese", "Biscuits"]
        assert [(line.item, line.quantity) for line in settings.cart][0] == ("Cheese", 2)

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CheckoutSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_sparse_override(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[shipping]\nrate_per_kg = 25\n")
        settings = CheckoutSettings.from_cli(start_dir=tmp_path)
        assert settings.shipping.rate_per_kg == Decimal(25)
        assert settings.shipping.weigh_by_quantity is False
        assert settings.account.balance == Decimal(20000)

    def test_catalog_and_cart(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            """\
[account]
holder = "Jane Roe"
balance = 300

[[catalog]]
name = "Lamp"
price = 40
stock = 2
shippable = true
weight_grams = 900

[[cart]]
item = "Lamp"
quantity = 2
""",
        )
        settings = CheckoutSettings.from_cli(start_dir=tmp_path)
        assert settings.account.holder == "Jane Roe"
        assert [item.name for item in settings.catalog] == ["Lamp"]
        assert settings.catalog[0].weight_grams == Decimal(900)
        assert settings.cart[0].quantity == 2

    def test_walks_up(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[account]\nholder = \"Walker\"\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = CheckoutSettings.from_cli(start_dir=nested)
        assert settings.account.holder == "Walker"
        assert settings.config_path == (tmp_path / "checkoutctl.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "store.toml"
        custom.parent.mkdir()
        custom.write_text('[account]\nholder = "Custom"\n')
        settings = CheckoutSettings.from_cli(config_path=str(custom))
        assert settings.account.holder == "Custom"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[shipping\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CheckoutSettings.from_cli(start_dir=tmp_path)

    def test_negative_stock_rejected(self, tmp_path: Path) -> None:
        write_config(tmp_path, '[[catalog]]\nname = "X"\nprice = 1\nstock = -1\n')
        with pytest.raises(Exception, match="stock"):
            CheckoutSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path, "[shipping]\nrate_per_kg = 25\n")
        monkeypatch.setenv("CHECKOUTCTL_SHIPPING__RATE_PER_KG", "30")
        settings = CheckoutSettings.from_cli(start_dir=tmp_path)
        assert settings.shipping.rate_per_kg == Decimal(30)

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHECKOUTCTL_QUIET", "true")
        settings = CheckoutSettings.from_cli(start_dir=tmp_path, quiet=False)
        assert settings.quiet is False


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[shipping]\nrate_per_kg = 5\n")
        assert find_config(tmp_path) == config_file.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config() == config_file.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file.resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None
