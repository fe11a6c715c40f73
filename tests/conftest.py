"""Shared pytest fixtures and test helpers for checkoutctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from checkoutctl.domain.account import Account
from checkoutctl.domain.clock import FixedClock
from checkoutctl.domain.items import Item
from checkoutctl.infrastructure.store import Store

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-logger setup that each CLI invocation performs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("checkoutctl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides.

    Keeps a stray ``checkoutctl.toml`` or ``CHECKOUTCTL_*`` variable on the
    developer's machine from leaking into the sample-store defaults.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHECKOUTCTL_CONFIG", raising=False)


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to ``NOW``."""
    return FixedClock(NOW)


@pytest.fixture
def cheese() -> Item:
    return Item(
        name="Cheese",
        unit_price=Decimal(100),
        stock=10,
        expires_at=NOW + timedelta(days=7),
        shippable=True,
        weight_grams=Decimal(200),
    )


@pytest.fixture
def biscuits() -> Item:
    return Item(
        name="Biscuits",
        unit_price=Decimal(150),
        stock=3,
        expires_at=NOW + timedelta(days=14),
        weight_grams=Decimal(700),
    )


@pytest.fixture
def tv() -> Item:
    return Item(
        name="TV",
        unit_price=Decimal(15000),
        stock=3,
        shippable=True,
        weight_grams=Decimal(5000),
    )


@pytest.fixture
def account() -> Account:
    return Account(holder="John Doe", balance=Decimal(20000))


@pytest.fixture
def store(cheese: Item, biscuits: Item, tv: Item, account: Account, clock: FixedClock) -> Store:
    """Store with Cheese, Biscuits, and TV, and a 20000 balance."""
    return Store([cheese, biscuits, tv], account, clock=clock)


def write_config(directory: Path, body: str) -> Path:
    """Write a ``checkoutctl.toml`` into *directory* and return its path."""
    path = directory / "checkoutctl.toml"
    path.write_text(body, encoding="utf-8")
    return path
