"""Tests for CatalogService."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from checkoutctl.domain.clock import FixedClock
from checkoutctl.infrastructure.store import Store
from checkoutctl.services.catalog import CatalogService
from tests.conftest import NOW


class TestListItems:
    def test_rows_in_catalog_order(self, store: Store) -> None:
        result = CatalogService(store).list_items()
        assert result.ok
        assert result.op == "catalog"
        assert result.data["count"] == 3
        assert [row["name"] for row in result.data["items"]] == ["Cheese", "Biscuits", "TV"]

    def test_row_fields(self, store: Store) -> None:
        cheese = CatalogService(store).list_items().data["items"][0]
        assert cheese == {
            "name": "Cheese",
            "price": Decimal(100),
            "stock": 10,
            "expires_at": NOW + timedelta(days=7),
            "expired": False,
            "shippable": True,
            "weight_grams": Decimal(200),
        }

    def test_expired_flag_follows_clock(self, store: Store, clock: FixedClock) -> None:
        clock.advance(timedelta(days=8))
        rows = CatalogService(store).list_items().data["items"]
        assert [row["expired"] for row in rows] == [True, False, False]
