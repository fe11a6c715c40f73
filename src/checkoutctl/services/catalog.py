"""CatalogService — read-only listing of the store's items."""

from __future__ import annotations

from checkoutctl.domain.money import plain
from checkoutctl.services.base import BaseService
from checkoutctl.services.contracts import CatalogResultData, dump_validated
from checkoutctl.services.result import ServiceResult


class CatalogService(BaseService):
    def list_items(self) -> ServiceResult:
        clock = self._store.clock
        items = [
            {
                "name": item.name,
                "price": plain(item.unit_price),
                "stock": item.stock,
                "expires_at": item.expires_at,
                "expired": item.is_expired(clock),
                "shippable": item.shippable,
                "weight_grams": plain(item.weight_grams),
            }
            for item in self._store.items
        ]
        data = dump_validated(CatalogResultData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="catalog", data=data)
