"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``lines`` vs ``items``)
fail fast in tests and during development.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ShipmentEntry(BaseModel):
    """One line of the shipment notice."""

    name: str
    quantity: int
    weight_grams: Decimal


class ShipmentNotice(BaseModel):
    """Payload produced by ``ShipmentNotifier.notify``."""

    entries: list[ShipmentEntry]
    total_weight_grams: Decimal
    total_weight_kg: Decimal


class ReceiptLine(BaseModel):
    """One receipt row."""

    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class CheckoutResultData(BaseModel):
    """Payload contract for ``CheckoutService.checkout``."""

    holder: str
    lines: list[ReceiptLine]
    shipment: ShipmentNotice | None = None
    shipping_weight_grams: Decimal
    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    balance: Decimal


class CatalogItem(BaseModel):
    """One catalog listing row."""

    name: str
    price: Decimal
    stock: int
    expires_at: datetime | None = None
    expired: bool
    shippable: bool
    weight_grams: Decimal


class CatalogResultData(BaseModel):
    """Payload contract for ``CatalogService.list_items``."""

    count: int
    items: list[CatalogItem]
