"""Catalog items.

An :class:`Item` is owned by the store's catalog. Cart lines hold a
reference to it, so a stock reduction is visible through every line that
points at the same item.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from checkoutctl.domain.errors import InsufficientStock

if TYPE_CHECKING:
    from checkoutctl.domain.clock import Clock


@dataclass(eq=False)
class Item:
    """A purchasable catalog entry.

    Attributes:
        name: Display name, unique within a catalog.
        unit_price: Price of one unit.
        stock: Units on hand. Never negative.
        expires_at: Expiry instant, or None if the item does not expire.
        shippable: Whether the item ships and contributes to shipping fees.
        weight_grams: Shipping weight of one unit.
    """

    name: str
    unit_price: Decimal
    stock: int
    expires_at: datetime | None = None
    shippable: bool = False
    weight_grams: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        self.unit_price = Decimal(self.unit_price)
        self.weight_grams = Decimal(self.weight_grams)
        if self.unit_price < 0:
            msg = f"unit_price must be >= 0, got {self.unit_price}"
            raise ValueError(msg)
        if self.stock < 0:
            msg = f"stock must be >= 0, got {self.stock}"
            raise ValueError(msg)
        if self.weight_grams < 0:
            msg = f"weight_grams must be >= 0, got {self.weight_grams}"
            raise ValueError(msg)

    @property
    def has_expiry(self) -> bool:
        return self.expires_at is not None

    def is_expired(self, clock: Clock) -> bool:
        """True iff the item tracks expiry and *clock* is strictly past it."""
        if self.expires_at is None:
            return False
        return clock.now() > self.expires_at

    def is_available(self, quantity: int, clock: Clock) -> bool:
        return self.stock >= quantity and not self.is_expired(clock)

    def reduce_stock(self, amount: int) -> None:
        """Remove *amount* units from stock.

        Raises:
            ValueError: *amount* is not positive.
            InsufficientStock: *amount* exceeds current stock. Stock is
                left unchanged.
        """
        if amount <= 0:
            msg = f"amount must be > 0, got {amount}"
            raise ValueError(msg)
        if amount > self.stock:
            raise InsufficientStock(self.name, requested=amount, available=self.stock)
        self.stock -= amount
