"""Checkout error kinds.

Every failure in the checkout flow is a :class:`CheckoutError` subclass
tagged with an :class:`ErrorKind`. The ``detail`` mapping carries the
structured context (item name, requested vs. available quantity, amount
vs. balance) so callers never have to parse the message text.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Any, ClassVar

from checkoutctl.domain.money import amount_text


class ErrorKind(StrEnum):
    """Failure conditions of the checkout flow."""

    ITEM_UNAVAILABLE = "ITEM_UNAVAILABLE"
    EMPTY_CART = "EMPTY_CART"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    UNKNOWN_ITEM = "UNKNOWN_ITEM"


class CheckoutError(Exception):
    """Base class for all checkout failures."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class ItemUnavailable(CheckoutError):
    """Requested quantity exceeds stock, or the item has expired."""

    kind = ErrorKind.ITEM_UNAVAILABLE

    def __init__(self, item: str, *, requested: int, available: int, expired: bool) -> None:
        super().__init__(
            f"Product {item} not available",
            item=item,
            requested=requested,
            available=available,
            expired=expired,
        )


class EmptyCart(CheckoutError):
    kind = ErrorKind.EMPTY_CART

    def __init__(self) -> None:
        super().__init__("Cannot checkout with empty cart")


class InsufficientFunds(CheckoutError):
    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, holder: str, *, amount: Decimal, balance: Decimal) -> None:
        super().__init__(
            f"Insufficient balance for {holder}",
            holder=holder,
            amount=amount_text(amount),
            balance=amount_text(balance),
        )


class InsufficientStock(CheckoutError):
    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, item: str, *, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough stock for {item}",
            item=item,
            requested=requested,
            available=available,
        )


class UnknownItem(CheckoutError):
    """A cart references a name that is not in the catalog."""

    kind = ErrorKind.UNKNOWN_ITEM

    def __init__(self, item: str) -> None:
        super().__init__(f"Product {item} not in catalog", item=item)
