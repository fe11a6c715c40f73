"""CheckoutService — price, settle, and report a cart.

Checkout runs four fail-fast stages:

1. **Precondition**: the cart must have at least one line.
2. **Pricing**: subtotal plus a weight-based shipping fee
   (``grams / 1000 * rate_per_kg``).
3. **Settlement**: stock for every line is verified, the account is
   charged, then stock is reduced line by line.
4. **Reporting**: shipment notice and receipt data.

All state changes happen in stage 3, and only after every check in that
stage has passed, so a failed checkout leaves the account and the catalog
exactly as they were.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from checkoutctl.domain.errors import CheckoutError, EmptyCart, InsufficientStock
from checkoutctl.domain.money import grams_to_kg, plain
from checkoutctl.services.base import BaseService
from checkoutctl.services.contracts import CheckoutResultData, dump_validated
from checkoutctl.services.result import ServiceResult
from checkoutctl.services.shipping import ShipmentNotifier

if TYPE_CHECKING:
    from checkoutctl.config.models import CartLineConfig, ShippingConfig
    from checkoutctl.domain.cart import Cart
    from checkoutctl.domain.items import Item
    from checkoutctl.infrastructure.store import Store

logger = structlog.get_logger(__name__)

DEFAULT_RATE_PER_KG = Decimal(10)


class CheckoutService(BaseService):
    """Checkout against the store's account and catalog."""

    def __init__(
        self,
        store: Store,
        *,
        rate_per_kg: Decimal = DEFAULT_RATE_PER_KG,
        weigh_by_quantity: bool = False,
    ) -> None:
        super().__init__(store)
        self._rate_per_kg = Decimal(rate_per_kg)
        self._weigh_by_quantity = weigh_by_quantity

    @classmethod
    def from_config(cls, store: Store, shipping: ShippingConfig) -> CheckoutService:
        return cls(
            store,
            rate_per_kg=shipping.rate_per_kg,
            weigh_by_quantity=shipping.weigh_by_quantity,
        )

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def shipping_fee(self, weight_grams: Decimal) -> Decimal:
        return grams_to_kg(weight_grams) * self._rate_per_kg

    def quote(self, cart: Cart) -> tuple[Decimal, Decimal, Decimal, Decimal]:
        """Return ``(subtotal, shipping_weight, shipping_fee, total)`` for *cart*."""
        subtotal = cart.subtotal()
        weight = cart.shipping_weight(by_quantity=self._weigh_by_quantity)
        fee = self.shipping_fee(weight)
        return subtotal, weight, fee, subtotal + fee

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def checkout(self, cart: Cart) -> ServiceResult:
        """Charge the account for *cart*, take the stock, and build the receipt."""
        op = "checkout"
        try:
            if cart.is_empty():
                raise EmptyCart()

            subtotal, weight, fee, total = self.quote(cart)
            logger.debug(
                "checkout_priced",
                lines=len(cart),
                subtotal=subtotal,
                shipping_weight_grams=weight,
                shipping=fee,
                total=total,
            )

            _verify_stock(cart)
            account = self._store.account
            account.charge(total)
            for line in cart:
                line.item.reduce_stock(line.quantity)
        except CheckoutError as exc:
            return self._failure(op, exc)

        warnings: list[str] = []
        if self._weigh_by_quantity:
            shipment = ShipmentNotifier.notify_lines(cart.lines)
        else:
            shipment = ShipmentNotifier.notify(cart.shippable_items())
            warnings.extend(
                f"Shipping charged for 1 of {line.quantity} {line.item.name}"
                for line in cart
                if line.item.shippable and line.quantity > 1
            )

        logger.info(
            "checkout_settled", holder=account.holder, total=total, balance=account.balance
        )

        data = dump_validated(
            CheckoutResultData,
            {
                "holder": account.holder,
                "lines": [
                    {
                        "name": line.item.name,
                        "quantity": line.quantity,
                        "unit_price": plain(line.item.unit_price),
                        "line_total": plain(line.line_total),
                    }
                    for line in cart
                ],
                "shipment": shipment,
                "shipping_weight_grams": plain(weight),
                "subtotal": plain(subtotal),
                "shipping": plain(fee),
                "total": plain(total),
                "balance": plain(account.balance),
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def checkout_lines(self, lines: list[CartLineConfig]) -> ServiceResult:
        """Build a cart from *lines* and check it out.

        Cart-building failures (unknown or unavailable items) are reported
        under the ``checkout`` op like any other checkout failure.
        """
        try:
            cart = self._store.build_cart(lines)
        except CheckoutError as exc:
            return self._failure("checkout", exc)
        return self.checkout(cart)


def _verify_stock(cart: Cart) -> None:
    """Raise InsufficientStock if any item cannot cover its cart quantity.

    Lines naming the same item are summed before comparing.
    """
    wanted: Counter[Item] = Counter()
    for line in cart:
        wanted[line.item] += line.quantity
    for item, quantity in wanted.items():
        if quantity > item.stock:
            raise InsufficientStock(item.name, requested=quantity, available=item.stock)
