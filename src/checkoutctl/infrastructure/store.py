"""Store — the in-memory catalog, account, and clock.

The Store is the single dependency injected into every service. It owns
the catalog items (the sole owner; cart lines only reference them), the
customer account, and the clock used for expiry checks. Nothing is
persisted: a Store lives for one CLI invocation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC
from typing import TYPE_CHECKING

from checkoutctl.domain.account import Account
from checkoutctl.domain.cart import Cart
from checkoutctl.domain.clock import Clock, SystemClock, days_from_now
from checkoutctl.domain.errors import UnknownItem
from checkoutctl.domain.items import Item

if TYPE_CHECKING:
    from checkoutctl.config.models import CartLineConfig, ItemConfig
    from checkoutctl.config.settings import CheckoutSettings

logger = logging.getLogger(__name__)


def item_from_config(config: ItemConfig, clock: Clock) -> Item:
    """Build a catalog :class:`Item`, resolving relative expiry against *clock*."""
    expires_at = config.expires_at
    if expires_at is None and config.expires_in_days is not None:
        expires_at = days_from_now(clock, config.expires_in_days)
    elif expires_at is not None and expires_at.tzinfo is None:
        # Local date-times from TOML or env vars are taken as UTC.
        expires_at = expires_at.replace(tzinfo=UTC)
    return Item(
        name=config.name,
        unit_price=config.price,
        stock=config.stock,
        expires_at=expires_at,
        shippable=config.shippable,
        weight_grams=config.weight_grams,
    )


class Store:
    """Catalog items keyed by name, plus the account and clock."""

    def __init__(
        self,
        items: Iterable[Item],
        account: Account,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.account = account
        self.clock: Clock = clock or SystemClock()
        self._items: dict[str, Item] = {}
        for item in items:
            if item.name in self._items:
                msg = f"Duplicate catalog item: {item.name}"
                raise ValueError(msg)
            self._items[item.name] = item

    @classmethod
    def from_settings(cls, settings: CheckoutSettings, *, clock: Clock | None = None) -> Store:
        """Build the catalog and account described by *settings*."""
        clock = clock or SystemClock()
        items = [item_from_config(cfg, clock) for cfg in settings.catalog]
        account = Account(holder=settings.account.holder, balance=settings.account.balance)
        logger.debug("Store built with %d catalog items", len(items))
        return cls(items, account, clock=clock)

    @property
    def items(self) -> list[Item]:
        """Catalog items in listing order."""
        return list(self._items.values())

    def lookup(self, name: str) -> Item:
        """Return the catalog item called *name*.

        Raises:
            UnknownItem: no such item.
        """
        try:
            return self._items[name]
        except KeyError:
            raise UnknownItem(name) from None

    def new_cart(self) -> Cart:
        return Cart(self.clock)

    def build_cart(self, lines: Iterable[CartLineConfig]) -> Cart:
        """Create a cart and add *lines* to it in order.

        Raises:
            UnknownItem: a line names an item outside the catalog.
            ItemUnavailable: a line asks for more than is in stock, or
                for an expired item.
        """
        cart = self.new_cart()
        for line in lines:
            cart.add_line(self.lookup(line.item), line.quantity)
        return cart
