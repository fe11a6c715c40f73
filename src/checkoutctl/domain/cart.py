"""Shopping cart: an ordered list of item references with quantities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from checkoutctl.domain.errors import ItemUnavailable

if TYPE_CHECKING:
    from checkoutctl.domain.clock import Clock
    from checkoutctl.domain.items import Item


@dataclass(frozen=True)
class CartLine:
    """One cart selection. The item is shared with the catalog, not copied."""

    item: Item
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.item.unit_price * self.quantity


class Cart:
    """Cart lines in insertion order.

    Adding a line checks availability against *clock* but never touches
    stock; stock only moves at checkout.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._lines: list[CartLine] = []

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    def add_line(self, item: Item, quantity: int) -> CartLine:
        """Append *quantity* units of *item*.

        Raises:
            ValueError: *quantity* is not positive.
            ItemUnavailable: not enough stock, or the item has expired.
        """
        if quantity <= 0:
            msg = f"quantity must be > 0, got {quantity}"
            raise ValueError(msg)
        if not item.is_available(quantity, self._clock):
            raise ItemUnavailable(
                item.name,
                requested=quantity,
                available=item.stock,
                expired=item.is_expired(self._clock),
            )
        line = CartLine(item=item, quantity=quantity)
        self._lines.append(line)
        return line

    def is_empty(self) -> bool:
        return not self._lines

    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal(0))

    def shippable_items(self) -> list[Item]:
        """One item reference per shippable line, in cart order.

        A line with quantity 3 still yields a single reference.
        """
        return [line.item for line in self._lines if line.item.shippable]

    def shipping_weight(self, *, by_quantity: bool = False) -> Decimal:
        """Total shipping weight in grams.

        With *by_quantity* each shippable line counts ``weight * quantity``;
        otherwise each shippable line counts one unit's weight.
        """
        if by_quantity:
            weights = (
                line.item.weight_grams * line.quantity
                for line in self._lines
                if line.item.shippable
            )
            return sum(weights, Decimal(0))
        return sum((item.weight_grams for item in self.shippable_items()), Decimal(0))
