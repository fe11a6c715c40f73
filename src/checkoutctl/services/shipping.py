"""Shipment notifier — builds the shipment notice for shippable items.

Pure: reads item names and weights, never touches stock or balances.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from checkoutctl.domain.money import grams_to_kg, plain
from checkoutctl.services.contracts import ShipmentNotice, dump_validated

if TYPE_CHECKING:
    from checkoutctl.domain.cart import CartLine
    from checkoutctl.domain.items import Item


class ShipmentNotifier:
    """Describe a package: one entry per shipped item plus total weight."""

    @staticmethod
    def notify(items: Sequence[Item]) -> dict[str, Any] | None:
        """Notice for *items*, one unit each, in input order.

        Returns None when there is nothing to ship.
        """
        if not items:
            return None
        entries = [
            {"name": item.name, "quantity": 1, "weight_grams": plain(item.weight_grams)}
            for item in items
        ]
        total = sum((item.weight_grams for item in items), Decimal(0))
        return _notice(entries, total)

    @staticmethod
    def notify_lines(lines: Sequence[CartLine]) -> dict[str, Any] | None:
        """Notice for shippable cart *lines*, weighing every unit.

        Used when shipping is charged by quantity; each entry carries the
        line quantity and the combined weight of those units.
        """
        shippable = [line for line in lines if line.item.shippable]
        if not shippable:
            return None
        entries = [
            {
                "name": line.item.name,
                "quantity": line.quantity,
                "weight_grams": plain(line.item.weight_grams * line.quantity),
            }
            for line in shippable
        ]
        total = sum((line.item.weight_grams * line.quantity for line in shippable), Decimal(0))
        return _notice(entries, total)


def _notice(entries: list[dict[str, Any]], total_grams: Decimal) -> dict[str, Any]:
    return dump_validated(
        ShipmentNotice,
        {
            "entries": entries,
            "total_weight_grams": plain(total_grams),
            "total_weight_kg": plain(grams_to_kg(total_grams)),
        },
    )
