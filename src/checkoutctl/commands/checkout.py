"""Command: check out a cart against the configured store."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from checkoutctl.commands._base import CheckoutCommand
from checkoutctl.config.models import CartLineConfig

if TYPE_CHECKING:
    from checkoutctl.commands._context import AppContext


def _parse_lines(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[CartLineConfig]:
    """Turn ``NAME=QTY`` strings into cart lines. Names may contain spaces."""
    lines: list[CartLineConfig] = []
    for raw in values:
        name, sep, qty = raw.rpartition("=")
        if not sep or not name.strip():
            msg = f"expected NAME=QTY, got {raw!r}"
            raise click.BadParameter(msg)
        try:
            lines.append(CartLineConfig(item=name.strip(), quantity=qty.strip()))
        except ValidationError as exc:
            msg = f"invalid quantity in {raw!r}: must be a positive integer"
            raise click.BadParameter(msg) from exc
    return lines


def _parse_amount(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> Decimal | None:
    if value is None:
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite() or amount < 0:
        msg = f"expected a non-negative amount, got {value!r}"
        raise click.BadParameter(msg)
    return amount


@click.command(
    cls=CheckoutCommand,
    examples="""\
  checkoutctl checkout
  checkoutctl checkout --add Cheese=2 --add Biscuits=2
  checkoutctl checkout --add "Mobile Scratch Card=3" --balance 500
  checkoutctl checkout --weigh-by-quantity
  checkoutctl --json checkout""",
)
@click.option(
    "--add",
    "lines",
    multiple=True,
    metavar="NAME=QTY",
    callback=_parse_lines,
    help="Add a cart line (repeatable). Replaces the configured cart.",
)
@click.option(
    "--balance",
    default=None,
    metavar="AMOUNT",
    callback=_parse_amount,
    help="Override the account balance.",
)
@click.option(
    "--weigh-by-quantity/--weigh-per-line",
    default=None,
    help="Charge shipping for every unit instead of once per cart line.",
)
@click.pass_obj
def checkout(
    app: AppContext,
    lines: list[CartLineConfig],
    balance: Decimal | None,
    weigh_by_quantity: bool | None,
) -> None:
    """Build the cart, charge the account, and print the receipt."""
    from checkoutctl.domain.account import Account
    from checkoutctl.services.checkout import CheckoutService

    store = app.store
    if balance is not None:
        store.account = Account(holder=store.account.holder, balance=balance)

    shipping = app.settings.shipping
    if weigh_by_quantity is not None:
        shipping = shipping.model_copy(update={"weigh_by_quantity": weigh_by_quantity})

    svc = CheckoutService.from_config(store, shipping)
    app.emit(svc.checkout_lines(lines or app.settings.cart))
