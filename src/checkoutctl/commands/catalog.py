"""Command: list catalog items."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from checkoutctl.commands._base import CheckoutCommand

if TYPE_CHECKING:
    from checkoutctl.commands._context import AppContext


@click.command(
    cls=CheckoutCommand,
    examples="""\
  checkoutctl catalog
  checkoutctl --json catalog
  checkoutctl -q catalog""",
)
@click.pass_obj
def catalog(app: AppContext) -> None:
    """List catalog items with price, stock, weight, and expiry."""
    from checkoutctl.services.catalog import CatalogService

    app.emit(CatalogService(app.store).list_items())
