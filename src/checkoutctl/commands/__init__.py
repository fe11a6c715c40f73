"""Subcommand modules for checkoutctl.

Provides register_commands() which uses deferred imports to keep
``checkoutctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from checkoutctl.commands.catalog import catalog
    from checkoutctl.commands.checkout import checkout

    cli.add_command(checkout)
    cli.add_command(catalog)
