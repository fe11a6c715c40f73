"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Store construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from checkoutctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from checkoutctl.config.settings import CheckoutSettings
    from checkoutctl.infrastructure.store import Store
    from checkoutctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The store is built
    lazily on first use so ``--help`` and ``--version`` never touch the
    catalog configuration.
    """

    def __init__(self, settings: CheckoutSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from checkoutctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        """The store instance (created lazily on first access)."""
        if self._store is None:
            from checkoutctl.infrastructure.store import Store

            try:
                self._store = Store.from_settings(self.settings)
            except ValueError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
