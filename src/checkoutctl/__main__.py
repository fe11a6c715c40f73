"""Allow ``python -m checkoutctl``."""

from checkoutctl.cli import cli

cli()
