"""checkoutctl — retail checkout CLI utility."""

__version__ = "0.1.0"
