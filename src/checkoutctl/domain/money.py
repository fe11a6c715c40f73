"""Decimal helpers for money and weights."""

from __future__ import annotations

from decimal import Decimal

GRAMS_PER_KG = Decimal(1000)


def plain(value: Decimal) -> Decimal:
    """Drop trailing zeros, keeping integral values free of an exponent.

    Examples:
        >>> plain(Decimal("502.0"))
        Decimal('502')
        >>> plain(Decimal("20000"))
        Decimal('20000')
        >>> plain(Decimal("0.200"))
        Decimal('0.2')
    """
    normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return normalized.quantize(Decimal(1))
    return normalized


def amount_text(value: Decimal) -> str:
    """Fixed-point display text for *value*.

    Examples:
        >>> amount_text(Decimal("502.0"))
        '502'
        >>> amount_text(Decimal("0.0000001"))
        '0.0000001'
    """
    return f"{plain(Decimal(value)):f}"


def grams_to_kg(grams: Decimal) -> Decimal:
    return grams / GRAMS_PER_KG
