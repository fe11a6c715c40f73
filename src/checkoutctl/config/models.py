"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, checkoutctl.toml only contains
overrides. With no config file at all the defaults describe the sample
store: five catalog items, one account, and a five-line cart.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ShippingConfig(BaseModel):
    """[shipping] section."""

    model_config = {"frozen": True}

    rate_per_kg: Decimal = Decimal(10)
    weigh_by_quantity: bool = False


class AccountConfig(BaseModel):
    """[account] section."""

    model_config = {"frozen": True}

    holder: str = "John Doe"
    balance: Decimal = Decimal(20000)


class ItemConfig(BaseModel):
    """One [[catalog]] entry.

    ``expires_in_days`` is relative to the clock at store build time;
    ``expires_at`` is absolute and wins when both are given.
    """

    model_config = {"frozen": True}

    name: str
    price: Decimal = Field(ge=0)
    stock: int = Field(ge=0)
    expires_in_days: int | None = None
    expires_at: datetime | None = None
    shippable: bool = False
    weight_grams: Decimal = Field(default=Decimal(0), ge=0)


class CartLineConfig(BaseModel):
    """One [[cart]] entry."""

    model_config = {"frozen": True}

    item: str
    quantity: int = Field(gt=0)


SAMPLE_CATALOG: tuple[ItemConfig, ...] = (
    ItemConfig(
        name="Cheese",
        price=Decimal(100),
        stock=10,
        expires_in_days=7,
        shippable=True,
        weight_grams=Decimal(200),
    ),
    ItemConfig(
        name="Biscuits",
        price=Decimal(150),
        stock=3,
        expires_in_days=14,
        weight_grams=Decimal(700),
    ),
    ItemConfig(name="Meat", price=Decimal(150), stock=5),
    ItemConfig(
        name="TV",
        price=Decimal(15000),
        stock=3,
        shippable=True,
        weight_grams=Decimal(5000),
    ),
    ItemConfig(name="Mobile Scratch Card", price=Decimal(50), stock=100),
)

SAMPLE_CART: tuple[CartLineConfig, ...] = (
    CartLineConfig(item="Cheese", quantity=2),
    CartLineConfig(item="Biscuits", quantity=2),
    CartLineConfig(item="TV", quantity=1),
    CartLineConfig(item="Mobile Scratch Card", quantity=3),
    CartLineConfig(item="Meat", quantity=2),
)
