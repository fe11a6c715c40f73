"""Customer account holding a spendable balance."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from checkoutctl.domain.errors import InsufficientFunds


@dataclass
class Account:
    holder: str
    balance: Decimal

    def __post_init__(self) -> None:
        self.balance = Decimal(self.balance)

    def can_afford(self, amount: Decimal) -> bool:
        return amount <= self.balance

    def charge(self, amount: Decimal) -> None:
        """Deduct *amount* from the balance.

        Raises:
            InsufficientFunds: *amount* exceeds the balance. Nothing is
                deducted.
        """
        if not self.can_afford(amount):
            raise InsufficientFunds(self.holder, amount=amount, balance=self.balance)
        self.balance -= amount
