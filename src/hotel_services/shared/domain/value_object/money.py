from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, times: int) -> Money:
        """金額を整数倍する（日額 × 泊数など）"""
        if times < 0:
            raise ValueError("Multiplier cannot be negative")
        return Money(amount=self.amount * times, currency=self.currency)

    @classmethod
    def of(cls, amount: Decimal | int | str, currency_code: str | None = None) -> Money:
        """数値と通貨コードから Money を生成（通貨省略時は既定通貨）"""
        currency = Currency(currency_code) if currency_code else Currency.default()
        return cls(amount=Decimal(str(amount)), currency=currency)
