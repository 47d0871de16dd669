from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    計算は Decimal のまま行い、丸めは表示時（display_amount）だけ。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.display_amount()} {self.currency}"

    def multiply(self, factor: int) -> Money:
        """整数倍する（泊数・部屋数の掛け算用）"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    def display_amount(self) -> str:
        """通貨の補助単位に合わせて丸めた金額文字列"""
        exponent = Decimal(1).scaleb(-self.currency.minor_units)
        return str(self.amount.quantize(exponent, rounding=ROUND_HALF_UP))

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        return cls(amount, Currency.usd())
