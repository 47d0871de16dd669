from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）と補助単位の桁数"""

    MINOR_UNITS: ClassVar[dict[str, int]] = {"EUR": 2, "JPY": 0, "USD": 2}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.MINOR_UNITS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def minor_units(self) -> int:
        """表示時の小数桁数（JPY は 0）"""
        return self.MINOR_UNITS[self.code]

    @classmethod
    def usd(cls) -> Currency:
        return cls("USD")
