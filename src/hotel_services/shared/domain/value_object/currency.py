from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: BRL, USD, JPY
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"BRL", "USD", "JPY"})
    DEFAULT: ClassVar[str] = "BRL"

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def default(cls) -> Currency:
        return cls(cls.DEFAULT)

    @classmethod
    def brl(cls) -> Currency:
        """ブラジルレアル"""
        return cls("BRL")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
