from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """顧客ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CustomerId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Customer:
    """顧客（CustomerDirectory が所有する参照専用データ）"""

    id: CustomerId
    name: str = ""
