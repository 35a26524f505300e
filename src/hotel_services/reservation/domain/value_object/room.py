from dataclasses import dataclass

from hotel_services.reservation.domain.enum import RoomAvailability
from hotel_services.shared.domain import Money


@dataclass(frozen=True)
class RoomId:
    """客室ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("RoomId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Room:
    """客室（RoomDirectory が所有する。予約側では参照と空き状況の更新のみ）

    daily_rate は未設定のまま渡されることがあり、予約作成時に検証する。
    """

    id: RoomId
    number: str
    daily_rate: Money | None
    availability: RoomAvailability = RoomAvailability.FREE
