from __future__ import annotations

from enum import Enum

from .reservation_status import ACTIVE_STATUSES, ReservationStatus


class RoomAvailability(str, Enum):
    """客室の空き状況"""

    FREE = "FREE"
    UNAVAILABLE = "UNAVAILABLE"

    @classmethod
    def for_status(cls, status: ReservationStatus) -> RoomAvailability:
        """予約ステータスに対応する客室の空き状況"""
        if status in ACTIVE_STATUSES:
            return cls.UNAVAILABLE
        return cls.FREE
