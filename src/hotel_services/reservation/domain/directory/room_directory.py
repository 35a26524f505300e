from abc import ABC, abstractmethod

from hotel_services.reservation.domain.enum import RoomAvailability
from hotel_services.reservation.domain.value_object import Room, RoomId


class RoomDirectory(ABC):
    """客室サービスのインターフェース"""

    @abstractmethod
    def get_by_number(self, number: str) -> Room:
        """客室番号で取得する（存在しなければ ResourceNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def set_availability(self, room_id: RoomId, availability: RoomAvailability) -> None:
        """客室の空き状況を更新する"""
        raise NotImplementedError
