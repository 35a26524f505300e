from abc import abstractmethod
from collections.abc import Iterable
from datetime import datetime

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.value_object import ReservationId, RoomId
from hotel_services.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """予約を新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> None:
        """予約のステータスを更新する

        expected_status を指定した場合、保存済みのステータスが一致しなければ
        OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def exists_overlap(
        self,
        room_id: RoomId,
        statuses: Iterable[ReservationStatus],
        check_out: datetime,
        check_in: datetime,
    ) -> bool:
        """同じ客室で期間が重なる予約があるか

        条件: 既存.check_in <= check_out かつ 既存.check_out >= check_in
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_check_in_between(
        self, start: datetime, end: datetime
    ) -> list[Reservation]:
        """チェックイン日時が [start, end) に入る予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: ReservationStatus) -> list[Reservation]:
        """保存済みステータスで検索する"""
        raise NotImplementedError
