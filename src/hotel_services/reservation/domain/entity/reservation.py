from datetime import datetime

from hotel_services.reservation.domain.enum import CLOSING_STATUSES, ReservationStatus
from hotel_services.reservation.domain.value_object import (
    Customer,
    ReservationId,
    Room,
    StayPeriod,
)
from hotel_services.shared.domain import Entity, Money
from hotel_services.shared.domain.exception import ValidationException


class Reservation(Entity[ReservationId]):
    """客室予約エンティティ

    物理削除はせず、キャンセルもステータス変更として扱う。
    """

    def __init__(
        self,
        id: ReservationId,
        customer: Customer | None,
        room: Room,
        stay_period: StayPeriod,
        total: Money,
        status: ReservationStatus = ReservationStatus.SCHEDULED,
    ) -> None:
        super().__init__(id)
        self._customer = customer
        self._room = room
        self._stay_period = stay_period
        self._total = total
        self._status = status

    @property
    def customer(self) -> Customer | None:
        return self._customer

    @property
    def room(self) -> Room:
        return self._room

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def total(self) -> Money:
        return self._total

    @property
    def status(self) -> ReservationStatus:
        return self._status

    def status_at(self, now: datetime) -> ReservationStatus:
        """指定時刻におけるあるべきステータスを返す（副作用なし）"""
        if self._status.is_terminal():
            return self._status
        if now < self._stay_period.check_in:
            return ReservationStatus.SCHEDULED
        if now < self._stay_period.check_out:
            return ReservationStatus.IN_USE
        return ReservationStatus.FINISHED

    def sync_status(self, now: datetime) -> bool:
        """現在時刻に合わせてステータスを更新し、変化があったかを返す"""
        target = self.status_at(now)
        if target == self._status:
            return False
        self._status = target
        return True

    def close(self, status: ReservationStatus) -> None:
        """予約をクローズする（FINISHED / CANCELED / ABSENCE のみ）"""
        if status not in CLOSING_STATUSES:
            raise ValidationException(f"Invalid status: {status.value}")
        self._status = status

    def cancel(self) -> None:
        """予約をキャンセルする"""
        self.close(ReservationStatus.CANCELED)
