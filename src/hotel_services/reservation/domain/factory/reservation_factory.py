from datetime import datetime
from typing import TypedDict

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.value_object import (
    Customer,
    ReservationId,
    Room,
    StayPeriod,
)
from hotel_services.shared.domain.exception import ValidationException


class ReservationDetails(TypedDict, total=False):
    """予約作成の入力データ（未設定項目は None で渡されうる）"""

    customer: Customer | None
    room: Room | None
    check_in: datetime | None
    check_out: datetime | None


class ReservationFactory:
    """予約エンティティを生成するFactory"""

    def create(self, details: ReservationDetails) -> Reservation:
        """入力を検証し、料金を計算した新規予約を生成する"""
        check_in = details.get("check_in")
        check_out = details.get("check_out")
        room = details.get("room")

        if check_in is None:
            raise ValidationException("Check-in date is required")
        if check_out is None:
            raise ValidationException("Check-out date is required")
        if room is None:
            raise ValidationException("Room is required")
        if room.daily_rate is None:
            raise ValidationException("Room daily rate cannot be null")
        if check_in.tzinfo is not None or check_out.tzinfo is not None:
            # 日時はホテル現地時刻（タイムゾーンなし）で扱う
            raise ValidationException("Check-in and check-out must be timezone-naive")
        if check_out <= check_in:
            raise ValidationException("Check-out must be after check-in")

        stay_period = StayPeriod(check_in=check_in, check_out=check_out)

        return Reservation(
            id=ReservationId.generate(),
            customer=details.get("customer"),
            room=room,
            stay_period=stay_period,
            total=room.daily_rate.multiply(stay_period.days()),
            status=ReservationStatus.SCHEDULED,
        )
