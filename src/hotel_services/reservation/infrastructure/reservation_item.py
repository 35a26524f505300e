from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.value_object import (
    Customer,
    CustomerId,
    ReservationId,
    Room,
    RoomId,
    StayPeriod,
)
from hotel_services.shared.domain import Currency, Money
from hotel_services.shared.utils import to_decimal

ENTITY_TYPE = "RESERVATION"
TIMELINE_PARTITION = "RESERVATIONS"


def reservation_key(reservation_id: ReservationId | str) -> str:
    return f"RESERVATION#{reservation_id}"


def room_partition(room_id: RoomId | str) -> str:
    return f"ROOM#{room_id}"


def to_sort_key(value: datetime) -> str:
    """日時を辞書順で比較可能な ISO 8601 文字列にする"""
    return value.isoformat()


class ReservationItem(BaseModel):
    """DynamoDB に保存する予約アイテムのスキーマ

    - GSI1: 客室ごとのチェックイン時系列（重複チェック用）
    - GSI2: 全予約のチェックイン時系列（一覧・期間検索用）
    """

    model_config = ConfigDict(populate_by_name=True)

    pk: str = Field(..., alias="PK")
    sk: str = Field(..., alias="SK")
    entity_type: Literal["RESERVATION"] = ENTITY_TYPE
    gsi1pk: str = Field(..., alias="GSI1PK")
    gsi1sk: str = Field(..., alias="GSI1SK")
    gsi2pk: str = Field(default=TIMELINE_PARTITION, alias="GSI2PK")
    gsi2sk: str = Field(..., alias="GSI2SK")

    reservation_id: str = Field(..., min_length=1)
    customer_id: str | None = None
    customer_name: str | None = None
    room_id: str = Field(..., min_length=1)
    room_number: str
    daily_rate_amount: Decimal = Field(..., ge=0)
    currency: str = Field(..., pattern="^[A-Z]{3}$")
    check_in: datetime
    check_out: datetime
    total_amount: Decimal = Field(..., ge=0)
    status: ReservationStatus

    @field_validator("daily_rate_amount", "total_amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)

    @field_serializer("daily_rate_amount", "total_amount")
    def serialize_amount(self, v: Decimal) -> str:
        return str(v)

    @field_serializer("check_in", "check_out")
    def serialize_timestamp(self, v: datetime) -> str:
        return to_sort_key(v)

    @classmethod
    def from_entity(cls, reservation: Reservation) -> ReservationItem:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        room = reservation.room
        stay_period = reservation.stay_period
        if room.daily_rate is None:
            raise ValueError(f"Room {room.number} has no daily rate")
        key = reservation_key(reservation.id)
        check_in_key = to_sort_key(stay_period.check_in)
        customer = reservation.customer

        return cls(
            pk=key,
            sk=key,
            gsi1pk=room_partition(room.id),
            gsi1sk=check_in_key,
            gsi2sk=check_in_key,
            reservation_id=str(reservation.id),
            customer_id=str(customer.id) if customer else None,
            customer_name=customer.name if customer else None,
            room_id=str(room.id),
            room_number=room.number,
            daily_rate_amount=room.daily_rate.amount,
            currency=str(reservation.total.currency),
            check_in=stay_period.check_in,
            check_out=stay_period.check_out,
            total_amount=reservation.total.amount,
            status=reservation.status,
        )

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    def to_entity(self) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(self.currency)
        customer = None
        if self.customer_id:
            customer = Customer(
                id=CustomerId(value=self.customer_id),
                name=self.customer_name or "",
            )

        return Reservation(
            id=ReservationId(value=self.reservation_id),
            customer=customer,
            room=Room(
                id=RoomId(value=self.room_id),
                number=self.room_number,
                daily_rate=Money(amount=self.daily_rate_amount, currency=currency),
            ),
            stay_period=StayPeriod(check_in=self.check_in, check_out=self.check_out),
            total=Money(amount=self.total_amount, currency=currency),
            status=self.status,
        )
