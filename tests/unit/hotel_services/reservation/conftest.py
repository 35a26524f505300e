from datetime import datetime
from decimal import Decimal

import pytest

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.value_object import ReservationId, StayPeriod
from hotel_services.shared.domain import Money


@pytest.fixture
def create_reservation(room, customer):
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: ReservationStatus = ReservationStatus.SCHEDULED,
        reservation_id: str = "reservation-1",
        check_in: datetime = datetime(2024, 1, 10, 14, 0),
        check_out: datetime = datetime(2024, 1, 15, 12, 0),
        total: Decimal = Decimal("500"),
        room=room,
    ) -> Reservation:
        return Reservation(
            id=ReservationId(value=reservation_id),
            customer=customer,
            room=room,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            total=Money.of(total),
            status=status,
        )

    return _factory
