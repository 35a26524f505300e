from datetime import datetime, timezone
from decimal import Decimal

import pytest

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from hotel_services.shared.domain import Money
from hotel_services.shared.domain.exception import ValidationException


class TestReservationFactory:
    @pytest.fixture
    def details(self, room, customer) -> ReservationDetails:
        return {
            "customer": customer,
            "room": room,
            "check_in": datetime(2024, 1, 10, 14, 0),
            "check_out": datetime(2024, 1, 12, 14, 0),
        }

    def test_create_reservation(self, details, customer):
        reservation = ReservationFactory().create(details)

        assert isinstance(reservation, Reservation)
        assert reservation.customer == customer
        assert reservation.status == ReservationStatus.SCHEDULED
        assert reservation.stay_period.days() == 2
        assert reservation.total == Money.of(200)

    def test_same_day_stay_is_charged_one_day(self, details):
        details["check_in"] = datetime(2024, 1, 10, 9, 0)
        details["check_out"] = datetime(2024, 1, 10, 18, 0)

        reservation = ReservationFactory().create(details)

        assert reservation.total == Money.of(100)

    def test_total_keeps_room_currency(self, details, create_room):
        details["room"] = create_room(daily_rate=Decimal("80.50"))

        reservation = ReservationFactory().create(details)

        assert reservation.total == Money.of("161.00")

    def test_customer_is_optional(self, details):
        del details["customer"]
        assert ReservationFactory().create(details).customer is None

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("check_in", "Check-in date is required"),
            ("check_out", "Check-out date is required"),
            ("room", "Room is required"),
        ],
    )
    def test_missing_required_field_raises_error(self, details, field, message):
        details[field] = None
        with pytest.raises(ValidationException, match=message):
            ReservationFactory().create(details)

    def test_missing_daily_rate_raises_error(self, details, create_room):
        details["room"] = create_room(daily_rate=None)
        with pytest.raises(ValidationException, match="daily rate cannot be null"):
            ReservationFactory().create(details)

    @pytest.mark.parametrize(
        "check_out", [datetime(2024, 1, 10, 14, 0), datetime(2024, 1, 9, 14, 0)]
    )
    def test_checkout_not_after_checkin_raises_error(self, details, check_out):
        details["check_out"] = check_out
        with pytest.raises(
            ValidationException, match="Check-out must be after check-in"
        ):
            ReservationFactory().create(details)

    @pytest.mark.parametrize("field", ["check_in", "check_out"])
    def test_timezone_aware_datetime_raises_error(self, details, field):
        details[field] = details[field].replace(tzinfo=timezone.utc)
        with pytest.raises(ValidationException, match="timezone-naive"):
            ReservationFactory().create(details)
