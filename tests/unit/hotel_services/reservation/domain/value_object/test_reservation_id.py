import pytest

from hotel_services.reservation.domain.value_object import ReservationId


class TestReservationId:
    def test_str_returns_value(self):
        assert str(ReservationId(value="reservation-1")) == "reservation-1"

    def test_generate_is_unique(self):
        assert ReservationId.generate() != ReservationId.generate()

    def test_empty_value_raises_error(self):
        with pytest.raises(ValueError, match="ReservationId cannot be empty"):
            ReservationId(value="")
