from datetime import datetime, timedelta

import pytest

from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.shared.domain.exception import ValidationException

CHECK_IN = datetime(2024, 1, 10, 14, 0)
CHECK_OUT = datetime(2024, 1, 15, 12, 0)


class TestReservationStatusAt:
    """時刻からのステータス導出"""

    @pytest.mark.parametrize(
        ("now", "expected"),
        [
            (CHECK_IN - timedelta(days=3), ReservationStatus.SCHEDULED),
            (CHECK_IN - timedelta(microseconds=1), ReservationStatus.SCHEDULED),
            (CHECK_IN, ReservationStatus.IN_USE),
            (CHECK_OUT - timedelta(microseconds=1), ReservationStatus.IN_USE),
            (CHECK_OUT, ReservationStatus.FINISHED),
            (CHECK_OUT + timedelta(days=30), ReservationStatus.FINISHED),
        ],
    )
    def test_status_follows_clock(self, create_reservation, now, expected):
        reservation = create_reservation(check_in=CHECK_IN, check_out=CHECK_OUT)
        assert reservation.status_at(now) == expected

    @pytest.mark.parametrize(
        "status", [ReservationStatus.CANCELED, ReservationStatus.ABSENCE]
    )
    @pytest.mark.parametrize(
        "now",
        [CHECK_IN - timedelta(days=1), CHECK_IN, CHECK_OUT + timedelta(days=1)],
    )
    def test_terminal_status_never_changes(self, create_reservation, status, now):
        reservation = create_reservation(
            status=status, check_in=CHECK_IN, check_out=CHECK_OUT
        )
        assert reservation.status_at(now) == status
        assert reservation.sync_status(now) is False
        assert reservation.status == status

    def test_status_at_has_no_side_effect(self, create_reservation):
        reservation = create_reservation(check_in=CHECK_IN, check_out=CHECK_OUT)
        reservation.status_at(CHECK_OUT)
        assert reservation.status == ReservationStatus.SCHEDULED


class TestReservationSyncStatus:
    def test_sync_reports_change(self, create_reservation):
        reservation = create_reservation(check_in=CHECK_IN, check_out=CHECK_OUT)
        assert reservation.sync_status(CHECK_IN + timedelta(hours=1)) is True
        assert reservation.status == ReservationStatus.IN_USE

    def test_sync_without_change(self, create_reservation):
        reservation = create_reservation(check_in=CHECK_IN, check_out=CHECK_OUT)
        assert reservation.sync_status(CHECK_IN - timedelta(hours=1)) is False

    def test_finished_can_move_back_to_in_use(self, create_reservation):
        reservation = create_reservation(
            status=ReservationStatus.FINISHED, check_in=CHECK_IN, check_out=CHECK_OUT
        )
        assert reservation.sync_status(CHECK_IN) is True
        assert reservation.status == ReservationStatus.IN_USE


class TestReservationClose:
    @pytest.mark.parametrize(
        "status",
        [
            ReservationStatus.FINISHED,
            ReservationStatus.CANCELED,
            ReservationStatus.ABSENCE,
        ],
    )
    def test_close_with_closing_status(self, create_reservation, status):
        reservation = create_reservation()
        reservation.close(status)
        assert reservation.status == status

    @pytest.mark.parametrize(
        "status", [ReservationStatus.SCHEDULED, ReservationStatus.IN_USE]
    )
    def test_close_with_active_status_raises_error(self, create_reservation, status):
        reservation = create_reservation()
        with pytest.raises(ValidationException, match="Invalid status"):
            reservation.close(status)
        assert reservation.status == ReservationStatus.SCHEDULED

    def test_cancel(self, create_reservation):
        reservation = create_reservation(status=ReservationStatus.IN_USE)
        reservation.cancel()
        assert reservation.status == ReservationStatus.CANCELED

    def test_reservations_with_same_id_are_equal(self, create_reservation):
        assert create_reservation(total=1) == create_reservation(total=2)
