from collections.abc import Iterable
from copy import deepcopy
from datetime import datetime

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.repository import ReservationRepository
from hotel_services.reservation.domain.value_object import (
    ReservationId,
    RoomId,
    StayPeriod,
)
from hotel_services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)


class InMemoryReservationRepository(ReservationRepository):
    """メモリ上に予約を保持する ReservationRepository の実装

    保存時と取得時にコピーを取り、呼び出し側の変更が保存内容に漏れないようにする。
    """

    def __init__(self) -> None:
        self._reservations: dict[ReservationId, Reservation] = {}

    def save(self, reservation: Reservation) -> None:
        if reservation.id in self._reservations:
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            )
        self._reservations[reservation.id] = deepcopy(reservation)

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        reservation = self._reservations.get(reservation_id)
        return deepcopy(reservation) if reservation else None

    def find_all(self) -> list[Reservation]:
        return self._sorted(self._reservations.values())

    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> None:
        stored = self._reservations.get(reservation.id)
        if stored is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation.id}")
        if expected_status is not None and stored.status != expected_status:
            raise OptimisticLockException(
                f"Reservation status conflict: "
                f"expected {expected_status}, "
                f"reservation_id={reservation.id}"
            )
        self._reservations[reservation.id] = deepcopy(reservation)

    def exists_overlap(
        self,
        room_id: RoomId,
        statuses: Iterable[ReservationStatus],
        check_out: datetime,
        check_in: datetime,
    ) -> bool:
        requested = StayPeriod(check_in=check_in, check_out=check_out)
        wanted = set(statuses)
        return any(
            r.room.id == room_id
            and r.status in wanted
            and r.stay_period.overlaps(requested)
            for r in self._reservations.values()
        )

    def find_by_check_in_between(
        self, start: datetime, end: datetime
    ) -> list[Reservation]:
        return self._sorted(
            r
            for r in self._reservations.values()
            if start <= r.stay_period.check_in < end
        )

    def find_by_status(self, status: ReservationStatus) -> list[Reservation]:
        return self._sorted(
            r for r in self._reservations.values() if r.status == status
        )

    def _sorted(self, reservations: Iterable[Reservation]) -> list[Reservation]:
        return [
            deepcopy(r)
            for r in sorted(reservations, key=lambda r: r.stay_period.check_in)
        ]
