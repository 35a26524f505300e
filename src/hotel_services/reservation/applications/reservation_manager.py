from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from threading import Lock

from hotel_services.reservation.domain.directory import (
    CustomerDirectory,
    RoomDirectory,
)
from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import (
    ACTIVE_STATUSES,
    CLOSING_STATUSES,
    ReservationStatus,
    RoomAvailability,
)
from hotel_services.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from hotel_services.reservation.domain.repository import ReservationRepository
from hotel_services.reservation.domain.value_object import (
    CustomerId,
    ReservationId,
    RoomId,
)
from hotel_services.shared.domain.exception import (
    ConflictException,
    OptimisticLockException,
    ResourceNotFoundException,
    ValidationException,
)
from hotel_services.shared.utils import get_logger

logger = get_logger("reservation")


class ReservationManager:
    """予約ライフサイクルのユースケース

    ステータスはバックグラウンドで更新せず、参照（list_all / get_by_id）の
    たびに現在時刻から導出して保存する。
    """

    def __init__(
        self,
        repository: ReservationRepository,
        room_directory: RoomDirectory,
        customer_directory: CustomerDirectory,
        factory: ReservationFactory | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._room_directory = room_directory
        self._customer_directory = customer_directory
        self._factory = factory or ReservationFactory()
        self._clock = clock or datetime.now
        self._room_locks: dict[RoomId, Lock] = {}
        self._room_locks_guard = Lock()

    def derive_status(
        self, reservation: Reservation, now: datetime | None = None
    ) -> Reservation:
        """現在時刻に合わせてステータスを更新し、変化があれば客室の空き状況も反映する"""
        previous = reservation.status
        if not reservation.sync_status(now or self._clock()):
            return reservation

        try:
            self._repository.update(reservation, expected_status=previous)
        except OptimisticLockException:
            # 他の参照やキャンセルが先に書き込んだ場合はそちらを正とする
            return self._reload_after_conflict(reservation, previous)

        self._room_directory.set_availability(
            reservation.room.id, RoomAvailability.for_status(reservation.status)
        )
        logger.info(
            "Reservation status changed",
            extra={
                "reservation_id": str(reservation.id),
                "room_id": str(reservation.room.id),
                "from_status": previous.value,
                "status": reservation.status.value,
            },
        )
        return reservation

    def list_all(self) -> list[Reservation]:
        """全予約を取得する"""
        now = self._clock()
        return [self.derive_status(r, now) for r in self._repository.find_all()]

    def get_by_id(self, reservation_id: ReservationId) -> Reservation:
        """予約を1件取得する"""
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(
                f"Reservation not found: {reservation_id}"
            )
        return self.derive_status(reservation)

    def create(self, details: ReservationDetails) -> Reservation:
        """予約を作成する

        同一客室の有効な予約（SCHEDULED / IN_USE）と期間が重なる場合は
        ConflictException を送出する。客室の空き状況はここでは変更しない。
        """
        reservation = self._factory.create(details)
        room = reservation.room
        stay_period = reservation.stay_period

        with self._room_lock(room.id):
            if self._repository.exists_overlap(
                room.id,
                ACTIVE_STATUSES,
                check_out=stay_period.check_out,
                check_in=stay_period.check_in,
            ):
                logger.warning(
                    "Room already booked for requested period",
                    extra={
                        "room_id": str(room.id),
                        "check_in": stay_period.check_in.isoformat(),
                        "check_out": stay_period.check_out.isoformat(),
                    },
                )
                raise ConflictException(
                    f"Room {room.number} is already booked for this period"
                )
            self._repository.save(reservation)

        logger.info(
            "Reservation created",
            extra={
                "reservation_id": str(reservation.id),
                "room_id": str(room.id),
                "days": stay_period.days(),
                "total": str(reservation.total),
            },
        )
        return reservation

    def create_by_ids(
        self,
        customer_id: CustomerId,
        room_number: str,
        check_in: datetime,
        check_out: datetime,
    ) -> Reservation:
        """顧客IDと客室番号から予約を作成する"""
        customer = self._customer_directory.get_by_id(customer_id)
        room = self._room_directory.get_by_number(room_number)
        details: ReservationDetails = {
            "customer": customer,
            "room": room,
            "check_in": check_in,
            "check_out": check_out,
        }
        return self.create(details)

    def close(
        self, reservation_id: ReservationId, status: ReservationStatus
    ) -> Reservation:
        """予約をクローズし、客室を解放する"""
        if status not in CLOSING_STATUSES:
            raise ValidationException(f"Invalid status: {status.value}")

        reservation = self.get_by_id(reservation_id)
        reservation.close(status)
        self._release(reservation)
        return reservation

    def cancel(self, reservation_id: ReservationId) -> None:
        """予約をキャンセルする（物理削除の代わり）"""
        reservation = self.get_by_id(reservation_id)
        reservation.cancel()
        self._release(reservation)

    def list_by_date_range(self, start_date: date, end_date: date) -> list[Reservation]:
        """チェックイン日が start_date から end_date（両端含む）の予約を取得する"""
        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date + timedelta(days=1), time.min)
        return self._repository.find_by_check_in_between(start, end)

    def list_occupied(self) -> list[Reservation]:
        """利用中（IN_USE）の予約を取得する"""
        return self._repository.find_by_status(ReservationStatus.IN_USE)

    def _reload_after_conflict(
        self, reservation: Reservation, previous: ReservationStatus
    ) -> Reservation:
        current = self._repository.find_by_id(reservation.id)
        if current is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation.id}")
        logger.info(
            "Reservation status already updated by another request",
            extra={
                "reservation_id": str(reservation.id),
                "from_status": previous.value,
                "status": current.status.value,
            },
        )
        return current

    def _release(self, reservation: Reservation) -> None:
        self._repository.update(reservation)
        self._room_directory.set_availability(
            reservation.room.id, RoomAvailability.FREE
        )
        logger.info(
            "Reservation closed",
            extra={
                "reservation_id": str(reservation.id),
                "room_id": str(reservation.room.id),
                "status": reservation.status.value,
            },
        )

    @contextmanager
    def _room_lock(self, room_id: RoomId) -> Iterator[None]:
        # 重複チェックと保存の間に同じ客室の予約が割り込まないようにする
        # ロックは客室ごとに1つで、manager の生存期間中は破棄しない（客室数で上限が決まる）
        with self._room_locks_guard:
            lock = self._room_locks.setdefault(room_id, Lock())
        with lock:
            yield
