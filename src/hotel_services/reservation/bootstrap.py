import os
from collections.abc import Callable
from datetime import datetime

from hotel_services.reservation.applications import ReservationManager
from hotel_services.reservation.domain.directory import (
    CustomerDirectory,
    RoomDirectory,
)
from hotel_services.reservation.domain.repository import ReservationRepository
from hotel_services.reservation.infrastructure import (
    DynamoDBReservationRepository,
    InMemoryReservationRepository,
)


def build_reservation_repository(
    table_name: str | None = None,
) -> ReservationRepository:
    """RESERVATION_STORE に応じてレポジトリを生成する（既定: dynamodb）"""
    store = os.getenv("RESERVATION_STORE", "dynamodb").lower()
    if store == "dynamodb":
        return DynamoDBReservationRepository(table_name=table_name)
    if store == "memory":
        return InMemoryReservationRepository()
    raise ValueError(f"Unsupported reservation store: {store}")


def build_reservation_manager(
    room_directory: RoomDirectory,
    customer_directory: CustomerDirectory,
    table_name: str | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ReservationManager:
    """依存を組み立てて ReservationManager を返す"""
    return ReservationManager(
        repository=build_reservation_repository(table_name),
        room_directory=room_directory,
        customer_directory=customer_directory,
        clock=clock,
    )
