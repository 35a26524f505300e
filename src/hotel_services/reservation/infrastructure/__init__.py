from .dynamodb_reservation_repository import (
    DynamoDBReservationRepository as DynamoDBReservationRepository,
)
from .in_memory_reservation_repository import (
    InMemoryReservationRepository as InMemoryReservationRepository,
)
from .reservation_item import ReservationItem as ReservationItem
