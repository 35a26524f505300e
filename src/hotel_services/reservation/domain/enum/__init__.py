from .reservation_status import ACTIVE_STATUSES as ACTIVE_STATUSES
from .reservation_status import CLOSING_STATUSES as CLOSING_STATUSES
from .reservation_status import ReservationStatus as ReservationStatus
from .room_availability import RoomAvailability as RoomAvailability
