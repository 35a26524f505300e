from .enum import ACTIVE_STATUSES as ACTIVE_STATUSES
from .enum import CLOSING_STATUSES as CLOSING_STATUSES
from .enum import ReservationStatus as ReservationStatus
from .enum import RoomAvailability as RoomAvailability
from .value_object import Customer as Customer
from .value_object import CustomerId as CustomerId
from .value_object import ReservationId as ReservationId
from .value_object import Room as Room
from .value_object import RoomId as RoomId
from .value_object import StayPeriod as StayPeriod
from .entity import Reservation as Reservation
from .factory import ReservationDetails as ReservationDetails
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .directory import CustomerDirectory as CustomerDirectory
from .directory import RoomDirectory as RoomDirectory
