from .customer import Customer as Customer
from .customer import CustomerId as CustomerId
from .reservation_id import ReservationId as ReservationId
from .room import Room as Room
from .room import RoomId as RoomId
from .stay_period import StayPeriod as StayPeriod
