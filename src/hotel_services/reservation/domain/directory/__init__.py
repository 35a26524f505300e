from .customer_directory import CustomerDirectory as CustomerDirectory
from .room_directory import RoomDirectory as RoomDirectory
