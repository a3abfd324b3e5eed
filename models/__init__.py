from models.room import Room, RoomStatus, RoomType
from models.booking import Booking, make_booking_id

__all__ = [
    "Room",
    "RoomStatus",
    "RoomType",
    "Booking",
    "make_booking_id",
]
