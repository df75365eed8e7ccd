from .repository import (
    RoomByGuestAndDateRepository,
    RoomByHotelAndDateRepository,
    RoomRepository,
)
from .value_object import (
    BookingRequest,
    ConfirmationNumber,
    Room,
    RoomByGuestAndDate,
    RoomByGuestAndDateKey,
    RoomByHotelAndDate,
    RoomByHotelAndDateKey,
    RoomId,
)

__all__ = [
    "BookingRequest",
    "ConfirmationNumber",
    "Room",
    "RoomByGuestAndDate",
    "RoomByGuestAndDateKey",
    "RoomByGuestAndDateRepository",
    "RoomByHotelAndDate",
    "RoomByHotelAndDateKey",
    "RoomByHotelAndDateRepository",
    "RoomId",
    "RoomRepository",
]
