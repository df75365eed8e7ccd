from .booking_request import BookingRequest
from .composite_keys import RoomByGuestAndDateKey, RoomByHotelAndDateKey, RoomId
from .confirmation_number import ConfirmationNumber
from .room import Room
from .room_by_guest_and_date import RoomByGuestAndDate
from .room_by_hotel_and_date import RoomByHotelAndDate

__all__ = [
    "BookingRequest",
    "ConfirmationNumber",
    "Room",
    "RoomByGuestAndDate",
    "RoomByGuestAndDateKey",
    "RoomByHotelAndDate",
    "RoomByHotelAndDateKey",
    "RoomId",
]
