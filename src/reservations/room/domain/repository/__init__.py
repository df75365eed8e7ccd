from .room_by_guest_and_date_repository import RoomByGuestAndDateRepository
from .room_by_hotel_and_date_repository import RoomByHotelAndDateRepository
from .room_repository import RoomRepository

__all__ = [
    "RoomByGuestAndDateRepository",
    "RoomByHotelAndDateRepository",
    "RoomRepository",
]
