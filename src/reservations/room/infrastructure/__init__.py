from .dynamodb_room_by_guest_and_date_repository import (
    DynamoDBRoomByGuestAndDateRepository,
)
from .dynamodb_room_by_hotel_and_date_repository import (
    DynamoDBRoomByHotelAndDateRepository,
)
from .dynamodb_room_repository import DynamoDBRoomRepository

__all__ = [
    "DynamoDBRoomByGuestAndDateRepository",
    "DynamoDBRoomByHotelAndDateRepository",
    "DynamoDBRoomRepository",
]
