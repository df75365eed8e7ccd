from datetime import date, datetime
from uuid import UUID

from aws_lambda_powertools import Logger

from reservations.hotel.domain.repository import HotelRepository
from reservations.room.domain.repository import (
    RoomByHotelAndDateRepository,
    RoomRepository,
)
from reservations.room.domain.value_object import Room, RoomByHotelAndDate
from reservations.shared.domain import (
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)
from reservations.shared.utils import validate

logger = Logger(child=True)


class AddRoomService:
    """客室在庫の登録と日付別の予約枠の登録"""

    def __init__(
        self,
        hotel_repository: HotelRepository,
        room_repository: RoomRepository,
        room_by_hotel_and_date_repository: RoomByHotelAndDateRepository,
    ) -> None:
        self._hotel_repository = hotel_repository
        self._room_repository = room_repository
        self._room_by_hotel_and_date_repository = room_by_hotel_and_date_repository

    def add_room_to_hotel(self, room: Room | None) -> Room:
        """ホテルに客室を登録する"""
        self._validate_room(room)
        validate(
            room,
            lambda r: self._hotel_repository.exists(r.hotel_id),
            lambda: ResourceNotFoundException(
                f"Cannot add the room to the unknown hotel '{room.hotel_id}'"
            ),
        )
        validate(
            room,
            lambda r: not self._room_repository.exists(r.id),
            lambda: DuplicateResourceException(
                f"The room is already inserted in DB. Room info '{room}'"
            ),
        )

        saved_room = self._room_repository.insert(room)
        logger.info(
            "Successfully added the new room",
            extra={
                "hotel_id": str(saved_room.hotel_id),
                "room_number": saved_room.room_number,
            },
        )
        return saved_room

    def open_room_for_date(
        self, room: Room | None, booking_date: date | None
    ) -> RoomByHotelAndDate:
        """登録済みの客室を指定日に予約可能として登録する"""
        self._validate_room(room)
        if booking_date is None:
            raise InvalidInputException(
                "Cannot open the room for booking with empty date."
            )
        if not isinstance(booking_date, date) or isinstance(booking_date, datetime):
            raise InvalidInputException(
                f"Cannot open the room for booking with invalid date '{booking_date}'."
            )
        validate(
            room,
            lambda r: self._room_repository.exists(r.id),
            lambda: ResourceNotFoundException(
                "The following room does not exists. "
                f"Room number: '{room.room_number}', hotel id: '{room.hotel_id}'"
            ),
        )

        room_by_hotel_and_date = RoomByHotelAndDate(
            hotel_id=room.hotel_id,
            date=booking_date,
            room_number=room.room_number,
        )
        return self._room_by_hotel_and_date_repository.insert(room_by_hotel_and_date)

    def _validate_room(self, room: Room | None) -> None:
        if room is None:
            raise InvalidInputException("Cannot add the empty room info.")
        if not isinstance(room.hotel_id, UUID):
            raise InvalidInputException("Cannot add room info with empty hotel id.")
        if (
            not isinstance(room.room_number, int)
            or isinstance(room.room_number, bool)
            or room.room_number <= 0
        ):
            raise InvalidInputException(
                f"Cannot add room info with invalid room number '{room.room_number}'."
            )
