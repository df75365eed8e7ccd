from datetime import date, datetime
from uuid import UUID

from aws_lambda_powertools import Logger

from reservations.room.domain.repository import RoomByGuestAndDateRepository
from reservations.room.domain.value_object import RoomByHotelAndDate
from reservations.shared.domain import (
    InvalidInputException,
    ResourceNotFoundException,
)
from reservations.shared.utils import make_string

logger = Logger(child=True)


class FindBookedRoomsService:
    """宿泊客の予約済み客室を検索するユースケース"""

    def __init__(self, repository: RoomByGuestAndDateRepository) -> None:
        self._repository = repository

    def find_booked_rooms_for_guest_and_date(
        self, guest_id: UUID | None, booking_date: date | None
    ) -> list[RoomByHotelAndDate]:
        """宿泊客別ビューを検索し、ホテル・日付別の形に射影して返す"""
        if guest_id is None:
            raise InvalidInputException(
                "Cannot perform search of the booked room for the null guest id"
            )
        if not isinstance(guest_id, UUID):
            raise InvalidInputException(
                "Cannot perform search of the booked room for invalid guest id "
                f"'{guest_id}'"
            )
        if booking_date is None:
            raise InvalidInputException(
                "Cannot perform search of the booked room for the null reservation date"
            )
        if not isinstance(booking_date, date) or isinstance(booking_date, datetime):
            raise InvalidInputException(
                "Cannot perform search of the booked room for invalid reservation "
                f"date '{booking_date}'"
            )

        logger.debug(
            "Going to look for the booked rooms",
            extra={"guest_id": str(guest_id), "date": booking_date.isoformat()},
        )
        booked_rooms = [
            RoomByHotelAndDate.from_room_by_guest_and_date(row)
            for row in self._repository.find_by_guest_and_date(guest_id, booking_date)
        ]
        if not booked_rooms:
            raise ResourceNotFoundException(
                f"Cannot find the booked rooms for the customer id '{guest_id}' "
                f"and given date '{booking_date.isoformat()}'"
            )

        logger.debug(
            "Found booked rooms for the guest",
            extra={"guest_id": str(guest_id), "rooms": make_string(booked_rooms)},
        )
        return booked_rooms
