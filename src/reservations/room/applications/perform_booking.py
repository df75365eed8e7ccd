from datetime import date, datetime
from uuid import UUID

from aws_lambda_powertools import Logger

from reservations.room.domain.repository import (
    RoomByGuestAndDateRepository,
    RoomByHotelAndDateRepository,
)
from reservations.room.domain.value_object import (
    BookingRequest,
    ConfirmationNumber,
    RoomByGuestAndDate,
    RoomByHotelAndDate,
)
from reservations.shared.domain import (
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)
from reservations.shared.utils import validate

logger = Logger(child=True)


class PerformBookingService:
    """客室予約のユースケース

    received -> validated -> room-verified -> guest-conflict-checked -> confirmed

    2つのビューにまたがるトランザクションは無い。書き込み順は
    ホテル・日付別ビュー -> 宿泊客・日付別ビューで固定し、
    その間で失敗した場合はビューが食い違ったまま残る。
    """

    def __init__(
        self,
        room_by_hotel_and_date_repository: RoomByHotelAndDateRepository,
        room_by_guest_and_date_repository: RoomByGuestAndDateRepository,
    ) -> None:
        self._room_by_hotel_and_date_repository = room_by_hotel_and_date_repository
        self._room_by_guest_and_date_repository = room_by_guest_and_date_repository

    def perform_booking(self, booking_request: BookingRequest | None) -> BookingRequest:
        """予約を確定し、受け取ったリクエストをそのまま返す"""
        self._validate_booking_request(booking_request)
        room = RoomByHotelAndDate.from_booking_request(booking_request)
        booking = RoomByGuestAndDate.from_booking_request(booking_request)

        self._check_if_room_exists(room)
        self._check_if_booked(booking)

        confirmation_number = ConfirmationNumber.from_booking_request(booking_request)
        self._room_by_hotel_and_date_repository.insert(room)
        self._room_by_guest_and_date_repository.insert(
            booking.with_confirmation_number(confirmation_number)
        )
        logger.info(
            "Successfully booked the room",
            extra={
                "guest_id": str(booking_request.guest_id),
                "hotel_id": str(booking_request.hotel_id),
                "room_number": booking_request.room_number,
                "date": booking_request.date.isoformat(),
                "confirmation_number": str(confirmation_number),
            },
        )
        return booking_request

    def _validate_booking_request(self, booking_request: BookingRequest | None) -> None:
        if booking_request is None:
            raise InvalidInputException(
                "Cannot perform reservation for empty reservation request."
            )
        if not isinstance(booking_request.guest_id, UUID):
            raise InvalidInputException(
                "Cannot perform reservation with invalid guest id "
                f"'{booking_request.guest_id}'."
            )
        if not isinstance(booking_request.hotel_id, UUID):
            raise InvalidInputException(
                "Cannot perform reservation with invalid hotel id "
                f"'{booking_request.hotel_id}'."
            )
        # bool は int のサブクラスのため明示的に除外する
        room_number = booking_request.room_number
        if (
            not isinstance(room_number, int)
            or isinstance(room_number, bool)
            or room_number <= 0
        ):
            raise InvalidInputException(
                f"Cannot perform reservation with invalid room number '{room_number}'."
            )
        # datetime は date のサブクラスのため明示的に除外する
        booking_date = booking_request.date
        if not isinstance(booking_date, date) or isinstance(booking_date, datetime):
            raise InvalidInputException(
                "Cannot perform reservation with invalid reservation date "
                f"'{booking_request.date}'."
            )

    def _check_if_room_exists(self, room: RoomByHotelAndDate) -> None:
        validate(
            room,
            lambda r: self._room_by_hotel_and_date_repository.exists(r.key),
            lambda: ResourceNotFoundException(
                "The following room does not exists. "
                f"Room number: '{room.room_number}', hotel id: '{room.hotel_id}'"
            ),
        )

    def _check_if_booked(self, booking: RoomByGuestAndDate) -> None:
        validate(
            booking,
            lambda b: not self._room_by_guest_and_date_repository.exists(b.key),
            lambda: DuplicateResourceException(
                "The following room is already booked. "
                f"Room number: '{booking.room_number}', hotel id: '{booking.hotel_id}'"
            ),
        )
