from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID

from reservations.room.domain.value_object.booking_request import BookingRequest
from reservations.room.domain.value_object.composite_keys import RoomByGuestAndDateKey
from reservations.room.domain.value_object.confirmation_number import (
    ConfirmationNumber,
)


@dataclass(frozen=True)
class RoomByGuestAndDate:
    """宿泊客・日付別の予約ビュー"""

    guest_id: UUID
    date: date
    hotel_id: UUID
    room_number: int
    confirmation_number: ConfirmationNumber | None = None

    @property
    def key(self) -> RoomByGuestAndDateKey:
        return RoomByGuestAndDateKey(
            guest_id=self.guest_id,
            date=self.date,
            hotel_id=self.hotel_id,
            room_number=self.room_number,
        )

    @classmethod
    def from_booking_request(cls, request: BookingRequest) -> RoomByGuestAndDate:
        return cls(
            guest_id=request.guest_id,
            date=request.date,
            hotel_id=request.hotel_id,
            room_number=request.room_number,
        )

    def with_confirmation_number(
        self, confirmation_number: ConfirmationNumber
    ) -> RoomByGuestAndDate:
        return replace(self, confirmation_number=confirmation_number)
