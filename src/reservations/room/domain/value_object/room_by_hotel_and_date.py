from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from reservations.room.domain.value_object.booking_request import BookingRequest
from reservations.room.domain.value_object.composite_keys import RoomByHotelAndDateKey

if TYPE_CHECKING:
    from reservations.room.domain.value_object.room_by_guest_and_date import (
        RoomByGuestAndDate,
    )


@dataclass(frozen=True)
class RoomByHotelAndDate:
    """ホテル・日付別の客室ビュー

    行の存在が「その日その部屋が予約可能として登録済み」を表す。
    """

    hotel_id: UUID
    date: date
    room_number: int

    @property
    def key(self) -> RoomByHotelAndDateKey:
        return RoomByHotelAndDateKey(
            hotel_id=self.hotel_id, date=self.date, room_number=self.room_number
        )

    @classmethod
    def from_booking_request(cls, request: BookingRequest) -> RoomByHotelAndDate:
        return cls(
            hotel_id=request.hotel_id,
            date=request.date,
            room_number=request.room_number,
        )

    @classmethod
    def from_room_by_guest_and_date(
        cls, row: RoomByGuestAndDate
    ) -> RoomByHotelAndDate:
        """宿泊客別ビューの行を射影する（確認番号は落とす）"""
        return cls(hotel_id=row.hotel_id, date=row.date, room_number=row.room_number)

    def __str__(self) -> str:
        return (
            f"RoomByHotelAndDate(hotel_id={self.hotel_id}, "
            f"date={self.date.isoformat()}, room_number={self.room_number})"
        )
