from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class RoomId:
    """客室在庫のキー (hotel_id, room_number)"""

    hotel_id: UUID
    room_number: int


@dataclass(frozen=True)
class RoomByHotelAndDateKey:
    """ホテル・日付別予約ビューのキー (hotel_id, date, room_number)

    パーティション: (hotel_id, date) / クラスタリング: room_number
    """

    hotel_id: UUID
    date: date
    room_number: int


@dataclass(frozen=True)
class RoomByGuestAndDateKey:
    """宿泊客・日付別予約ビューのキー (guest_id, date, hotel_id, room_number)

    パーティション: (guest_id, date) / クラスタリング: (hotel_id, room_number)
    """

    guest_id: UUID
    date: date
    hotel_id: UUID
    room_number: int
