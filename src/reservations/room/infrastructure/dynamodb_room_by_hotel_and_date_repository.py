from datetime import date
from uuid import UUID

from reservations.room.domain.repository import RoomByHotelAndDateRepository
from reservations.room.domain.value_object import (
    RoomByHotelAndDate,
    RoomByHotelAndDateKey,
)
from reservations.shared.infrastructure import DynamoDBRepository


def _key(key: RoomByHotelAndDateKey) -> tuple[str, str]:
    return (
        f"HOTEL#{key.hotel_id}#DATE#{key.date.isoformat()}",
        f"ROOM#{key.room_number}",
    )


class DynamoDBRoomByHotelAndDateRepository(
    DynamoDBRepository, RoomByHotelAndDateRepository
):
    """DynamoDBを使用したRoomByHotelAndDateRepository の具象実装"""

    def insert(self, room: RoomByHotelAndDate) -> RoomByHotelAndDate:
        """同じキーの行は同じ内容で上書きする"""
        pk, sk = _key(room.key)
        self.table.put_item(
            Item={
                "PK": pk,
                "SK": sk,
                "entity_type": "ROOM_BY_HOTEL_AND_DATE",
                "hotel_id": str(room.hotel_id),
                "date": room.date.isoformat(),
                "room_number": room.room_number,
            }
        )
        return room

    def find_by_id(self, key: RoomByHotelAndDateKey) -> RoomByHotelAndDate | None:
        item = self._get(*_key(key))
        if not item:
            return None
        return RoomByHotelAndDate(
            hotel_id=UUID(item["hotel_id"]),
            date=date.fromisoformat(item["date"]),
            room_number=int(item["room_number"]),
        )

    def exists(self, key: RoomByHotelAndDateKey) -> bool:
        return self._exists(*_key(key))
