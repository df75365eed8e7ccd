from uuid import UUID

from reservations.room.domain.repository import RoomRepository
from reservations.room.domain.value_object import Room, RoomId
from reservations.shared.infrastructure import DynamoDBRepository


def _key(room_id: RoomId) -> tuple[str, str]:
    return f"HOTEL#{room_id.hotel_id}", f"ROOM#{room_id.room_number}"


class DynamoDBRoomRepository(DynamoDBRepository, RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装"""

    def insert(self, room: Room) -> Room:
        """客室在庫をDBに保存する"""
        pk, sk = _key(room.id)
        item = {
            "PK": pk,
            "SK": sk,
            "entity_type": "ROOM",
            "hotel_id": str(room.hotel_id),
            "room_number": room.room_number,
        }
        self._put_if_absent(item, f"Room already exists: {room}")
        return room

    def find_by_id(self, room_id: RoomId) -> Room | None:
        item = self._get(*_key(room_id))
        if not item:
            return None
        return Room(
            hotel_id=UUID(item["hotel_id"]),
            room_number=int(item["room_number"]),
        )

    def exists(self, room_id: RoomId) -> bool:
        return self._exists(*_key(room_id))
