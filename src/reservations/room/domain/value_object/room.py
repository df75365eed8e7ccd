from dataclasses import dataclass
from uuid import UUID

from reservations.room.domain.value_object.composite_keys import RoomId


@dataclass(frozen=True)
class Room:
    """客室在庫（予約可能な単位）"""

    hotel_id: UUID
    room_number: int

    @property
    def id(self) -> RoomId:
        return RoomId(hotel_id=self.hotel_id, room_number=self.room_number)
