from abc import abstractmethod

from reservations.room.domain.value_object.composite_keys import RoomId
from reservations.room.domain.value_object.room import Room
from reservations.shared.domain import Repository


class RoomRepository(Repository[Room, RoomId]):
    """客室在庫レポジトリのインターフェース"""

    @abstractmethod
    def insert(self, room: Room) -> Room:
        """客室を登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        """(hotel_id, room_number) で検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, room_id: RoomId) -> bool:
        """客室が登録済みか"""
        raise NotImplementedError
