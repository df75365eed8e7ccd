from abc import abstractmethod

from reservations.room.domain.value_object.composite_keys import RoomByHotelAndDateKey
from reservations.room.domain.value_object.room_by_hotel_and_date import (
    RoomByHotelAndDate,
)
from reservations.shared.domain import Repository


class RoomByHotelAndDateRepository(
    Repository[RoomByHotelAndDate, RoomByHotelAndDateKey]
):
    """ホテル・日付別客室ビューのレポジトリ

    insert は同じキーへの上書きとなる（冪等）。
    """

    @abstractmethod
    def insert(self, room: RoomByHotelAndDate) -> RoomByHotelAndDate:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, key: RoomByHotelAndDateKey) -> RoomByHotelAndDate | None:
        raise NotImplementedError

    @abstractmethod
    def exists(self, key: RoomByHotelAndDateKey) -> bool:
        raise NotImplementedError
