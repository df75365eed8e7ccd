from abc import abstractmethod
from datetime import date
from uuid import UUID

from reservations.room.domain.value_object.composite_keys import RoomByGuestAndDateKey
from reservations.room.domain.value_object.room_by_guest_and_date import (
    RoomByGuestAndDate,
)
from reservations.shared.domain import Repository


class RoomByGuestAndDateRepository(
    Repository[RoomByGuestAndDate, RoomByGuestAndDateKey]
):
    """宿泊客・日付別予約ビューのレポジトリ

    insert は同じキーが存在する場合 DuplicateResourceException を送出する。
    """

    @abstractmethod
    def insert(self, booking: RoomByGuestAndDate) -> RoomByGuestAndDate:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, key: RoomByGuestAndDateKey) -> RoomByGuestAndDate | None:
        raise NotImplementedError

    @abstractmethod
    def exists(self, key: RoomByGuestAndDateKey) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_by_guest_and_date(
        self, guest_id: UUID, booking_date: date
    ) -> list[RoomByGuestAndDate]:
        """(guest_id, date) のパーティションを検索する"""
        raise NotImplementedError
