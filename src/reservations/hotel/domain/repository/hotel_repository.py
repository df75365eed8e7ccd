from abc import abstractmethod
from collections.abc import Sequence
from uuid import UUID

from reservations.hotel.domain.entity.hotel import Hotel
from reservations.shared.domain import Repository


class HotelRepository(Repository[Hotel, UUID]):
    """ホテルレポジトリのインターフェース（正となるテーブル）"""

    @abstractmethod
    def insert(self, hotel: Hotel) -> Hotel:
        """ホテルを登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hotel_id: UUID) -> Hotel | None:
        """ホテルIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, hotel_id: UUID) -> bool:
        """ホテルIDが登録済みか"""
        raise NotImplementedError

    @abstractmethod
    def find_by_ids(self, hotel_ids: Sequence[UUID]) -> list[Hotel]:
        """複数のホテルIDでまとめて検索する（存在しないIDは無視）"""
        raise NotImplementedError
