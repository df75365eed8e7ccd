from abc import ABC, abstractmethod

from reservations.hotel.domain.value_object.hotel_by_city import HotelByCity


class HotelByCityRepository(ABC):
    """都市別ホテル索引レポジトリのインターフェース"""

    @abstractmethod
    def insert(self, hotel_by_city: HotelByCity) -> HotelByCity:
        """索引行を登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_city(self, city: str) -> list[HotelByCity]:
        """都市名のパーティションを検索する"""
        raise NotImplementedError
