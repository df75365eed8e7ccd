from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from reservations.hotel.domain.entity.hotel import Hotel


@dataclass(frozen=True)
class HotelByCity:
    """都市別ホテル索引（Hotel から導出される検索用ビュー）

    キー: (city, hotel_id)
    """

    city: str
    hotel_id: UUID
    name: str

    @classmethod
    def from_hotel(cls, hotel: Hotel) -> HotelByCity:
        """Hotel から索引行を生成する"""
        return cls(city=hotel.address.city, hotel_id=hotel.id, name=hotel.name)
