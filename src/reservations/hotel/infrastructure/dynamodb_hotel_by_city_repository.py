from uuid import UUID

from boto3.dynamodb.conditions import Key

from reservations.hotel.domain.repository import HotelByCityRepository
from reservations.hotel.domain.value_object import HotelByCity
from reservations.shared.infrastructure import DynamoDBRepository


class DynamoDBHotelByCityRepository(DynamoDBRepository, HotelByCityRepository):
    """DynamoDBを使用したHotelByCityRepository の具象実装

    索引は Hotel から再構築可能なため、書き込みは上書きで行う。
    """

    def insert(self, hotel_by_city: HotelByCity) -> HotelByCity:
        """索引行をDBに保存する"""
        self.table.put_item(
            Item={
                "PK": f"CITY#{hotel_by_city.city}",
                "SK": f"HOTEL#{hotel_by_city.hotel_id}",
                "entity_type": "HOTEL_BY_CITY",
                "city": hotel_by_city.city,
                "hotel_id": str(hotel_by_city.hotel_id),
                "name": hotel_by_city.name,
            }
        )
        return hotel_by_city

    def find_by_city(self, city: str) -> list[HotelByCity]:
        """都市名でホテル索引を検索する"""
        items = self._query_all(
            KeyConditionExpression=Key("PK").eq(f"CITY#{city}")
            & Key("SK").begins_with("HOTEL#"),
        )
        return [
            HotelByCity(
                city=item["city"],
                hotel_id=UUID(item["hotel_id"]),
                name=item["name"],
            )
            for item in items
        ]
