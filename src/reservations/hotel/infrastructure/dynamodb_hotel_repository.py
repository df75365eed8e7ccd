import time
from collections.abc import Sequence
from uuid import UUID

from reservations.hotel.domain.entity import Hotel
from reservations.hotel.domain.repository import HotelRepository
from reservations.hotel.domain.value_object import Address
from reservations.shared.infrastructure import DynamoDBRepository

# BatchGetItem の1リクエストあたりの上限
_BATCH_GET_LIMIT = 100
_BATCH_GET_MAX_ATTEMPTS = 5
_BATCH_GET_BACKOFF_SECONDS = 0.05


def _key(hotel_id: UUID) -> dict:
    return {"PK": f"HOTEL#{hotel_id}", "SK": f"HOTEL#{hotel_id}"}


class DynamoDBHotelRepository(DynamoDBRepository, HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装"""

    def insert(self, hotel: Hotel) -> Hotel:
        """ホテルをDBに保存する"""
        item = {
            **_key(hotel.id),
            "entity_type": "HOTEL",
            "hotel_id": str(hotel.id),
            "name": hotel.name,
            "phone": hotel.phone,
            "street": hotel.address.street,
            "city": hotel.address.city,
            "state_or_province": hotel.address.state_or_province,
            "postal_code": hotel.address.postal_code,
            "country": hotel.address.country,
        }
        self._put_if_absent(item, f"Hotel already exists: {hotel.id}")
        return hotel

    def find_by_id(self, hotel_id: UUID) -> Hotel | None:
        """ホテルIDで検索"""
        key = _key(hotel_id)
        item = self._get(key["PK"], key["SK"])
        if not item:
            return None
        return self._to_entity(item)

    def exists(self, hotel_id: UUID) -> bool:
        key = _key(hotel_id)
        return self._exists(key["PK"], key["SK"])

    def find_by_ids(self, hotel_ids: Sequence[UUID]) -> list[Hotel]:
        """BatchGetItem で複数のホテルを取得する（返却順は DynamoDB に従う）

        UnprocessedKeys は指数バックオフで再送し、上限回数を超えたら失敗とする。
        """
        keys = [_key(hotel_id) for hotel_id in dict.fromkeys(hotel_ids)]
        items: list[dict] = []
        for start in range(0, len(keys), _BATCH_GET_LIMIT):
            request = {
                self.table_name: {
                    "Keys": keys[start : start + _BATCH_GET_LIMIT],
                    "ConsistentRead": True,
                }
            }
            attempt = 0
            while request:
                if attempt >= _BATCH_GET_MAX_ATTEMPTS:
                    raise RuntimeError(
                        f"BatchGetItem left keys unprocessed after {attempt} attempts"
                    )
                if attempt:
                    time.sleep(_BATCH_GET_BACKOFF_SECONDS * 2 ** (attempt - 1))
                response = self.dynamodb.batch_get_item(RequestItems=request)
                items.extend(response.get("Responses", {}).get(self.table_name, []))
                request = response.get("UnprocessedKeys") or {}
                attempt += 1
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Hotel:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Hotel(
            id=UUID(item["hotel_id"]),
            name=item["name"],
            phone=item["phone"],
            address=Address(
                street=item["street"],
                city=item["city"],
                state_or_province=item.get("state_or_province", ""),
                postal_code=item.get("postal_code", ""),
                country=item.get("country", ""),
            ),
        )
