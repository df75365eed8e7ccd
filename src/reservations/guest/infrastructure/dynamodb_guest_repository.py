from uuid import UUID

from reservations.guest.domain.entity import Guest
from reservations.guest.domain.repository import GuestRepository
from reservations.shared.infrastructure import DynamoDBRepository


def _key(guest_id: UUID) -> tuple[str, str]:
    return f"GUEST#{guest_id}", f"GUEST#{guest_id}"


class DynamoDBGuestRepository(DynamoDBRepository, GuestRepository):
    """DynamoDBを使用したGuestRepository の具象実装"""

    def insert(self, guest: Guest) -> Guest:
        """宿泊客をDBに保存する"""
        pk, sk = _key(guest.id)
        item = {
            "PK": pk,
            "SK": sk,
            "entity_type": "GUEST",
            "guest_id": str(guest.id),
            "first_name": guest.first_name,
            "last_name": guest.last_name,
        }
        self._put_if_absent(item, f"Guest already exists: {guest.id}")
        return guest

    def find_by_id(self, guest_id: UUID) -> Guest | None:
        """宿泊客IDで検索"""
        item = self._get(*_key(guest_id))
        if not item:
            return None
        return self._to_entity(item)

    def exists(self, guest_id: UUID) -> bool:
        return self._exists(*_key(guest_id))

    def _to_entity(self, item: dict) -> Guest:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Guest(
            id=UUID(item["guest_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
        )
