from datetime import date
from uuid import UUID

from boto3.dynamodb.conditions import Key

from reservations.room.domain.repository import RoomByGuestAndDateRepository
from reservations.room.domain.value_object import (
    ConfirmationNumber,
    RoomByGuestAndDate,
    RoomByGuestAndDateKey,
)
from reservations.shared.infrastructure import DynamoDBRepository


def _partition_key(guest_id: UUID, booking_date: date) -> str:
    return f"GUEST#{guest_id}#DATE#{booking_date.isoformat()}"


def _key(key: RoomByGuestAndDateKey) -> tuple[str, str]:
    return (
        _partition_key(key.guest_id, key.date),
        f"HOTEL#{key.hotel_id}#ROOM#{key.room_number}",
    )


class DynamoDBRoomByGuestAndDateRepository(
    DynamoDBRepository, RoomByGuestAndDateRepository
):
    """DynamoDBを使用したRoomByGuestAndDateRepository の具象実装

    予約の一意性はこのビューへの条件付き書き込みで担保する。
    """

    def insert(self, booking: RoomByGuestAndDate) -> RoomByGuestAndDate:
        """予約をDBに保存する（同じキーが存在すれば失敗）"""
        pk, sk = _key(booking.key)
        item = {
            "PK": pk,
            "SK": sk,
            "entity_type": "ROOM_BY_GUEST_AND_DATE",
            "guest_id": str(booking.guest_id),
            "date": booking.date.isoformat(),
            "hotel_id": str(booking.hotel_id),
            "room_number": booking.room_number,
        }
        if booking.confirmation_number is not None:
            item["confirmation_number"] = str(booking.confirmation_number)
        self._put_if_absent(
            item,
            "The following room is already booked. "
            f"Room number: '{booking.room_number}', hotel id: '{booking.hotel_id}'",
        )
        return booking

    def find_by_id(self, key: RoomByGuestAndDateKey) -> RoomByGuestAndDate | None:
        item = self._get(*_key(key))
        if not item:
            return None
        return self._to_value(item)

    def exists(self, key: RoomByGuestAndDateKey) -> bool:
        return self._exists(*_key(key))

    def find_by_guest_and_date(
        self, guest_id: UUID, booking_date: date
    ) -> list[RoomByGuestAndDate]:
        """宿泊客・日付のパーティション内の予約をすべて取得する"""
        items = self._query_all(
            KeyConditionExpression=Key("PK").eq(_partition_key(guest_id, booking_date))
            & Key("SK").begins_with("HOTEL#"),
        )
        return [self._to_value(item) for item in items]

    def _to_value(self, item: dict) -> RoomByGuestAndDate:
        """DynamoDB アイテムを値オブジェクトに変換する"""
        confirmation_number = item.get("confirmation_number")
        return RoomByGuestAndDate(
            guest_id=UUID(item["guest_id"]),
            date=date.fromisoformat(item["date"]),
            hotel_id=UUID(item["hotel_id"]),
            room_number=int(item["room_number"]),
            confirmation_number=(
                ConfirmationNumber(value=confirmation_number)
                if confirmation_number
                else None
            ),
        )
