from datetime import date
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest
from botocore.exceptions import ClientError

from reservations.room.domain import (
    ConfirmationNumber,
    Room,
    RoomByGuestAndDate,
    RoomByGuestAndDateKey,
    RoomByHotelAndDate,
    RoomByHotelAndDateKey,
)
from reservations.room.infrastructure import (
    DynamoDBRoomByGuestAndDateRepository,
    DynamoDBRoomByHotelAndDateRepository,
    DynamoDBRoomRepository,
)
from reservations.shared.domain import DuplicateResourceException

GUEST_ID = UUID("8b2f6a52-4d0e-4a7b-9d0c-1f1f6a1e2b01")
HOTEL_ID = UUID("3c9d5e2a-7b1f-4c6e-8a2d-5e4f3b2a1c01")
BOOKING_DATE = date(2024, 5, 1)


@pytest.fixture
def mock_resource():
    with patch("boto3.resource") as resource:
        resource.return_value.Table.return_value = MagicMock()
        yield resource.return_value


class TestDynamoDBRoomRepository:
    def test_insert_uses_hotel_partition(self, mock_resource):
        repository = DynamoDBRoomRepository(table_name="reservations-test")

        repository.insert(Room(hotel_id=HOTEL_ID, room_number=101))

        kwargs = repository.table.put_item.call_args.kwargs
        assert kwargs["Item"]["PK"] == f"HOTEL#{HOTEL_ID}"
        assert kwargs["Item"]["SK"] == "ROOM#101"
        assert "ConditionExpression" in kwargs

    def test_find_by_id_restores_room(self, mock_resource):
        repository = DynamoDBRoomRepository(table_name="reservations-test")
        repository.table.get_item.return_value = {
            "Item": {"hotel_id": str(HOTEL_ID), "room_number": 101}
        }

        room = repository.find_by_id(Room(hotel_id=HOTEL_ID, room_number=101).id)

        assert room == Room(hotel_id=HOTEL_ID, room_number=101)


class TestDynamoDBRoomByHotelAndDateRepository:
    def test_insert_overwrites_without_condition(self, mock_resource):
        repository = DynamoDBRoomByHotelAndDateRepository(
            table_name="reservations-test"
        )

        repository.insert(
            RoomByHotelAndDate(hotel_id=HOTEL_ID, date=BOOKING_DATE, room_number=101)
        )

        kwargs = repository.table.put_item.call_args.kwargs
        assert kwargs["Item"]["PK"] == f"HOTEL#{HOTEL_ID}#DATE#2024-05-01"
        assert kwargs["Item"]["SK"] == "ROOM#101"
        assert "ConditionExpression" not in kwargs

    def test_exists_reads_key(self, mock_resource):
        repository = DynamoDBRoomByHotelAndDateRepository(
            table_name="reservations-test"
        )
        repository.table.get_item.return_value = {"Item": {"PK": "x"}}

        assert repository.exists(
            RoomByHotelAndDateKey(hotel_id=HOTEL_ID, date=BOOKING_DATE, room_number=101)
        )
        kwargs = repository.table.get_item.call_args.kwargs
        assert kwargs["Key"] == {
            "PK": f"HOTEL#{HOTEL_ID}#DATE#2024-05-01",
            "SK": "ROOM#101",
        }

    def test_missing_row_does_not_exist(self, mock_resource):
        repository = DynamoDBRoomByHotelAndDateRepository(
            table_name="reservations-test"
        )
        repository.table.get_item.return_value = {}

        assert not repository.exists(
            RoomByHotelAndDateKey(hotel_id=HOTEL_ID, date=BOOKING_DATE, room_number=101)
        )


class TestDynamoDBRoomByGuestAndDateRepository:
    def test_insert_stores_confirmation_number(self, mock_resource):
        repository = DynamoDBRoomByGuestAndDateRepository(
            table_name="reservations-test"
        )
        booking = RoomByGuestAndDate(
            guest_id=GUEST_ID,
            date=BOOKING_DATE,
            hotel_id=HOTEL_ID,
            room_number=101,
            confirmation_number=ConfirmationNumber(value="abc"),
        )

        repository.insert(booking)

        kwargs = repository.table.put_item.call_args.kwargs
        assert kwargs["Item"]["PK"] == f"GUEST#{GUEST_ID}#DATE#2024-05-01"
        assert kwargs["Item"]["SK"] == f"HOTEL#{HOTEL_ID}#ROOM#101"
        assert kwargs["Item"]["confirmation_number"] == "abc"
        assert "ConditionExpression" in kwargs

    def test_conditional_failure_is_already_booked(self, mock_resource):
        repository = DynamoDBRoomByGuestAndDateRepository(
            table_name="reservations-test"
        )
        repository.table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": "x"}},
            "PutItem",
        )

        with pytest.raises(
            DuplicateResourceException, match="The following room is already booked"
        ):
            repository.insert(
                RoomByGuestAndDate(
                    guest_id=GUEST_ID,
                    date=BOOKING_DATE,
                    hotel_id=HOTEL_ID,
                    room_number=101,
                )
            )

    def test_find_by_guest_and_date_follows_pages(self, mock_resource):
        repository = DynamoDBRoomByGuestAndDateRepository(
            table_name="reservations-test"
        )

        def _item(room_number: int) -> dict:
            return {
                "guest_id": str(GUEST_ID),
                "date": "2024-05-01",
                "hotel_id": str(HOTEL_ID),
                "room_number": room_number,
                "confirmation_number": "abc",
            }

        repository.table.query.side_effect = [
            {"Items": [_item(101)], "LastEvaluatedKey": {"PK": "p", "SK": "s"}},
            {"Items": [_item(102)]},
        ]

        rows = repository.find_by_guest_and_date(GUEST_ID, BOOKING_DATE)

        assert [row.room_number for row in rows] == [101, 102]
        assert rows[0].confirmation_number == ConfirmationNumber(value="abc")
        second_call = repository.table.query.call_args_list[1].kwargs
        assert second_call["ExclusiveStartKey"] == {"PK": "p", "SK": "s"}

    def test_find_by_id_without_confirmation_number(self, mock_resource):
        repository = DynamoDBRoomByGuestAndDateRepository(
            table_name="reservations-test"
        )
        repository.table.get_item.return_value = {
            "Item": {
                "guest_id": str(GUEST_ID),
                "date": "2024-05-01",
                "hotel_id": str(HOTEL_ID),
                "room_number": 101,
            }
        }

        row = repository.find_by_id(
            RoomByGuestAndDateKey(
                guest_id=GUEST_ID,
                date=BOOKING_DATE,
                hotel_id=HOTEL_ID,
                room_number=101,
            )
        )

        assert row.confirmation_number is None
