import json
from datetime import date
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from reservations.room.domain import RoomByHotelAndDate
from reservations.room.handlers import add, book, find_booked
from reservations.shared.domain import (
    DuplicateResourceException,
    ResourceNotFoundException,
)

GUEST_ID = "8b2f6a52-4d0e-4a7b-9d0c-1f1f6a1e2b01"
HOTEL_ID = "3c9d5e2a-7b1f-4c6e-8a2d-5e4f3b2a1c01"


def _book_event(**overrides) -> dict:
    body = {
        "guest_id": GUEST_ID,
        "hotel_id": HOTEL_ID,
        "room_number": 101,
        "date": "2024-05-01",
    }
    body.update(overrides)
    return {"rawPath": "/bookings", "body": json.dumps(body), "isBase64Encoded": False}


class TestBookHandler:
    @pytest.fixture
    def service(self, monkeypatch):
        mock_service = MagicMock()
        monkeypatch.setattr(book, "service", mock_service)
        return mock_service

    def test_books_room(self, service, lambda_context):
        service.perform_booking.side_effect = lambda request: request

        response = book.lambda_handler(_book_event(), lambda_context)

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data == {
            "guest_id": GUEST_ID,
            "hotel_id": HOTEL_ID,
            "room_number": 101,
            "date": "2024-05-01",
        }
        request = service.perform_booking.call_args.args[0]
        assert request.date == date(2024, 5, 1)
        assert request.hotel_id == UUID(HOTEL_ID)

    def test_already_booked_is_conflict(self, service, lambda_context):
        service.perform_booking.side_effect = DuplicateResourceException(
            "The following room is already booked."
        )

        response = book.lambda_handler(_book_event(), lambda_context)

        assert response["statusCode"] == 409
        assert "already booked" in json.loads(response["body"])["message"]

    def test_unknown_room_is_not_found(self, service, lambda_context):
        service.perform_booking.side_effect = ResourceNotFoundException("no room")

        response = book.lambda_handler(_book_event(), lambda_context)

        assert response["statusCode"] == 404

    @pytest.mark.parametrize(
        "overrides",
        [{"room_number": 0}, {"date": "01/05/2024"}, {"guest_id": "not-a-uuid"}],
    )
    def test_malformed_request_is_bad_request(
        self, service, lambda_context, overrides
    ):
        response = book.lambda_handler(_book_event(**overrides), lambda_context)

        assert response["statusCode"] == 400
        service.perform_booking.assert_not_called()

    def test_unexpected_error_hides_details(self, service, lambda_context):
        service.perform_booking.side_effect = RuntimeError("table is gone")

        response = book.lambda_handler(_book_event(), lambda_context)

        assert response["statusCode"] == 500
        assert "table is gone" not in response["body"]


class TestFindBookedHandler:
    @pytest.fixture
    def service(self, monkeypatch):
        mock_service = MagicMock()
        monkeypatch.setattr(find_booked, "service", mock_service)
        return mock_service

    def _event(self, query: dict | None) -> dict:
        return {
            "rawPath": f"/guests/{GUEST_ID}/bookings",
            "pathParameters": {"guest_id": GUEST_ID},
            "queryStringParameters": query,
        }

    def test_returns_booked_rooms(self, service, lambda_context):
        service.find_booked_rooms_for_guest_and_date.return_value = [
            RoomByHotelAndDate(
                hotel_id=UUID(HOTEL_ID), date=date(2024, 5, 1), room_number=101
            )
        ]

        response = find_booked.lambda_handler(
            self._event({"date": "2024-05-01"}), lambda_context
        )

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["count"] == 1
        assert body["data"][0]["room_number"] == 101
        service.find_booked_rooms_for_guest_and_date.assert_called_once_with(
            UUID(GUEST_ID), date(2024, 5, 1)
        )

    def test_no_bookings_is_not_found(self, service, lambda_context):
        service.find_booked_rooms_for_guest_and_date.side_effect = (
            ResourceNotFoundException("Cannot find the booked rooms")
        )

        response = find_booked.lambda_handler(
            self._event({"date": "2024-05-01"}), lambda_context
        )

        assert response["statusCode"] == 404

    def test_missing_date_is_bad_request(self, service, lambda_context):
        response = find_booked.lambda_handler(self._event(None), lambda_context)

        assert response["statusCode"] == 400
        service.find_booked_rooms_for_guest_and_date.assert_not_called()


class TestAddRoomHandlers:
    @pytest.fixture
    def service(self, monkeypatch):
        mock_service = MagicMock()
        monkeypatch.setattr(add, "service", mock_service)
        return mock_service

    def test_adds_room_from_path_parameters(self, service, lambda_context):
        service.add_room_to_hotel.side_effect = lambda room: room
        event = {
            "rawPath": f"/hotels/{HOTEL_ID}/rooms",
            "pathParameters": {"hotel_id": HOTEL_ID},
            "body": json.dumps({"room_number": 101}),
            "isBase64Encoded": False,
        }

        response = add.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data == {"hotel_id": HOTEL_ID, "room_number": 101}

    def test_opens_room_for_each_date(self, service, lambda_context):
        service.open_room_for_date.side_effect = lambda room, booking_date: (
            RoomByHotelAndDate(
                hotel_id=room.hotel_id, date=booking_date, room_number=room.room_number
            )
        )
        event = {
            "rawPath": f"/hotels/{HOTEL_ID}/rooms/101/dates",
            "pathParameters": {"hotel_id": HOTEL_ID, "room_number": "101"},
            "body": json.dumps({"dates": ["2024-05-01", "2024-05-02"]}),
            "isBase64Encoded": False,
        }

        response = add.open_dates_handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["count"] == 2
        assert [row["date"] for row in body["data"]] == ["2024-05-01", "2024-05-02"]

    def test_open_without_dates_is_bad_request(self, service, lambda_context):
        event = {
            "pathParameters": {"hotel_id": HOTEL_ID, "room_number": "101"},
            "body": json.dumps({"dates": []}),
            "isBase64Encoded": False,
        }

        response = add.open_dates_handler(event, lambda_context)

        assert response["statusCode"] == 400
        service.open_room_for_date.assert_not_called()

    def test_non_object_body_is_bad_request(self, service, lambda_context):
        event = {
            "pathParameters": {"hotel_id": HOTEL_ID},
            "body": "[1, 2]",
            "isBase64Encoded": False,
        }

        response = add.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert "JSON object" in json.loads(response["body"])["message"]
        service.add_room_to_hotel.assert_not_called()
