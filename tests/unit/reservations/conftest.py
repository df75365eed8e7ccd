from datetime import date
from unittest.mock import MagicMock
from uuid import UUID

import pytest

from reservations.guest.domain import Guest, GuestRepository
from reservations.hotel.domain import (
    Address,
    Hotel,
    HotelByCity,
    HotelByCityRepository,
    HotelRepository,
)
from reservations.room.domain import (
    BookingRequest,
    Room,
    RoomByGuestAndDate,
    RoomByGuestAndDateRepository,
    RoomByHotelAndDate,
    RoomByHotelAndDateRepository,
    RoomRepository,
)
from reservations.shared.domain import DuplicateResourceException

GUEST_ID = UUID("8b2f6a52-4d0e-4a7b-9d0c-1f1f6a1e2b01")
HOTEL_ID = UUID("3c9d5e2a-7b1f-4c6e-8a2d-5e4f3b2a1c01")


class InMemoryGuestRepository(GuestRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, guest: Guest) -> Guest:
        if guest.id in self.rows:
            raise DuplicateResourceException(f"Guest already exists: {guest.id}")
        self.rows[guest.id] = guest
        return guest

    def find_by_id(self, guest_id):
        return self.rows.get(guest_id)

    def exists(self, guest_id) -> bool:
        return guest_id in self.rows


class InMemoryHotelRepository(HotelRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, hotel: Hotel) -> Hotel:
        if hotel.id in self.rows:
            raise DuplicateResourceException(f"Hotel already exists: {hotel.id}")
        self.rows[hotel.id] = hotel
        return hotel

    def find_by_id(self, hotel_id):
        return self.rows.get(hotel_id)

    def exists(self, hotel_id) -> bool:
        return hotel_id in self.rows

    def find_by_ids(self, hotel_ids):
        return [self.rows[i] for i in hotel_ids if i in self.rows]


class InMemoryHotelByCityRepository(HotelByCityRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, hotel_by_city: HotelByCity) -> HotelByCity:
        self.rows[(hotel_by_city.city, hotel_by_city.hotel_id)] = hotel_by_city
        return hotel_by_city

    def find_by_city(self, city: str):
        return [row for (c, _), row in self.rows.items() if c == city]


class InMemoryRoomRepository(RoomRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, room: Room) -> Room:
        if room.id in self.rows:
            raise DuplicateResourceException(f"Room already exists: {room}")
        self.rows[room.id] = room
        return room

    def find_by_id(self, room_id):
        return self.rows.get(room_id)

    def exists(self, room_id) -> bool:
        return room_id in self.rows


class InMemoryRoomByHotelAndDateRepository(RoomByHotelAndDateRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, room: RoomByHotelAndDate) -> RoomByHotelAndDate:
        self.rows[room.key] = room
        return room

    def find_by_id(self, key):
        return self.rows.get(key)

    def exists(self, key) -> bool:
        return key in self.rows


class InMemoryRoomByGuestAndDateRepository(RoomByGuestAndDateRepository):
    def __init__(self) -> None:
        self.rows: dict = {}

    def insert(self, booking: RoomByGuestAndDate) -> RoomByGuestAndDate:
        if booking.key in self.rows:
            raise DuplicateResourceException(f"Booking already exists: {booking}")
        self.rows[booking.key] = booking
        return booking

    def find_by_id(self, key):
        return self.rows.get(key)

    def exists(self, key) -> bool:
        return key in self.rows

    def find_by_guest_and_date(self, guest_id, booking_date):
        return [
            row
            for key, row in self.rows.items()
            if key.guest_id == guest_id and key.date == booking_date
        ]


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def guest_repository():
    return InMemoryGuestRepository()


@pytest.fixture
def hotel_repository():
    return InMemoryHotelRepository()


@pytest.fixture
def hotel_by_city_repository():
    return InMemoryHotelByCityRepository()


@pytest.fixture
def room_repository():
    return InMemoryRoomRepository()


@pytest.fixture
def room_by_hotel_and_date_repository():
    return InMemoryRoomByHotelAndDateRepository()


@pytest.fixture
def room_by_guest_and_date_repository():
    return InMemoryRoomByGuestAndDateRepository()


@pytest.fixture
def create_guest():
    """Guest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        guest_id: UUID | None = GUEST_ID,
        first_name: str | None = "Taro",
        last_name: str | None = "Yamada",
    ) -> Guest:
        return Guest(id=guest_id, first_name=first_name, last_name=last_name)

    return _factory


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture"""

    def _factory(
        hotel_id: UUID | None = HOTEL_ID,
        name: str | None = "Grand Hotel",
        phone: str | None = "+44 20 7946 0000",
        city: str = "London",
        address: Address | None = None,
    ) -> Hotel:
        return Hotel(
            id=hotel_id,
            name=name,
            phone=phone,
            address=address
            or Address(
                street="1 Strand",
                city=city,
                postal_code="WC2N 5HR",
                country="GB",
            ),
        )

    return _factory


@pytest.fixture
def create_booking_request():
    """BookingRequest を生成する Factory fixture"""

    def _factory(
        guest_id: UUID = GUEST_ID,
        hotel_id: UUID = HOTEL_ID,
        room_number: int = 101,
        booking_date: date = date(2024, 5, 1),
    ) -> BookingRequest:
        return BookingRequest(
            guest_id=guest_id,
            hotel_id=hotel_id,
            room_number=room_number,
            date=booking_date,
        )

    return _factory
