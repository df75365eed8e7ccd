from aws_lambda_powertools import Logger

from reservations.hotel.domain.entity import Hotel
from reservations.hotel.domain.repository import (
    HotelByCityRepository,
    HotelRepository,
)
from reservations.hotel.domain.value_object import HotelByCity
from reservations.shared.domain import (
    DuplicateResourceException,
    InvalidInputException,
)
from reservations.shared.utils import is_empty, validate

logger = Logger(child=True)


class AddHotelService:
    """ホテル登録のユースケース

    Hotel テーブルを正とし、都市別索引はその後に書き込む。
    """

    def __init__(
        self,
        hotel_repository: HotelRepository,
        hotel_by_city_repository: HotelByCityRepository,
    ) -> None:
        self._hotel_repository = hotel_repository
        self._hotel_by_city_repository = hotel_by_city_repository

    def add_hotel(self, hotel: Hotel | None) -> Hotel:
        """ホテルを登録し、都市別索引を作成する"""
        self._validate_hotel(hotel)
        validate(
            hotel,
            lambda h: not self._hotel_repository.exists(h.id),
            lambda: DuplicateResourceException(
                f"Such hotel information is already added to the data base '{hotel}'"
            ),
        )

        saved_hotel = self._hotel_repository.insert(hotel)
        self._hotel_by_city_repository.insert(HotelByCity.from_hotel(saved_hotel))
        logger.info(
            "Successfully added the new hotel",
            extra={"hotel_id": str(saved_hotel.id), "city": saved_hotel.address.city},
        )
        return saved_hotel

    def _validate_hotel(self, hotel: Hotel | None) -> None:
        if hotel is None:
            raise InvalidInputException("Cannot add the empty hotel info.")
        if hotel.id is None:
            raise InvalidInputException("Cannot add hotel info with empty id.")
        if is_empty(hotel.name):
            raise InvalidInputException("Cannot add hotel info with empty name.")
        if is_empty(hotel.phone):
            raise InvalidInputException("Cannot add hotel info with empty phone.")
        if hotel.address is None:
            raise InvalidInputException("Cannot add hotel info with empty address.")
        if is_empty(hotel.address.city):
            raise InvalidInputException(
                "Cannot add hotel info with empty city in the address."
            )
