from aws_lambda_powertools import Logger

from reservations.hotel.domain.entity import Hotel
from reservations.hotel.domain.repository import (
    HotelByCityRepository,
    HotelRepository,
)
from reservations.shared.domain import (
    InvalidInputException,
    ResourceNotFoundException,
)
from reservations.shared.utils import is_empty, make_string

logger = Logger(child=True)


class FindHotelsService:
    """都市別ホテル検索のユースケース"""

    def __init__(
        self,
        hotel_repository: HotelRepository,
        hotel_by_city_repository: HotelByCityRepository,
    ) -> None:
        self._hotel_repository = hotel_repository
        self._hotel_by_city_repository = hotel_by_city_repository

    def find_all_hotels_in_the_city(self, city: str | None) -> list[Hotel]:
        """都市別索引からホテルIDを集め、Hotel テーブルから詳細を取得する"""
        if is_empty(city):
            raise InvalidInputException("Cannot find hotels for the empty city name.")

        rows = self._hotel_by_city_repository.find_by_city(city)
        hotel_ids = [row.hotel_id for row in rows]
        if not hotel_ids:
            raise ResourceNotFoundException(
                f"Cannot find hotels for the given city '{city}'"
            )

        hotels = self._hotel_repository.find_by_ids(hotel_ids)
        logger.debug(
            "Found hotels in the city",
            extra={"city": city, "hotels": make_string(hotels)},
        )
        return hotels
