from .hotel_by_city_repository import HotelByCityRepository
from .hotel_repository import HotelRepository

__all__ = ["HotelByCityRepository", "HotelRepository"]
