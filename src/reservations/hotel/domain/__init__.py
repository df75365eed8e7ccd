from .entity import Hotel
from .repository import HotelByCityRepository, HotelRepository
from .value_object import Address, HotelByCity

__all__ = [
    "Address",
    "Hotel",
    "HotelByCity",
    "HotelByCityRepository",
    "HotelRepository",
]
