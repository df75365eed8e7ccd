from .address import Address
from .hotel_by_city import HotelByCity

__all__ = ["Address", "HotelByCity"]
