from .entity import Guest
from .repository import GuestRepository

__all__ = ["Guest", "GuestRepository"]
