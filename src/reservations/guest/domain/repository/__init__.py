from .guest_repository import GuestRepository

__all__ = ["GuestRepository"]
