from aws_lambda_powertools import Logger

from reservations.guest.domain.entity import Guest
from reservations.guest.domain.repository import GuestRepository
from reservations.shared.domain import (
    DuplicateResourceException,
    InvalidInputException,
)
from reservations.shared.utils import is_empty, validate

logger = Logger(child=True)


class RegisterGuestService:
    """宿泊客登録のユースケース"""

    def __init__(self, repository: GuestRepository) -> None:
        self._repository = repository

    def register_new_guest(self, guest: Guest | None) -> Guest:
        """宿泊客を登録する（ID の重複は許さない）"""
        self._validate_guest(guest)
        self._check_if_registered(guest)
        saved_guest = self._repository.insert(guest)
        logger.info(
            "Successfully registered the new guest",
            extra={"guest_id": str(saved_guest.id)},
        )
        return saved_guest

    def _validate_guest(self, guest: Guest | None) -> None:
        if guest is None:
            raise InvalidInputException("Cannot register the empty guest info.")
        if guest.id is None:
            raise InvalidInputException("Cannot register guest info with empty id.")
        if is_empty(guest.first_name):
            raise InvalidInputException(
                "Cannot register guest info with empty first name."
            )
        if is_empty(guest.last_name):
            raise InvalidInputException(
                "Cannot register guest info with empty last name."
            )

    def _check_if_registered(self, guest: Guest) -> None:
        message = (
            "The guest information is already stored in DB. "
            f"Guest id: '{guest.id}', name: '{guest.first_name}', "
            f"surname: '{guest.last_name}'"
        )
        validate(
            guest,
            lambda g: not self._repository.exists(g.id),
            lambda: DuplicateResourceException(message),
        )
