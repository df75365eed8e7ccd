from uuid import UUID

from reservations.hotel.domain.value_object.address import Address
from reservations.shared.domain import Entity


class Hotel(Entity[UUID]):
    """ホテルエンティティ"""

    def __init__(
        self,
        id: UUID | None,
        name: str | None,
        phone: str | None,
        address: Address | None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._phone = phone
        self._address = address

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def address(self) -> Address | None:
        return self._address

    def __repr__(self) -> str:
        return (
            f"Hotel(id={self.id}, name={self.name!r}, phone={self.phone!r}, "
            f"address={self.address!r})"
        )
