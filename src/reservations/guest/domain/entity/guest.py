from uuid import UUID

from reservations.shared.domain import Entity


class Guest(Entity[UUID]):
    """宿泊客エンティティ

    登録後は不変。入力値の検証は登録サービスで行う。
    """

    def __init__(
        self,
        id: UUID | None,
        first_name: str | None,
        last_name: str | None,
    ) -> None:
        super().__init__(id)
        self._first_name = first_name
        self._last_name = last_name

    @property
    def first_name(self) -> str | None:
        return self._first_name

    @property
    def last_name(self) -> str | None:
        return self._last_name

    def __repr__(self) -> str:
        return (
            f"Guest(id={self.id}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r})"
        )
