from __future__ import annotations

import uuid
from dataclasses import dataclass

from reservations.room.domain.value_object.booking_request import BookingRequest

_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "urn:reservations:confirmation-number")


@dataclass(frozen=True)
class ConfirmationNumber:
    """予約確認番号"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_booking_request(cls, request: BookingRequest) -> ConfirmationNumber:
        """予約リクエストの値から決定的に生成する

        同じ値のリクエストには同じ番号が振られる（一意性は保証しない）。
        """
        name = "|".join(
            [
                str(request.guest_id),
                str(request.hotel_id),
                str(request.room_number),
                request.date.isoformat(),
            ]
        )
        return cls(value=str(uuid.uuid5(_NAMESPACE, name)))
