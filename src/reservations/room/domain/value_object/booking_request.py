from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class BookingRequest:
    """予約リクエスト

    永続化はされず、ここから導出される2つのビューのみが保存される。
    """

    guest_id: UUID
    hotel_id: UUID
    room_number: int
    date: date
