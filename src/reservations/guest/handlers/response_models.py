from __future__ import annotations

from pydantic import BaseModel

from reservations.guest.domain.entity.guest import Guest


class GuestData(BaseModel):
    """宿泊客データのレスポンスモデル"""

    guest_id: str
    first_name: str
    last_name: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: GuestData


def to_response(guest: Guest) -> dict:
    """Guest エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=GuestData(
            guest_id=str(guest.id),
            first_name=guest.first_name,
            last_name=guest.last_name,
        )
    ).model_dump()
