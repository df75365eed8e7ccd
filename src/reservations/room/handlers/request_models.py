import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class BookRoomRequest(BaseModel):
    """客室予約リクエストモデル"""

    guest_id: UUID = Field(..., description="宿泊客ID")
    hotel_id: UUID = Field(..., description="ホテルID")
    room_number: int = Field(..., gt=0, description="部屋番号")
    date: datetime.date = Field(
        ...,
        description="予約日（YYYY-MM-DD形式）",
        examples=["2024-05-01"],
    )


class FindBookedRoomsRequest(BaseModel):
    """予約済み客室検索リクエストモデル（パスパラメータ + クエリ文字列）"""

    guest_id: UUID = Field(..., description="宿泊客ID")
    date: datetime.date = Field(..., description="予約日（YYYY-MM-DD形式）")


class AddRoomRequest(BaseModel):
    """客室登録リクエストモデル"""

    hotel_id: UUID = Field(..., description="ホテルID")
    room_number: int = Field(..., gt=0, description="部屋番号")


class OpenRoomRequest(BaseModel):
    """日付別予約枠の登録リクエストモデル"""

    hotel_id: UUID = Field(..., description="ホテルID")
    room_number: int = Field(..., gt=0, description="部屋番号")
    dates: list[datetime.date] = Field(..., min_length=1, description="予約可能にする日付")
