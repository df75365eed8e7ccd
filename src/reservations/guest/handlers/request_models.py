from uuid import UUID

from pydantic import BaseModel, Field


class RegisterGuestRequest(BaseModel):
    """宿泊客登録リクエストモデル"""

    id: UUID = Field(..., description="宿泊客ID")
    first_name: str = Field(..., min_length=1, max_length=100, description="名")
    last_name: str = Field(..., min_length=1, max_length=100, description="姓")
