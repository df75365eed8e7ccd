from uuid import UUID

from pydantic import BaseModel, Field


class AddressRequest(BaseModel):
    """住所のリクエストモデル"""

    street: str = Field(..., min_length=1, description="番地")
    city: str = Field(..., min_length=1, description="都市名")
    state_or_province: str = Field(default="", description="州・県")
    postal_code: str = Field(default="", description="郵便番号")
    country: str = Field(default="", description="国")


class AddHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    id: UUID = Field(..., description="ホテルID")
    name: str = Field(..., min_length=1, max_length=100, description="ホテル名")
    phone: str = Field(..., min_length=1, description="電話番号")
    address: AddressRequest


class FindHotelsRequest(BaseModel):
    """都市別ホテル検索リクエストモデル（クエリ文字列）"""

    city: str = Field(..., min_length=1, description="都市名")
