from __future__ import annotations

from pydantic import BaseModel

from reservations.hotel.domain.entity.hotel import Hotel


class AddressData(BaseModel):
    """住所データのレスポンスモデル"""

    street: str
    city: str
    state_or_province: str
    postal_code: str
    country: str


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    hotel_id: str
    name: str
    phone: str
    address: AddressData


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: HotelData


class HotelListResponse(BaseModel):
    """ホテル一覧レスポンスモデル"""

    status: str = "success"
    data: list[HotelData]
    count: int


def _to_data(hotel: Hotel) -> HotelData:
    return HotelData(
        hotel_id=str(hotel.id),
        name=hotel.name,
        phone=hotel.phone,
        address=AddressData(
            street=hotel.address.street,
            city=hotel.address.city,
            state_or_province=hotel.address.state_or_province,
            postal_code=hotel.address.postal_code,
            country=hotel.address.country,
        ),
    )


def to_response(hotel: Hotel) -> dict:
    """Hotel エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=_to_data(hotel)).model_dump()


def to_list_response(hotels: list[Hotel]) -> dict:
    """Hotel の一覧をレスポンス辞書に変換する"""
    return HotelListResponse(
        data=[_to_data(hotel) for hotel in hotels],
        count=len(hotels),
    ).model_dump()
