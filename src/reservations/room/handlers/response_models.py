from __future__ import annotations

from pydantic import BaseModel

from reservations.room.domain.value_object import (
    BookingRequest,
    Room,
    RoomByHotelAndDate,
)


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    guest_id: str
    hotel_id: str
    room_number: int
    date: str


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    hotel_id: str
    room_number: int


class RoomByHotelAndDateData(BaseModel):
    """ホテル・日付別客室データのレスポンスモデル"""

    hotel_id: str
    room_number: int
    date: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | RoomData


class RoomListResponse(BaseModel):
    """客室一覧レスポンスモデル"""

    status: str = "success"
    data: list[RoomByHotelAndDateData]
    count: int


def to_booking_response(booking_request: BookingRequest) -> dict:
    """確定した予約リクエストをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            guest_id=str(booking_request.guest_id),
            hotel_id=str(booking_request.hotel_id),
            room_number=booking_request.room_number,
            date=booking_request.date.isoformat(),
        )
    ).model_dump()


def to_room_response(room: Room) -> dict:
    """Room をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=RoomData(hotel_id=str(room.hotel_id), room_number=room.room_number)
    ).model_dump()


def to_room_list_response(rooms: list[RoomByHotelAndDate]) -> dict:
    """ホテル・日付別客室の一覧をレスポンス辞書に変換する"""
    return RoomListResponse(
        data=[
            RoomByHotelAndDateData(
                hotel_id=str(room.hotel_id),
                room_number=room.room_number,
                date=room.date.isoformat(),
            )
            for room in rooms
        ],
        count=len(rooms),
    ).model_dump()
