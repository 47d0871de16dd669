"""公開ビュー

内部の監査項目（作成・更新日時）、所有者、version は返さない。
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from services.booking.applications.list_user_bookings import BookingDetails
from services.booking.domain.entity import Booking, Hotel, Room


class BookingView(BaseModel):
    """予約 1 件のビュー"""

    booking_id: str
    room_id: str
    hotel_id: str
    check_in_date: str
    check_out_date: str
    nights: int
    number_of_rooms: int
    cost_amount: str
    cost_currency: str


class HotelSummary(BaseModel):
    hotel_id: str
    name: str


class RoomSummary(BaseModel):
    room_id: str
    name: str
    price_amount: str
    price_currency: str


class BookingSummaryView(BaseModel):
    """一覧用のビュー（部屋・ホテルは ID ではなく概要で返す）"""

    booking_id: str
    check_in_date: str
    check_out_date: str
    nights: int
    number_of_rooms: int
    cost_amount: str
    cost_currency: str
    hotel: HotelSummary | None
    room: RoomSummary | None


class DeletionAck(BaseModel):
    deleted_count: int


def _iso(value: date) -> str:
    return value.isoformat()


def to_booking_view(booking: Booking) -> BookingView:
    return BookingView(
        booking_id=str(booking.id),
        room_id=str(booking.room_id),
        hotel_id=str(booking.hotel_id),
        check_in_date=_iso(booking.stay_period.check_in),
        check_out_date=_iso(booking.stay_period.check_out),
        nights=booking.stay_period.nights(),
        number_of_rooms=booking.number_of_rooms,
        cost_amount=booking.cost.display_amount(),
        cost_currency=str(booking.cost.currency),
    )


def to_hotel_summary(hotel: Hotel) -> HotelSummary:
    return HotelSummary(hotel_id=str(hotel.id), name=hotel.name)


def to_room_summary(room: Room) -> RoomSummary:
    return RoomSummary(
        room_id=str(room.id),
        name=room.name,
        price_amount=room.price.display_amount(),
        price_currency=str(room.price.currency),
    )


def to_booking_summary_view(details: BookingDetails) -> BookingSummaryView:
    booking = details.booking
    return BookingSummaryView(
        booking_id=str(booking.id),
        check_in_date=_iso(booking.stay_period.check_in),
        check_out_date=_iso(booking.stay_period.check_out),
        nights=booking.stay_period.nights(),
        number_of_rooms=booking.number_of_rooms,
        cost_amount=booking.cost.display_amount(),
        cost_currency=str(booking.cost.currency),
        hotel=to_hotel_summary(details.hotel) if details.hotel else None,
        room=to_room_summary(details.room) if details.room else None,
    )
