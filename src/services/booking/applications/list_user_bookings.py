from dataclasses import dataclass

from services.booking.domain.entity import Booking, Hotel, Room
from services.booking.domain.repository import ReservationStore
from services.booking.domain.value_object import HotelId, RoomId, UserId
from services.shared.domain import EmptyResultException, ResourceNotFoundException


@dataclass(frozen=True)
class BookingDetails:
    """予約とその部屋・ホテルを結合したもの"""

    booking: Booking
    room: Room | None
    hotel: Hotel | None


class ListUserBookingsService:
    """ユーザーの予約一覧のユースケース"""

    def __init__(self, store: ReservationStore) -> None:
        self._store = store

    def list_for_user(self, user_id: UserId) -> list[BookingDetails]:
        """ユーザーの予約をホテル・部屋情報付きで返す（0 件ならエラー）"""
        if self._store.find_user(user_id) is None:
            raise ResourceNotFoundException("User", user_id)

        bookings = self._store.find_bookings_by_user(user_id)
        if not bookings:
            raise EmptyResultException(f"User {user_id} does not have any bookings")

        rooms: dict[RoomId, Room | None] = {}
        hotels: dict[HotelId, Hotel | None] = {}
        details: list[BookingDetails] = []
        for booking in bookings:
            if booking.room_id not in rooms:
                rooms[booking.room_id] = self._store.find_room(booking.room_id)
            if booking.hotel_id not in hotels:
                hotels[booking.hotel_id] = self._store.find_hotel(booking.hotel_id)
            details.append(
                BookingDetails(
                    booking=booking,
                    room=rooms[booking.room_id],
                    hotel=hotels[booking.hotel_id],
                )
            )
        return details
