from services.booking.domain.entity import Booking
from services.booking.domain.repository import ReservationStore
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException


class GetBookingService:
    """予約参照のユースケース"""

    def __init__(self, store: ReservationStore) -> None:
        self._store = store

    def get(self, booking_id: BookingId) -> Booking:
        booking = self._store.find_booking(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking", booking_id)
        return booking
