from services.booking.domain.entity import Booking
from services.booking.domain.repository import (
    BookingWrite,
    ReservationChangeSet,
    ReservationStore,
)
from services.booking.domain.service.availability_ledger import AvailabilityLedger
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException


class DeleteBookingService:
    """予約削除のユースケース"""

    def __init__(self, store: ReservationStore, ledger: AvailabilityLedger) -> None:
        self._store = store
        self._ledger = ledger

    def delete(self, booking_id: BookingId) -> Booking:
        """予約を削除し、同じトランザクションで部屋数を空室に戻す"""
        booking = self._store.find_booking(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking", booking_id)
        room = self._store.find_room(booking.room_id)
        if room is None:
            raise ResourceNotFoundException("Room", booking.room_id)

        adjustment = self._ledger.release(room, booking.number_of_rooms)
        self._store.commit(
            ReservationChangeSet(
                writes=(BookingWrite.remove(booking),),
                adjustments=(adjustment,),
            )
        )
        return booking
