from datetime import date

from services.booking.applications.clock import Clock, utc_now
from services.booking.domain.entity import Booking
from services.booking.domain.repository import (
    BookingWrite,
    ReservationChangeSet,
    ReservationStore,
)
from services.booking.domain.service.availability_ledger import AvailabilityLedger
from services.booking.domain.service.cost_calculator import calculate_cost
from services.booking.domain.value_object import (
    BookingId,
    RoomCount,
    RoomId,
    StayPeriod,
)
from services.shared.domain import ResourceNotFoundException


class UpdateBookingService:
    """予約変更のユースケース"""

    def __init__(
        self,
        store: ReservationStore,
        ledger: AvailabilityLedger,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._clock = clock

    def update(
        self,
        booking_id: BookingId,
        room_id: RoomId,
        check_in_date: date,
        check_out_date: date,
        number_of_rooms: int,
    ) -> Booking:
        """予約を変更する

        旧予約分を元の部屋に戻し、新予約分を新しい部屋から引き当てる。
        """
        stay_period = StayPeriod(check_in=check_in_date, check_out=check_out_date)
        room_count = RoomCount(number_of_rooms)

        booking = self._store.find_booking(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking", booking_id)
        new_room = self._store.find_room(room_id)
        if new_room is None:
            raise ResourceNotFoundException("Room", room_id)
        if booking.room_id == new_room.id:
            old_room = new_room
        else:
            old_room = self._store.find_room(booking.room_id)
            if old_room is None:
                raise ResourceNotFoundException("Room", booking.room_id)

        adjustments = self._ledger.rebook(
            old_room, booking.number_of_rooms, new_room, room_count.value
        )
        cost = calculate_cost(
            stay_period.check_in,
            stay_period.check_out,
            room_count.value,
            new_room.price,
        )

        expected_version = booking.version
        booking.reschedule(
            room=new_room,
            stay_period=stay_period,
            number_of_rooms=room_count.value,
            cost=cost,
            now=self._clock(),
        )
        self._store.commit(
            ReservationChangeSet(
                writes=(BookingWrite.replace(booking, expected_version),),
                adjustments=tuple(adjustments),
            )
        )
        return booking
