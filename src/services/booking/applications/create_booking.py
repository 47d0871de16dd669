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
from services.booking.domain.value_object import RoomCount, RoomId, StayPeriod, UserId
from services.shared.domain import ResourceNotFoundException


class CreateBookingService:
    """予約作成のユースケース"""

    def __init__(
        self,
        store: ReservationStore,
        ledger: AvailabilityLedger,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._clock = clock

    def create(
        self,
        user_id: UserId,
        room_id: RoomId,
        check_in_date: date,
        check_out_date: date,
        number_of_rooms: int,
    ) -> Booking:
        """予約を作成し、同じトランザクションで空室数を引き当てる"""
        stay_period = StayPeriod(check_in=check_in_date, check_out=check_out_date)
        room_count = RoomCount(number_of_rooms)

        user = self._store.find_user(user_id)
        if user is None:
            raise ResourceNotFoundException("User", user_id)
        room = self._store.find_room(room_id)
        if room is None:
            raise ResourceNotFoundException("Room", room_id)

        adjustment = self._ledger.admit(room, room_count.value)
        cost = calculate_cost(
            stay_period.check_in, stay_period.check_out, room_count.value, room.price
        )
        booking = Booking.create(
            user_id=user.id,
            room=room,
            stay_period=stay_period,
            number_of_rooms=room_count.value,
            cost=cost,
            now=self._clock(),
        )

        self._store.commit(
            ReservationChangeSet(
                writes=(BookingWrite.create(booking),),
                adjustments=(adjustment,),
            )
        )
        return booking
