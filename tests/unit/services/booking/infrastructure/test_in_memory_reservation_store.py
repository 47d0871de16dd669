import threading

import pytest

from services.booking.domain.repository import BookingWrite, ReservationChangeSet
from services.booking.domain.value_object import (
    BookingId,
    LedgerAdjustment,
    RoomId,
    UserId,
)
from services.booking.infrastructure import InMemoryReservationStore
from services.shared.domain import (
    CapacityExceededException,
    DuplicateResourceException,
    InsufficientInventoryException,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreFailureException,
)


def _debit(room_id="room-1", delta=-1, capacity=10, floor=0):
    return LedgerAdjustment(
        room_id=RoomId(room_id), delta=delta, capacity=capacity, floor=floor
    )


class TestReads:
    def test_reads_return_copies(self, store):
        room = store.find_room(RoomId("room-1"))
        assert room.number_available == 5
        assert store.find_room(RoomId("room-1")) is not room

    def test_missing_records_are_none(self, store):
        assert store.find_user(UserId("ghost")) is None
        assert store.find_booking(BookingId("missing")) is None

    def test_bookings_are_filtered_by_owner(self, store, create_booking):
        store.commit(
            ReservationChangeSet(
                writes=(
                    BookingWrite.create(create_booking(booking_id="b-1")),
                    BookingWrite.create(
                        create_booking(booking_id="b-2", user_id="user-2")
                    ),
                ),
                adjustments=(),
            )
        )
        owned = store.find_bookings_by_user(UserId("user-1"))
        assert [str(b.id) for b in owned] == ["b-1"]


class TestAdjustAvailability:
    def test_debit(self, store):
        assert store.adjust_availability(_debit(delta=-2)) == 3
        assert store.find_room(RoomId("room-1")).number_available == 3

    def test_debit_below_floor_is_rejected(self, store):
        with pytest.raises(InsufficientInventoryException):
            store.adjust_availability(_debit(delta=-5, floor=1))
        assert store.find_room(RoomId("room-1")).number_available == 5

    def test_credit_beyond_capacity_is_rejected(self, store):
        with pytest.raises(CapacityExceededException):
            store.adjust_availability(_debit(delta=6))

    def test_missing_room(self, store):
        with pytest.raises(ResourceNotFoundException):
            store.adjust_availability(_debit(room_id="room-x"))

    def test_lock_timeout_is_store_failure(self):
        store = InMemoryReservationStore(lock_timeout=0.01)
        held = store._room_lock(RoomId("room-1"))
        held.acquire()
        try:
            with pytest.raises(StoreFailureException, match="Timed out"):
                store.adjust_availability(_debit())
        finally:
            held.release()


class TestCommit:
    def test_create_applies_booking_and_debit(self, store, create_booking):
        booking = create_booking(number_of_rooms=2)
        store.commit(
            ReservationChangeSet(
                writes=(BookingWrite.create(booking),), adjustments=(_debit(delta=-2),)
            )
        )
        assert store.find_booking(booking.id) == booking
        assert store.find_room(RoomId("room-1")).number_available == 3

    def test_failed_adjustment_rolls_back_whole_change_set(
        self, store, create_booking
    ):
        booking = create_booking()
        with pytest.raises(InsufficientInventoryException):
            store.commit(
                ReservationChangeSet(
                    writes=(BookingWrite.create(booking),),
                    adjustments=(
                        _debit(room_id="room-2", delta=-1, capacity=4),
                        _debit(delta=-6),
                    ),
                )
            )
        assert store.find_booking(booking.id) is None
        assert store.find_room(RoomId("room-2")).number_available == 4

    def test_duplicate_create(self, store, create_booking):
        booking = create_booking()
        change_set = ReservationChangeSet(
            writes=(BookingWrite.create(booking),), adjustments=()
        )
        store.commit(change_set)
        with pytest.raises(DuplicateResourceException):
            store.commit(change_set)

    def test_stale_version_is_rejected(self, store, create_booking):
        store.commit(
            ReservationChangeSet(
                writes=(BookingWrite.create(create_booking(version=2)),),
                adjustments=(),
            )
        )
        stale = create_booking(version=1)
        with pytest.raises(OptimisticLockException):
            store.commit(
                ReservationChangeSet(
                    writes=(BookingWrite.remove(stale),), adjustments=(_debit(delta=2),)
                )
            )
        assert store.find_room(RoomId("room-1")).number_available == 5

    def test_remove_missing_booking(self, store, create_booking):
        with pytest.raises(ResourceNotFoundException) as exc_info:
            store.commit(
                ReservationChangeSet(
                    writes=(BookingWrite.remove(create_booking()),), adjustments=()
                )
            )
        assert exc_info.value.resource == "Booking"

    def test_room_locks_are_per_room(self, store):
        held = store._room_lock(RoomId("room-2"))
        held.acquire()
        try:
            done = threading.Event()

            def _adjust_other_room():
                store.adjust_availability(_debit(delta=-1))
                done.set()

            worker = threading.Thread(target=_adjust_other_room)
            worker.start()
            worker.join(timeout=1.0)
            assert done.is_set()
        finally:
            held.release()


def test_change_set_rejects_repeated_room():
    with pytest.raises(ValueError):
        ReservationChangeSet(writes=(), adjustments=(_debit(), _debit(delta=-2)))
