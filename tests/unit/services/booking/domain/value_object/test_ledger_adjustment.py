import pytest

from services.booking.domain.value_object import LedgerAdjustment, RoomId
from services.shared.domain import (
    CapacityExceededException,
    InsufficientInventoryException,
)


class TestLedgerAdjustment:
    def test_debit_bounds(self):
        adjustment = LedgerAdjustment(room_id=RoomId("room-1"), delta=-4, capacity=10)
        assert adjustment.is_debit
        assert adjustment.lower_bound == 4
        assert adjustment.upper_bound == 14
        assert adjustment.applied_to(5) == 1
        assert adjustment.applied_to(4) == 0

    def test_debit_below_zero_is_rejected(self):
        adjustment = LedgerAdjustment(room_id=RoomId("room-1"), delta=-4, capacity=10)
        assert not adjustment.permits(3)
        with pytest.raises(InsufficientInventoryException):
            adjustment.applied_to(3)

    def test_floor_keeps_rooms_in_reserve(self):
        adjustment = LedgerAdjustment(
            room_id=RoomId("room-1"), delta=-5, capacity=10, floor=1
        )
        assert not adjustment.permits(5)
        assert adjustment.applied_to(6) == 1

    def test_credit_is_bounded_by_capacity(self):
        adjustment = LedgerAdjustment(room_id=RoomId("room-1"), delta=3, capacity=10)
        assert adjustment.applied_to(7) == 10
        with pytest.raises(CapacityExceededException):
            adjustment.applied_to(8)
