from .adjustment_outcome import AdjustmentOutcome, Applied, Rejected, StoreFailed
from .booking_id import BookingId
from .entity_ids import HotelId, RoomId, UserId
from .ledger_adjustment import LedgerAdjustment
from .room_count import RoomCount
from .stay_period import StayPeriod

__all__ = [
    "AdjustmentOutcome",
    "Applied",
    "Rejected",
    "StoreFailed",
    "BookingId",
    "HotelId",
    "RoomId",
    "UserId",
    "LedgerAdjustment",
    "RoomCount",
    "StayPeriod",
]
