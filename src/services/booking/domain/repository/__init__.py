from .reservation_store import BookingWrite, ReservationChangeSet, ReservationStore

__all__ = ["BookingWrite", "ReservationChangeSet", "ReservationStore"]
