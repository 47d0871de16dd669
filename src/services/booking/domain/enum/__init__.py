from .admission_policy import AdmissionPolicy
from .booking_write_kind import BookingWriteKind

__all__ = ["AdmissionPolicy", "BookingWriteKind"]
