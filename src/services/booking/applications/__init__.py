from .lifecycle_manager import BookingLifecycleManager
from .outcome import Err, Ok, Outcome

__all__ = ["BookingLifecycleManager", "Err", "Ok", "Outcome"]
