from functools import lru_cache

from services.booking.applications import BookingLifecycleManager
from services.booking.infrastructure import DynamoDBReservationStore
from services.booking.settings import StoreSettings


@lru_cache(maxsize=1)
def get_manager() -> BookingLifecycleManager:
    """コールドスタート時に 1 度だけ組み立てる"""
    settings = StoreSettings.from_env()
    store = DynamoDBReservationStore(settings=settings)
    return BookingLifecycleManager(
        store=store, admission_policy=settings.admission_policy
    )
