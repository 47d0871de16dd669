from .dynamodb_reservation_store import DynamoDBReservationStore
from .in_memory_reservation_store import InMemoryReservationStore

__all__ = ["DynamoDBReservationStore", "InMemoryReservationStore"]
