from collections import defaultdict

from services.booking.domain.entity import Booking
from services.booking.domain.repository import (
    BookingWrite,
    ReservationChangeSet,
    ReservationStore,
)
from services.booking.domain.service.availability_ledger import AvailabilityLedger
from services.booking.domain.value_object import RoomId, UserId
from services.shared.domain import (
    EmptyResultException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils import get_logger

logger = get_logger()

# DynamoDB TransactWriteItems の上限 100 件から空室数の更新 1 件を引いた数
MAX_BOOKINGS_PER_BATCH = 99
MAX_BATCH_ATTEMPTS = 3


class DeleteAllBookingsService:
    """ユーザーの全予約削除のユースケース"""

    def __init__(
        self,
        store: ReservationStore,
        ledger: AvailabilityLedger,
        batch_size: int = MAX_BOOKINGS_PER_BATCH,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._batch_size = batch_size

    def delete_all(self, user_id: UserId) -> int:
        """ユーザーの予約をすべて削除し、削除件数を返す

        部屋ごとに「予約の削除 + 合計部屋数の戻し」を 1 トランザクションで確定する。
        一覧取得後に別リクエストで削除された予約は件数に含めない。
        """
        if self._store.find_user(user_id) is None:
            raise ResourceNotFoundException("User", user_id)

        bookings = self._store.find_bookings_by_user(user_id)
        if not bookings:
            raise EmptyResultException(f"User {user_id} does not have any bookings")

        by_room: dict[RoomId, list[Booking]] = defaultdict(list)
        for booking in bookings:
            by_room[booking.room_id].append(booking)

        deleted = 0
        for room_id, room_bookings in by_room.items():
            for start in range(0, len(room_bookings), self._batch_size):
                batch = room_bookings[start : start + self._batch_size]
                deleted += self._delete_batch(room_id, batch)
        return deleted

    def _delete_batch(self, room_id: RoomId, bookings: list[Booking]) -> int:
        for _ in range(MAX_BATCH_ATTEMPTS):
            # 部屋は毎回読み直す（前のバッチで空室数が変わっている）
            room = self._store.find_room(room_id)
            if room is None:
                raise ResourceNotFoundException("Room", room_id)

            released = sum(booking.number_of_rooms for booking in bookings)
            adjustment = self._ledger.release(room, released)
            try:
                self._store.commit(
                    ReservationChangeSet(
                        writes=tuple(BookingWrite.remove(b) for b in bookings),
                        adjustments=(adjustment,),
                    )
                )
            except ResourceNotFoundException as e:
                if e.resource != "Booking":
                    raise
                logger.info(
                    "Booking already removed, retrying batch",
                    extra={"room_id": str(room_id), "booking_id": e.identifier},
                )
                bookings = self._still_booked(room_id, bookings)
                if not bookings:
                    return 0
                continue
            return len(bookings)

        raise OptimisticLockException(
            f"Bookings on room {room_id} kept changing during deletion"
        )

    def _still_booked(
        self, room_id: RoomId, bookings: list[Booking]
    ) -> list[Booking]:
        """一貫性のある読み込みで、まだこの部屋に残っている予約だけを返す"""
        current = (self._store.find_booking(booking.id) for booking in bookings)
        return [b for b in current if b is not None and b.room_id == room_id]
