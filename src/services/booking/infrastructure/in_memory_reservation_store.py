import copy
import threading
from contextlib import ExitStack, contextmanager
from typing import Iterable, Iterator

from services.booking.domain.entity import Booking, Hotel, Room, User
from services.booking.domain.enum import BookingWriteKind
from services.booking.domain.repository import (
    BookingWrite,
    ReservationChangeSet,
    ReservationStore,
)
from services.booking.domain.value_object import (
    BookingId,
    HotelId,
    LedgerAdjustment,
    RoomId,
    UserId,
)
from services.shared.domain import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreFailureException,
)


class InMemoryReservationStore(ReservationStore):
    """メモリ上の ReservationStore 実装（テスト・ローカル実行用）

    空室数を変更するトランザクションは対象の部屋ロックをすべて取得してから
    条件を検証・適用する。ロックは部屋単位で、取得順は部屋 ID 順に固定する。
    _data_lock は辞書の読み書きだけを守る短命なロックで、操作全体は直列化しない。
    予約は常に所属する部屋のロック下で変更される。
    """

    def __init__(self, lock_timeout: float = 5.0) -> None:
        self._users: dict[UserId, User] = {}
        self._hotels: dict[HotelId, Hotel] = {}
        self._rooms: dict[RoomId, Room] = {}
        self._bookings: dict[BookingId, Booking] = {}
        self._room_locks: dict[RoomId, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._data_lock = threading.RLock()
        self._lock_timeout = lock_timeout

    def add_user(self, user: User) -> None:
        with self._data_lock:
            self._users[user.id] = copy.deepcopy(user)

    def add_hotel(self, hotel: Hotel) -> None:
        with self._data_lock:
            self._hotels[hotel.id] = copy.deepcopy(hotel)

    def add_room(self, room: Room) -> None:
        with self._data_lock:
            self._rooms[room.id] = copy.deepcopy(room)

    def find_user(self, user_id: UserId) -> User | None:
        return self._read(self._users, user_id)

    def find_hotel(self, hotel_id: HotelId) -> Hotel | None:
        return self._read(self._hotels, hotel_id)

    def find_room(self, room_id: RoomId) -> Room | None:
        return self._read(self._rooms, room_id)

    def find_booking(self, booking_id: BookingId) -> Booking | None:
        return self._read(self._bookings, booking_id)

    def find_bookings_by_user(self, user_id: UserId) -> list[Booking]:
        with self._data_lock:
            owned = [b for b in self._bookings.values() if b.user_id == user_id]
            owned.sort(key=lambda b: (b.created_at, str(b.id)))
            return copy.deepcopy(owned)

    def adjust_availability(self, adjustment: LedgerAdjustment) -> int:
        with self._locked([adjustment.room_id]):
            room = self._rooms.get(adjustment.room_id)
            if room is None:
                raise ResourceNotFoundException("Room", adjustment.room_id)
            number_available = adjustment.applied_to(room.number_available)
            with self._data_lock:
                self._rooms[room.id] = room.with_number_available(number_available)
            return number_available

    def commit(self, change_set: ReservationChangeSet) -> None:
        with self._locked(change_set.room_ids):
            # 検証をすべて終えてから適用する（途中で失敗しても何も変わらない）
            updated_rooms: list[Room] = []
            for adjustment in change_set.adjustments:
                room = self._rooms.get(adjustment.room_id)
                if room is None:
                    raise ResourceNotFoundException("Room", adjustment.room_id)
                updated_rooms.append(
                    room.with_number_available(
                        adjustment.applied_to(room.number_available)
                    )
                )
            for write in change_set.writes:
                self._check_write(write)

            with self._data_lock:
                for room in updated_rooms:
                    self._rooms[room.id] = room
                for write in change_set.writes:
                    if write.kind is BookingWriteKind.REMOVE:
                        del self._bookings[write.booking.id]
                    else:
                        self._bookings[write.booking.id] = copy.deepcopy(write.booking)

    def _check_write(self, write: BookingWrite) -> None:
        booking_id = write.booking.id
        current = self._bookings.get(booking_id)
        if write.kind is BookingWriteKind.CREATE:
            if current is not None:
                raise DuplicateResourceException(f"Booking already exists: {booking_id}")
            return
        if current is None:
            raise ResourceNotFoundException("Booking", booking_id)
        if current.version != write.expected_version:
            raise OptimisticLockException(
                f"Booking was modified concurrently: {booking_id}, "
                f"expected version {write.expected_version}, found {current.version}"
            )

    def _read(self, records: dict, key: object):
        with self._data_lock:
            record = records.get(key)
            return copy.deepcopy(record) if record is not None else None

    def _room_lock(self, room_id: RoomId) -> threading.Lock:
        with self._registry_lock:
            return self._room_locks.setdefault(room_id, threading.Lock())

    @contextmanager
    def _locked(self, room_ids: Iterable[RoomId]) -> Iterator[None]:
        with ExitStack() as stack:
            for room_id in sorted(room_ids, key=str):
                lock = self._room_lock(room_id)
                if not lock.acquire(timeout=self._lock_timeout):
                    raise StoreFailureException(
                        f"Timed out waiting for room {room_id}"
                    )
                stack.callback(lock.release)
            yield
