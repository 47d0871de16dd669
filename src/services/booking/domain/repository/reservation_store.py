from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from services.booking.domain.entity import Booking, Hotel, Room, User
from services.booking.domain.enum import BookingWriteKind
from services.booking.domain.value_object import (
    BookingId,
    HotelId,
    LedgerAdjustment,
    RoomId,
    UserId,
)


@dataclass(frozen=True)
class BookingWrite:
    """予約レコードへの書き込み 1 件

    expected_version が指定された場合、ストアは現在の version と一致するときのみ書き込む。
    """

    kind: BookingWriteKind
    booking: Booking
    expected_version: int | None = None

    @classmethod
    def create(cls, booking: Booking) -> BookingWrite:
        return cls(kind=BookingWriteKind.CREATE, booking=booking)

    @classmethod
    def replace(cls, booking: Booking, expected_version: int) -> BookingWrite:
        return cls(
            kind=BookingWriteKind.REPLACE,
            booking=booking,
            expected_version=expected_version,
        )

    @classmethod
    def remove(cls, booking: Booking) -> BookingWrite:
        return cls(
            kind=BookingWriteKind.REMOVE,
            booking=booking,
            expected_version=booking.version,
        )


@dataclass(frozen=True)
class ReservationChangeSet:
    """1 トランザクションでまとめて確定する変更（全件成功 or 全件失敗）"""

    writes: tuple[BookingWrite, ...] = field(default_factory=tuple)
    adjustments: tuple[LedgerAdjustment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        room_ids = [adjustment.room_id for adjustment in self.adjustments]
        if len(room_ids) != len(set(room_ids)):
            raise ValueError("A change set may adjust each room only once")

    @property
    def room_ids(self) -> frozenset[RoomId]:
        return frozenset(adjustment.room_id for adjustment in self.adjustments)


class ReservationStore(ABC):
    """予約ストアのインターフェース

    - ID による参照、所有者による予約一覧
    - 空室数の条件付き差分更新（単体）
    - 予約の書き込みと空室数の更新をまとめたアトミックな確定
    """

    @abstractmethod
    def find_user(self, user_id: UserId) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_hotel(self, hotel_id: HotelId) -> Hotel | None:
        raise NotImplementedError

    @abstractmethod
    def find_room(self, room_id: RoomId) -> Room | None:
        raise NotImplementedError

    @abstractmethod
    def find_booking(self, booking_id: BookingId) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find_bookings_by_user(self, user_id: UserId) -> list[Booking]:
        """ユーザーが所有する予約を作成順に返す"""
        raise NotImplementedError

    @abstractmethod
    def adjust_availability(self, adjustment: LedgerAdjustment) -> int:
        """空室数に差分を条件付きで適用し、適用後の値を返す

        Raises:
            ResourceNotFoundException: 部屋が存在しない
            InsufficientInventoryException: 適用すると下限を割る
            CapacityExceededException: 適用すると総数を超える
            StoreFailureException: ストア呼び出しの失敗・タイムアウト
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self, change_set: ReservationChangeSet) -> None:
        """予約の書き込みと空室数の更新をアトミックに確定する

        Raises:
            InsufficientInventoryException: いずれかの空室数が下限を割る
            CapacityExceededException: いずれかの空室数が総数を超える
            ResourceNotFoundException: 削除・更新対象の予約がすでに存在しない
            OptimisticLockException: 予約が読み込み後に変更された
            DuplicateResourceException: 作成対象の予約 ID がすでに存在する
            StoreFailureException: ストア呼び出しの失敗・タイムアウト
        """
        raise NotImplementedError
