from dataclasses import dataclass

from services.booking.domain.value_object.entity_ids import RoomId
from services.shared.domain import (
    CapacityExceededException,
    InsufficientInventoryException,
)


@dataclass(frozen=True)
class LedgerAdjustment:
    """空室数への条件付き差分更新

    適用後の値が floor 以上 capacity 以下であることを、
    ストアが書き込みと同時に（アトミックに）検証する。
    """

    room_id: RoomId
    delta: int
    capacity: int
    floor: int = 0

    @property
    def lower_bound(self) -> int:
        """適用前の空室数として許される最小値"""
        return self.floor - self.delta

    @property
    def upper_bound(self) -> int:
        """適用前の空室数として許される最大値"""
        return self.capacity - self.delta

    @property
    def is_debit(self) -> bool:
        return self.delta < 0

    def permits(self, current: int) -> bool:
        return self.lower_bound <= current <= self.upper_bound

    def applied_to(self, current: int) -> int:
        """現在値に差分を適用した値を返す（範囲外なら例外）"""
        if current < self.lower_bound:
            raise InsufficientInventoryException(
                f"Room {self.room_id} has {current} rooms available, "
                f"cannot reserve {-self.delta}"
            )
        if current > self.upper_bound:
            raise CapacityExceededException(
                f"Room {self.room_id} cannot be credited {self.delta} rooms "
                f"beyond its capacity of {self.capacity}"
            )
        return current + self.delta
