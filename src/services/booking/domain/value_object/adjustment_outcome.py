from dataclasses import dataclass

from services.booking.domain.value_object.entity_ids import RoomId


@dataclass(frozen=True)
class Applied:
    """差分が適用された"""

    room_id: RoomId
    number_available: int


@dataclass(frozen=True)
class Rejected:
    """条件を満たさず適用されなかった（在庫不足・総数超過・部屋なし）"""

    room_id: RoomId
    reason: str


@dataclass(frozen=True)
class StoreFailed:
    """ストア呼び出しの失敗・タイムアウト（リトライ可能）"""

    room_id: RoomId
    reason: str


AdjustmentOutcome = Applied | Rejected | StoreFailed
