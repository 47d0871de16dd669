from dataclasses import dataclass

from services.shared.domain import EntityIdentifier


@dataclass(frozen=True)
class UserId(EntityIdentifier):
    """ユーザーID（認証層で解決済みの値をそのまま信頼する）"""


@dataclass(frozen=True)
class HotelId(EntityIdentifier):
    """ホテルID"""


@dataclass(frozen=True)
class RoomId(EntityIdentifier):
    """部屋（在庫単位）ID"""
