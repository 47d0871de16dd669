from dataclasses import dataclass

from services.shared.domain import InvalidRangeException


@dataclass(frozen=True)
class RoomCount:
    """予約する部屋数（1 以上の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidRangeException("Number of rooms must be an integer")
        if self.value < 1:
            raise InvalidRangeException("Number of rooms must be at least 1")

    def __int__(self) -> int:
        return self.value
