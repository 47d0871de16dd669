"""料金計算

泊数 × 部屋数 × 1 泊あたりの料金。副作用なし。
"""

import math
from datetime import date, datetime, time

from services.shared.domain import InvalidRangeException, Money

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def nights(check_in: date, check_out: date) -> int:
    """2 つの日付の差を日数に丸める（時刻のずれは四捨五入で吸収、.5 は切り上げ）"""
    delta = _as_datetime(check_out) - _as_datetime(check_in)
    return math.floor(abs(delta.total_seconds()) / SECONDS_PER_DAY + 0.5)


def calculate_cost(
    check_in: date,
    check_out: date,
    number_of_rooms: int,
    nightly_rate: Money,
) -> Money:
    """予約料金を計算する"""
    if _as_datetime(check_out) <= _as_datetime(check_in):
        raise InvalidRangeException("Check-out date must be after check-in date")
    stay_nights = nights(check_in, check_out)
    if stay_nights < 1:
        raise InvalidRangeException("Stay must cover at least one night")
    if number_of_rooms < 1:
        raise InvalidRangeException("Number of rooms must be at least 1")
    return nightly_rate.multiply(stay_nights * number_of_rooms)
