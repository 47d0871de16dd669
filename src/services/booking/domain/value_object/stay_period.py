from dataclasses import dataclass
from datetime import date

from services.booking.domain.service.cost_calculator import nights
from services.shared.domain import InvalidRangeException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)

    datetime を渡した場合は時刻のずれを丸めて泊数を数える。
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if not isinstance(self.check_in, date) or not isinstance(
            self.check_out, date
        ):
            raise InvalidRangeException("Check-in and check-out must be dates")
        try:
            ordered = self.check_out > self.check_in
        except TypeError as e:
            raise InvalidRangeException(f"Incomparable dates: {e}") from e
        if not ordered:
            raise InvalidRangeException("Check-out date must be after check-in date")
        if self.nights() < 1:
            raise InvalidRangeException("Stay must cover at least one night")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return nights(self.check_in, self.check_out)
