from enum import Enum


class AdmissionPolicy(str, Enum):
    """新規予約の受け付け境界

    STRICT: 要求部屋数 < 空室数 のときのみ受け付ける（空室がちょうど 0 になる予約は拒否）
    INCLUSIVE: 要求部屋数 <= 空室数 で受け付ける
    """

    STRICT = "strict"
    INCLUSIVE = "inclusive"

    @property
    def minimum_remaining(self) -> int:
        """予約確定後に残っていなければならない空室数"""
        return 1 if self is AdmissionPolicy.STRICT else 0
