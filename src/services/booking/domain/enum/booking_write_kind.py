from enum import Enum


class BookingWriteKind(str, Enum):
    """予約レコードへの書き込み種別"""

    CREATE = "CREATE"
    REPLACE = "REPLACE"
    REMOVE = "REMOVE"
