from enum import Enum


class ErrorKind(str, Enum):
    """失敗の分類（呼び出し側がリトライ可否を判断するためのタグ）"""

    NOT_FOUND = "NotFound"
    INSUFFICIENT_INVENTORY = "InsufficientInventory"
    INVALID_RANGE = "InvalidRange"
    EMPTY = "Empty"
    CONFLICT = "Conflict"
    STORE_FAILURE = "StoreFailure"

    @property
    def retryable(self) -> bool:
        """インフラ起因・競合起因の失敗のみリトライ可能"""
        return self in (ErrorKind.CONFLICT, ErrorKind.STORE_FAILURE)
