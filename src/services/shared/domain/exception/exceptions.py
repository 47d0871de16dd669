from typing import ClassVar

from .error_kind import ErrorKind


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    kind: ClassVar[ErrorKind]


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} does not exist: {identifier}")
        self.resource = resource
        self.identifier = str(identifier)


class EmptyResultException(DomainException):
    """一覧・一括削除の対象が 0 件の場合"""

    kind = ErrorKind.EMPTY


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    kind = ErrorKind.INVALID_RANGE


class InvalidRangeException(BusinessRuleViolationException):
    """日付範囲・部屋数が不正な場合"""

    kind = ErrorKind.INVALID_RANGE


class InsufficientInventoryException(BusinessRuleViolationException):
    """空室数が要求を満たさない場合"""

    kind = ErrorKind.INSUFFICIENT_INVENTORY


class CapacityExceededException(BusinessRuleViolationException):
    """在庫の戻しが部屋の総数を超える場合（他の更新と競合した可能性がある）"""

    kind = ErrorKind.CONFLICT


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    kind = ErrorKind.CONFLICT


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    kind = ErrorKind.CONFLICT


class StoreFailureException(DomainException):
    """永続化層の呼び出しが失敗・タイムアウトした場合"""

    kind = ErrorKind.STORE_FAILURE
