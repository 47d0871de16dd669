from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from services.shared.domain import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """成功結果"""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """失敗結果（種別タグ付き）

    resource は NotFound のとき欠けているエンティティ名（User / Room / Booking）。
    """

    kind: ErrorKind
    message: str
    resource: str | None = None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    @classmethod
    def from_exception(cls, exc: DomainException) -> Err:
        return cls(
            kind=exc.kind,
            message=str(exc),
            resource=getattr(exc, "resource", None),
        )


Outcome = Union[Ok[T], Err]
