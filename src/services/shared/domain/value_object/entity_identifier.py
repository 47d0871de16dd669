from dataclasses import dataclass

from ..exception import InvalidRangeException


@dataclass(frozen=True)
class EntityIdentifier:
    """エンティティ ID の基底 Value Object

    サブクラス同士は型が異なれば別物として扱われる。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidRangeException(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value
