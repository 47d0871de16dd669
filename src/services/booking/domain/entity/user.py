from services.booking.domain.value_object import UserId
from services.shared.domain import Entity


class User(Entity[UserId]):
    """利用者（存在確認のためだけに参照し、このコアでは更新しない）"""

    def __init__(self, id: UserId, name: str | None = None) -> None:
        super().__init__(id)
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name
