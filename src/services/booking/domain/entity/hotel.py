from services.booking.domain.value_object import HotelId
from services.shared.domain import Entity


class Hotel(Entity[HotelId]):
    """ホテル"""

    def __init__(self, id: HotelId, name: str) -> None:
        super().__init__(id)
        self._name = name

    @property
    def name(self) -> str:
        return self._name
