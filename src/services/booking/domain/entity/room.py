from __future__ import annotations

from services.booking.domain.value_object import HotelId, RoomId
from services.shared.domain import BusinessRuleViolationException, Entity, Money


class Room(Entity[RoomId]):
    """部屋（在庫単位）

    number_available は在庫台帳の値。更新は台帳経由の差分適用でのみ行う。
    """

    def __init__(
        self,
        id: RoomId,
        hotel_id: HotelId,
        name: str,
        price: Money,
        capacity: int,
        number_available: int,
    ) -> None:
        super().__init__(id)
        if capacity < 0:
            raise BusinessRuleViolationException("Room capacity cannot be negative")
        if not 0 <= number_available <= capacity:
            raise BusinessRuleViolationException(
                f"Available rooms must be between 0 and {capacity}, "
                f"got {number_available}"
            )
        self._hotel_id = hotel_id
        self._name = name
        self._price = price
        self._capacity = capacity
        self._number_available = number_available

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        """1 泊あたりの料金"""
        return self._price

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def number_available(self) -> int:
        return self._number_available

    def with_number_available(self, number_available: int) -> Room:
        """空室数だけを差し替えた新しい Room を返す"""
        return Room(
            id=self.id,
            hotel_id=self._hotel_id,
            name=self._name,
            price=self._price,
            capacity=self._capacity,
            number_available=number_available,
        )
