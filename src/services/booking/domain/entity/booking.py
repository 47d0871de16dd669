from __future__ import annotations

from datetime import datetime

from services.booking.domain.entity.room import Room
from services.booking.domain.value_object import (
    BookingId,
    HotelId,
    RoomCount,
    RoomId,
    StayPeriod,
    UserId,
)
from services.shared.domain import Entity, Money


class Booking(Entity[BookingId]):
    """予約エンティティ

    hotel_id は作成・変更時点の Room から複製した値（非正規化）。
    version は楽観ロック用で、変更のたびに 1 増える。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        room_id: RoomId,
        hotel_id: HotelId,
        stay_period: StayPeriod,
        number_of_rooms: int,
        cost: Money,
        created_at: datetime,
        updated_at: datetime,
        version: int = 1,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._room_id = room_id
        self._hotel_id = hotel_id
        self._stay_period = stay_period
        self._number_of_rooms = RoomCount(number_of_rooms).value
        self._cost = cost
        self._created_at = created_at
        self._updated_at = updated_at
        self._version = version

    @classmethod
    def create(
        cls,
        user_id: UserId,
        room: Room,
        stay_period: StayPeriod,
        number_of_rooms: int,
        cost: Money,
        now: datetime,
    ) -> Booking:
        """新規予約を生成する"""
        return cls(
            id=BookingId.generate(),
            user_id=user_id,
            room_id=room.id,
            hotel_id=room.hotel_id,
            stay_period=stay_period,
            number_of_rooms=number_of_rooms,
            cost=cost,
            created_at=now,
            updated_at=now,
        )

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def number_of_rooms(self) -> int:
        return self._number_of_rooms

    @property
    def cost(self) -> Money:
        return self._cost

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    def reschedule(
        self,
        room: Room,
        stay_period: StayPeriod,
        number_of_rooms: int,
        cost: Money,
        now: datetime,
    ) -> None:
        """部屋・期間・部屋数・料金を置き換える"""
        self._room_id = room.id
        self._hotel_id = room.hotel_id
        self._stay_period = stay_period
        self._number_of_rooms = RoomCount(number_of_rooms).value
        self._cost = cost
        self._updated_at = now
        self._version += 1
