from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from services.booking.applications import BookingLifecycleManager
from services.booking.domain.entity import Booking, Hotel, Room, User
from services.booking.domain.enum import AdmissionPolicy
from services.booking.domain.value_object import (
    BookingId,
    HotelId,
    RoomId,
    StayPeriod,
    UserId,
)
from services.booking.infrastructure import InMemoryReservationStore
from services.shared.domain import Currency, Money

FIXED_NOW = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: str = "room-1",
        hotel_id: str = "hotel-1",
        name: str = "Deluxe Twin",
        price_amount: Decimal = Decimal("100"),
        capacity: int = 10,
        number_available: int = 5,
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            hotel_id=HotelId(value=hotel_id),
            name=name,
            price=Money(amount=price_amount, currency=Currency.usd()),
            capacity=capacity,
            number_available=number_available,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        room_id: str = "room-1",
        hotel_id: str = "hotel-1",
        check_in: date = date(2024, 1, 1),
        check_out: date = date(2024, 1, 4),
        number_of_rooms: int = 2,
        cost_amount: Decimal = Decimal("600"),
        version: int = 1,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            room_id=RoomId(value=room_id),
            hotel_id=HotelId(value=hotel_id),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            number_of_rooms=number_of_rooms,
            cost=Money(amount=cost_amount, currency=Currency.usd()),
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
            version=version,
        )

    return _factory


@pytest.fixture
def store(create_room):
    """ユーザー 2 名・ホテル 1 件・部屋 2 件を登録したインメモリストア

    room-1: 100 USD / 総数 10 / 空室 5
    room-2: 250 USD / 総数 4 / 空室 4
    """
    store = InMemoryReservationStore(lock_timeout=2.0)
    store.add_user(User(id=UserId("user-1"), name="Alice"))
    store.add_user(User(id=UserId("user-2"), name="Bob"))
    store.add_hotel(Hotel(id=HotelId("hotel-1"), name="Grand Hotel"))
    store.add_room(create_room())
    store.add_room(
        create_room(
            room_id="room-2",
            name="Suite",
            price_amount=Decimal("250"),
            capacity=4,
            number_available=4,
        )
    )
    return store


@pytest.fixture
def manager(store):
    return BookingLifecycleManager(store=store, clock=lambda: FIXED_NOW)


@pytest.fixture
def inclusive_manager(store):
    return BookingLifecycleManager(
        store=store,
        admission_policy=AdmissionPolicy.INCLUSIVE,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def available(store):
    """部屋の現在の空室数を返すヘルパー"""

    def _available(room_id: str = "room-1") -> int:
        return store.find_room(RoomId(room_id)).number_available

    return _available
