from datetime import date
from typing import Callable, TypeVar

from services.booking.applications.clock import Clock, utc_now
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.delete_all_bookings import DeleteAllBookingsService
from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.list_user_bookings import ListUserBookingsService
from services.booking.applications.outcome import Err, Ok, Outcome
from services.booking.applications.update_booking import UpdateBookingService
from services.booking.applications.views import (
    BookingSummaryView,
    BookingView,
    DeletionAck,
    to_booking_summary_view,
    to_booking_view,
)
from services.booking.domain.enum import AdmissionPolicy
from services.booking.domain.repository import ReservationStore
from services.booking.domain.service.availability_ledger import AvailabilityLedger
from services.booking.domain.value_object import (
    AdjustmentOutcome,
    BookingId,
    RoomId,
    UserId,
)
from services.shared.domain import DomainException, ErrorKind
from services.shared.utils import get_logger

logger = get_logger()

T = TypeVar("T")


class BookingLifecycleManager:
    """予約ライフサイクルの窓口

    各ユースケースを呼び出し、例外を Ok / Err の結果に変換して返す。
    ストアはコンストラクタで受け取る。
    """

    def __init__(
        self,
        store: ReservationStore,
        admission_policy: AdmissionPolicy = AdmissionPolicy.STRICT,
        clock: Clock = utc_now,
    ) -> None:
        self._ledger = AvailabilityLedger(store, admission_policy)
        self._create = CreateBookingService(store, self._ledger, clock)
        self._update = UpdateBookingService(store, self._ledger, clock)
        self._get = GetBookingService(store)
        self._list = ListUserBookingsService(store)
        self._delete = DeleteBookingService(store, self._ledger)
        self._delete_all = DeleteAllBookingsService(store, self._ledger)

    @property
    def ledger(self) -> AvailabilityLedger:
        return self._ledger

    def create_booking(
        self,
        user_id: str,
        room_id: str,
        check_in_date: date,
        check_out_date: date,
        number_of_rooms: int,
    ) -> Outcome[BookingView]:
        return self._run(
            "create_booking",
            lambda: to_booking_view(
                self._create.create(
                    user_id=UserId(user_id),
                    room_id=RoomId(room_id),
                    check_in_date=check_in_date,
                    check_out_date=check_out_date,
                    number_of_rooms=number_of_rooms,
                )
            ),
        )

    def update_booking_by_id(
        self,
        booking_id: str,
        room_id: str,
        check_in_date: date,
        check_out_date: date,
        number_of_rooms: int,
    ) -> Outcome[BookingView]:
        return self._run(
            "update_booking_by_id",
            lambda: to_booking_view(
                self._update.update(
                    booking_id=BookingId(booking_id),
                    room_id=RoomId(room_id),
                    check_in_date=check_in_date,
                    check_out_date=check_out_date,
                    number_of_rooms=number_of_rooms,
                )
            ),
        )

    def get_booking_by_id(self, booking_id: str) -> Outcome[BookingView]:
        return self._run(
            "get_booking_by_id",
            lambda: to_booking_view(self._get.get(BookingId(booking_id))),
        )

    def get_all_bookings_by_user(
        self, user_id: str
    ) -> Outcome[list[BookingSummaryView]]:
        return self._run(
            "get_all_bookings_by_user",
            lambda: [
                to_booking_summary_view(details)
                for details in self._list.list_for_user(UserId(user_id))
            ],
        )

    def delete_booking_by_id(self, booking_id: str) -> Outcome[DeletionAck]:
        def _delete() -> DeletionAck:
            self._delete.delete(BookingId(booking_id))
            return DeletionAck(deleted_count=1)

        return self._run("delete_booking_by_id", _delete)

    def delete_all_bookings(self, user_id: str) -> Outcome[DeletionAck]:
        return self._run(
            "delete_all_bookings",
            lambda: DeletionAck(
                deleted_count=self._delete_all.delete_all(UserId(user_id))
            ),
        )

    def adjust_availability(self, room_id: str, delta: int) -> AdjustmentOutcome:
        """空室数への単体の差分更新（在庫の手動補正用）"""
        return self._ledger.adjust(RoomId(room_id), delta)

    def _run(self, operation: str, action: Callable[[], T]) -> Outcome[T]:
        try:
            return Ok(action())
        except DomainException as e:
            if e.kind is ErrorKind.STORE_FAILURE:
                logger.exception(
                    "Store failure", extra={"operation": operation}
                )
            else:
                logger.warning(
                    "Booking operation rejected",
                    extra={
                        "operation": operation,
                        "error_kind": e.kind.value,
                        "reason": str(e),
                    },
                )
            return Err.from_exception(e)
