import pytest

from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.domain.enum import BookingWriteKind
from services.booking.domain.service.availability_ledger import AvailabilityLedger
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException


@pytest.fixture
def service(mock_store):
    return DeleteBookingService(store=mock_store, ledger=AvailabilityLedger(mock_store))


class TestDeleteBookingService:
    def test_delete_removes_booking_and_credits_room(
        self, service, mock_store, create_booking, create_room
    ):
        booking = create_booking(number_of_rooms=3, version=4)
        mock_store.find_booking.return_value = booking
        mock_store.find_room.return_value = create_room(number_available=1)

        assert service.delete(BookingId("booking-1")) is booking

        change_set = mock_store.commit.call_args.args[0]
        (write,) = change_set.writes
        (adjustment,) = change_set.adjustments
        assert write.kind is BookingWriteKind.REMOVE
        assert write.expected_version == 4
        assert adjustment.delta == 3
        assert adjustment.applied_to(1) == 4

    def test_booking_not_found(self, service, mock_store):
        mock_store.find_booking.return_value = None

        with pytest.raises(ResourceNotFoundException) as exc_info:
            service.delete(BookingId("missing"))

        assert exc_info.value.resource == "Booking"
        mock_store.commit.assert_not_called()
