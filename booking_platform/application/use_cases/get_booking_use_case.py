"""Use case for reading bookings."""
from typing import List, Optional

from booking_platform.domain.entities.booking import Booking, BookingStatus
from booking_platform.domain.exceptions import NotFoundError
from booking_platform.domain.interfaces.booking_repository import IBookingRepository


class GetBookingUseCase:
    """Fetch one booking, optionally restricted to its owner."""

    def __init__(self, booking_repository: IBookingRepository):
        self.booking_repository = booking_repository

    def execute(self, booking_id: str, user_id: Optional[str] = None) -> Booking:
        """
        Load a booking.

        Bookings owned by someone other than user_id are reported as missing
        so their existence is not disclosed.

        Raises:
            NotFoundError: If missing or not owned by user_id
        """
        booking = self.booking_repository.get(booking_id)
        if booking is None or (user_id is not None and booking.user_id != user_id):
            raise NotFoundError("Booking", booking_id)
        return booking


class ListUserBookingsUseCase:
    """List a user's bookings ordered by check-in date."""

    def __init__(self, booking_repository: IBookingRepository):
        self.booking_repository = booking_repository

    def execute(self, user_id: str, status: Optional[BookingStatus] = None) -> List[Booking]:
        bookings = self.booking_repository.list_by_user(user_id)
        if status is not None:
            bookings = [b for b in bookings if b.status == BookingStatus(status)]
        return sorted(bookings, key=lambda b: (b.period.start, b.booking_id))
