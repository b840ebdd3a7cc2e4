"""Booking presenter (view model builder)."""
from typing import Any, Dict

from booking_platform.domain.entities.booking import Booking
from booking_platform.domain.interfaces.presenter import IBookingPresenter


class BookingPresenter(IBookingPresenter):
    """
    Presents bookings as JSON-ready dictionaries.

    Dates are rendered as ISO strings and money is rounded to two decimals.
    """

    def present(self, booking: Booking) -> Dict[str, Any]:
        """
        Build the booking view model.

        Args:
            booking: Booking entity

        Returns:
            View model dictionary
        """
        return {
            "booking_id": booking.booking_id,
            "user_id": booking.user_id,
            "resource_id": booking.resource_id,
            "check_in": booking.period.start.isoformat(),
            "check_out": booking.period.end.isoformat(),
            "nights": booking.period.nights,
            "total_price": round(booking.total_price, 2),
            "currency": booking.currency,
            "status": booking.status.value,
            "is_active": booking.is_active,
            "created_at": booking.created_at.isoformat() if booking.created_at else None,
            "cancelled_at": booking.cancelled_at.isoformat() if booking.cancelled_at else None,
            "cancellation_reason": booking.cancellation_reason,
        }
