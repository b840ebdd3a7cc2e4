"""Domain entities - core business objects."""
from booking_platform.domain.entities.booking import Booking, BookingStatus, DateRange
from booking_platform.domain.entities.payment import Payment, PaymentStatus
from booking_platform.domain.entities.user import User

__all__ = [
    "Booking",
    "BookingStatus",
    "DateRange",
    "Payment",
    "PaymentStatus",
    "User",
]
