"""Booking domain entities."""
import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, FrozenSet, Optional

from booking_platform.domain.exceptions import (
    InvalidStatusTransitionError,
    ValidationError,
)


class BookingStatus(str, Enum):
    """Lifecycle states of a booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


_ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED}),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}


@dataclass(frozen=True)
class DateRange:
    """
    Half-open range of days: check-in is included, check-out is not.

    Two stays where one checks out on the day the other checks in do not
    overlap.
    """

    start: date
    end: date

    def __post_init__(self):
        """Validate date range."""
        if not isinstance(self.start, date) or not isinstance(self.end, date):
            raise ValidationError("start and end must be dates")
        if self.start >= self.end:
            raise ValidationError(
                f"start ({self.start.isoformat()}) must be before end ({self.end.isoformat()})"
            )

    @property
    def nights(self) -> int:
        """Number of nights covered by the range."""
        return (self.end - self.start).days

    def overlaps(self, other: "DateRange") -> bool:
        """Check whether two ranges share at least one night."""
        return self.start < other.end and other.start < self.end

    def contains(self, day: date) -> bool:
        """Check whether a day falls inside the range."""
        return self.start <= day < self.end


@dataclass
class Booking:
    """Domain entity representing a reservation of a resource by a user."""

    booking_id: str
    user_id: str
    resource_id: str
    period: DateRange
    total_price: float
    currency: str = "USD"
    status: BookingStatus = BookingStatus.PENDING
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None

    def __post_init__(self):
        """Validate booking entity."""
        if not self.booking_id:
            raise ValidationError("booking_id is required")
        if not self.user_id:
            raise ValidationError("user_id is required")
        if not self.resource_id:
            raise ValidationError("resource_id is required")
        if not isinstance(self.period, DateRange):
            raise ValidationError("period must be a DateRange")
        if not isinstance(self.total_price, (int, float)) or not math.isfinite(self.total_price):
            raise ValidationError(f"total_price must be a finite number, got {self.total_price!r}")
        if self.total_price < 0:
            raise ValidationError("total_price must be non-negative")
        if not isinstance(self.currency, str) or len(self.currency) != 3 or not self.currency.isalpha():
            raise ValidationError(f"Invalid currency: {self.currency!r}")
        self.currency = self.currency.upper()
        try:
            self.status = BookingStatus(self.status)
        except ValueError:
            raise ValidationError(f"Invalid status: {self.status}")

    @property
    def is_active(self) -> bool:
        """Pending and confirmed bookings hold the resource."""
        return self.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)

    def conflicts_with(self, other: "Booking") -> bool:
        """Check whether another booking blocks the same resource and nights."""
        return (
            other.booking_id != self.booking_id
            and other.resource_id == self.resource_id
            and self.is_active
            and other.is_active
            and self.period.overlaps(other.period)
        )

    def confirm(self) -> None:
        """Confirm a pending booking (typically after payment)."""
        self._transition(BookingStatus.CONFIRMED)

    def cancel(self, reason: Optional[str] = None, at: Optional[datetime] = None) -> None:
        """Cancel a pending or confirmed booking."""
        self._transition(BookingStatus.CANCELLED)
        self.cancelled_at = at
        self.cancellation_reason = reason

    def complete(self) -> None:
        """Mark a confirmed booking as completed."""
        self._transition(BookingStatus.COMPLETED)

    def _transition(self, target: BookingStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidStatusTransitionError("Booking", self.status.value, target.value)
        self.status = target
