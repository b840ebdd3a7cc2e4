"""Use case for creating a booking (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from booking_platform.domain.entities.booking import Booking, DateRange
from booking_platform.domain.exceptions import (
    BookingConflictError,
    NotFoundError,
    ValidationError,
)
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.user_repository import IUserRepository


logger = logging.getLogger(__name__)


@dataclass
class CreateBookingRequest:
    """Input for CreateBookingUseCase."""
    user_id: str
    resource_id: str
    start: date
    end: date
    total_price: float
    currency: Optional[str] = None


class CreateBookingUseCase:
    """
    Reserve a resource for a user over a date range.

    The booking is created in pending state and only confirmed once paid.
    """

    def __init__(
        self,
        booking_repository: IBookingRepository,
        user_repository: IUserRepository,
        clock: IClock,
        id_generator: IIdGenerator,
        default_currency: str = "USD"
    ):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            booking_repository: Booking storage
            user_repository: User storage, used to check the booker exists
            clock: Time source
            id_generator: Identifier generator
            default_currency: Currency used when the request omits one
        """
        self.booking_repository = booking_repository
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator
        self.default_currency = default_currency

    def execute(self, request: CreateBookingRequest) -> Booking:
        """
        Create a pending booking.

        Args:
            request: Booking details

        Returns:
            The stored booking

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the range is invalid or starts in the past
            BookingConflictError: If the resource is already held for those nights
        """
        if self.user_repository.get(request.user_id) is None:
            raise NotFoundError("User", request.user_id)

        period = DateRange(request.start, request.end)
        if period.start < self.clock.today():
            raise ValidationError("Bookings cannot start in the past")

        booking = Booking(
            booking_id=self.id_generator.new_id("BK"),
            user_id=request.user_id,
            resource_id=request.resource_id,
            period=period,
            total_price=request.total_price,
            currency=request.currency or self.default_currency,
            created_at=self.clock.now(),
        )

        # The overlap check and the save must not interleave with another
        # request for the same resource
        with self.booking_repository.lock_resource(request.resource_id):
            for existing in self.booking_repository.list_by_resource(request.resource_id):
                if booking.conflicts_with(existing):
                    logger.info(
                        f"Booking conflict on {request.resource_id}: "
                        f"{period.start}..{period.end} overlaps {existing.booking_id}"
                    )
                    raise BookingConflictError(
                        f"Resource '{request.resource_id}' is already booked "
                        f"from {existing.period.start.isoformat()} to {existing.period.end.isoformat()}"
                    )

            self.booking_repository.save(booking)
        logger.info(f"Booking {booking.booking_id} created for user {booking.user_id}")
        return booking
