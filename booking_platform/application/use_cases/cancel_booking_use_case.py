"""Use case for cancelling a booking (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from typing import Optional

from booking_platform.domain.entities.booking import Booking
from booking_platform.domain.entities.payment import PaymentStatus
from booking_platform.domain.exceptions import NotFoundError
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository


logger = logging.getLogger(__name__)


@dataclass
class CancelBookingRequest:
    """Input for CancelBookingUseCase."""
    booking_id: str
    user_id: str
    reason: Optional[str] = None


class CancelBookingUseCase:
    """
    Cancel a booking and refund any successful payment for it.

    The refund is issued before the booking is stored as cancelled, so a
    gateway failure leaves the booking untouched and the call can be retried.
    """

    def __init__(
        self,
        booking_repository: IBookingRepository,
        payment_repository: IPaymentRepository,
        payment_gateway: IPaymentGateway,
        clock: IClock
    ):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            booking_repository: Booking storage
            payment_repository: Payment storage
            payment_gateway: Gateway used to refund captured payments
            clock: Time source
        """
        self.booking_repository = booking_repository
        self.payment_repository = payment_repository
        self.payment_gateway = payment_gateway
        self.clock = clock

    def execute(self, request: CancelBookingRequest) -> Booking:
        """
        Cancel the booking.

        Raises:
            NotFoundError: If missing or owned by another user
            InvalidStatusTransitionError: If already cancelled or completed
            PaymentGatewayError: If the refund fails
        """
        booking = self.booking_repository.get(request.booking_id)
        if booking is None or booking.user_id != request.user_id:
            raise NotFoundError("Booking", request.booking_id)

        booking.cancel(reason=request.reason, at=self.clock.now())

        for payment in self.payment_repository.list_by_booking(booking.booking_id):
            if payment.status != PaymentStatus.SUCCEEDED:
                continue
            self.payment_gateway.refund(payment.gateway_reference, payment.amount)
            payment.refund()
            self.payment_repository.save(payment)
            logger.info(f"Payment {payment.payment_id} refunded for booking {booking.booking_id}")

        self.booking_repository.save(booking)
        logger.info(f"Booking {booking.booking_id} cancelled")
        return booking
