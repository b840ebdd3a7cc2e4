"""Use case for paying a booking (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from typing import Optional

from booking_platform.domain.entities.booking import BookingStatus
from booking_platform.domain.entities.payment import Payment, PaymentStatus
from booking_platform.domain.exceptions import (
    InvalidStatusTransitionError,
    NotFoundError,
    PaymentDeclinedError,
)
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository


logger = logging.getLogger(__name__)


@dataclass
class PayForBookingRequest:
    """Input for PayForBookingUseCase."""
    booking_id: str
    user_id: str


class PayForBookingUseCase:
    """
    Charge the booking price and confirm the booking on success.

    Every attempt is recorded as a Payment, including declined ones. A
    pending payment left behind by a gateway error is reused by the next
    attempt, so the gateway sees the same idempotency key and never
    captures the booking twice.
    """

    def __init__(
        self,
        booking_repository: IBookingRepository,
        payment_repository: IPaymentRepository,
        payment_gateway: IPaymentGateway,
        clock: IClock,
        id_generator: IIdGenerator
    ):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            booking_repository: Booking storage
            payment_repository: Payment storage
            payment_gateway: Payment service provider
            clock: Time source
            id_generator: Identifier generator
        """
        self.booking_repository = booking_repository
        self.payment_repository = payment_repository
        self.payment_gateway = payment_gateway
        self.clock = clock
        self.id_generator = id_generator

    def execute(self, request: PayForBookingRequest) -> Payment:
        """
        Pay for a pending booking.

        Args:
            request: Booking and paying user

        Returns:
            The succeeded payment

        Raises:
            NotFoundError: If the booking is missing or owned by another user
            InvalidStatusTransitionError: If the booking is not pending
            PaymentDeclinedError: If the gateway declines the charge
            PaymentGatewayError: If the gateway is unreachable (safe to retry)
        """
        booking = self.booking_repository.get(request.booking_id)
        if booking is None or booking.user_id != request.user_id:
            raise NotFoundError("Booking", request.booking_id)

        if booking.status != BookingStatus.PENDING:
            raise InvalidStatusTransitionError(
                "Booking", booking.status.value, BookingStatus.CONFIRMED.value
            )

        payment = self._pending_payment(booking.booking_id)
        if payment is None:
            payment = Payment(
                payment_id=self.id_generator.new_id("PY"),
                booking_id=booking.booking_id,
                user_id=booking.user_id,
                amount=booking.total_price,
                currency=booking.currency,
                created_at=self.clock.now(),
            )
            # Stored before charging: an attempt whose outcome is unknown is
            # resumed with the same payment id, hence the same idempotency key
            self.payment_repository.save(payment)
        else:
            logger.info(f"Resuming payment {payment.payment_id} for booking {booking.booking_id}")

        result = self.payment_gateway.charge(
            amount=payment.amount,
            currency=payment.currency,
            reference=payment.payment_id,
            metadata={"booking_id": booking.booking_id, "user_id": booking.user_id},
        )

        if not result.success:
            payment.mark_failed(result.failure_reason or "declined")
            self.payment_repository.save(payment)
            logger.warning(
                f"Payment {payment.payment_id} for booking {booking.booking_id} "
                f"declined: {payment.failure_reason}"
            )
            raise PaymentDeclinedError(
                f"Payment declined: {payment.failure_reason}",
                payment_id=payment.payment_id,
            )

        payment.mark_succeeded(result.reference)
        self.payment_repository.save(payment)

        booking.confirm()
        self.booking_repository.save(booking)

        logger.info(
            f"Payment {payment.payment_id} succeeded; booking {booking.booking_id} confirmed"
        )
        return payment

    def _pending_payment(self, booking_id: str) -> Optional[Payment]:
        for payment in self.payment_repository.list_by_booking(booking_id):
            if payment.status == PaymentStatus.PENDING:
                return payment
        return None


class ListBookingPaymentsUseCase:
    """List payment attempts of a booking owned by the user."""

    def __init__(
        self,
        booking_repository: IBookingRepository,
        payment_repository: IPaymentRepository
    ):
        self.booking_repository = booking_repository
        self.payment_repository = payment_repository

    def execute(self, booking_id: str, user_id: str):
        booking = self.booking_repository.get(booking_id)
        if booking is None or booking.user_id != user_id:
            raise NotFoundError("Booking", booking_id)
        return self.payment_repository.list_by_booking(booking_id)
