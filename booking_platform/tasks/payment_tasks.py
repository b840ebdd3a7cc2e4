"""Celery tasks for processing payments asynchronously."""
import logging
from typing import Any, Dict

from celery import Task

from booking_platform.application.use_cases.pay_for_booking_use_case import (
    PayForBookingRequest,
    PayForBookingUseCase,
)
from booking_platform.domain.exceptions import (
    DomainError,
    PaymentDeclinedError,
    PaymentGatewayError,
)
from booking_platform.infrastructure.celery_app import celery_app
from booking_platform.infrastructure.di.service_container import ServiceContainer
from booking_platform.middleware.monitoring import track_payment


logger = logging.getLogger(__name__)


class CallbackTask(Task):
    """Custom task class with failure logging."""

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Handle task failure."""
        logger.error(f"Task {task_id} failed: {exc}", exc_info=einfo)


@celery_app.task(
    bind=True,
    base=CallbackTask,
    max_retries=3,
    default_retry_delay=30,
    name="booking_platform.process_payment"
)
def process_payment_task(self, booking_id: str, user_id: str) -> Dict[str, Any]:
    """
    Pay for a booking in the background.

    Gateway outages are retried with linear backoff. Business outcomes
    (declined card, booking already paid or cancelled) are final.

    Args:
        self: Task instance (bound task)
        booking_id: Booking to pay
        user_id: Paying user

    Returns:
        Processing result dictionary
    """
    container = ServiceContainer().bootstrap()
    use_case: PayForBookingUseCase = container.resolve(PayForBookingUseCase)

    try:
        payment = use_case.execute(PayForBookingRequest(booking_id=booking_id, user_id=user_id))
    except PaymentGatewayError as exc:
        logger.warning(
            f"Gateway error paying booking {booking_id} "
            f"(attempt {self.request.retries + 1}): {exc}"
        )
        raise self.retry(exc=exc, countdown=30 * (self.request.retries + 1))
    except PaymentDeclinedError as exc:
        track_payment("failed")
        logger.info(f"Payment for booking {booking_id} declined: {exc}")
        return {"status": "declined", "booking_id": booking_id, "message": str(exc)}
    except DomainError as exc:
        logger.info(f"Payment for booking {booking_id} not completed: {exc}")
        return {"status": "error", "booking_id": booking_id, "message": str(exc)}

    track_payment(payment.status.value)
    logger.info(f"Payment {payment.payment_id} processed for booking {booking_id}")
    return {"status": "success", "booking_id": booking_id, "payment_id": payment.payment_id}
