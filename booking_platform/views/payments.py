"""Payment endpoints."""
import logging

from flask import Blueprint, current_app, jsonify

from booking_platform.application.use_cases.get_booking_use_case import GetBookingUseCase
from booking_platform.application.use_cases.pay_for_booking_use_case import (
    ListBookingPaymentsUseCase,
    PayForBookingRequest,
    PayForBookingUseCase,
)
from booking_platform.domain.entities.booking import BookingStatus
from booking_platform.domain.entities.payment import PaymentStatus
from booking_platform.domain.exceptions import InvalidStatusTransitionError, PaymentDeclinedError
from booking_platform.domain.interfaces.presenter import IPaymentPresenter
from booking_platform.middleware.monitoring import track_booking_event, track_payment, track_request
from booking_platform.views.helpers import current_user_id, resolve


payments_blueprint = Blueprint("payments", __name__)
_logger = logging.getLogger(__name__)


@payments_blueprint.route("/bookings/<booking_id>/payments", methods=["POST"])
@track_request("pay_for_booking")
def pay_for_booking(booking_id: str):
    """
    Pay for a pending booking.

    With ASYNC_PAYMENTS enabled the charge is queued on Celery and the
    endpoint answers 202 immediately.
    """
    user_id = current_user_id()

    if current_app.config.get("ASYNC_PAYMENTS"):
        from booking_platform.tasks.payment_tasks import process_payment_task

        # Same visibility and status rules as the synchronous path, before queuing
        booking = resolve(GetBookingUseCase).execute(booking_id, user_id=user_id)
        if booking.status != BookingStatus.PENDING:
            raise InvalidStatusTransitionError(
                "Booking", booking.status.value, BookingStatus.CONFIRMED.value
            )

        result = process_payment_task.delay(booking_id, user_id)
        _logger.info(f"Payment for booking {booking_id} queued as task {result.id}")
        return jsonify({
            "status": "accepted",
            "booking_id": booking_id,
            "task_id": result.id
        }), 202

    use_case: PayForBookingUseCase = resolve(PayForBookingUseCase)
    try:
        payment = use_case.execute(PayForBookingRequest(booking_id=booking_id, user_id=user_id))
    except PaymentDeclinedError:
        track_payment(PaymentStatus.FAILED.value)
        raise

    track_payment(payment.status.value)
    track_booking_event("confirmed")

    return jsonify({
        "status": "success",
        "payment": resolve(IPaymentPresenter).present(payment)
    }), 201


@payments_blueprint.route("/bookings/<booking_id>/payments", methods=["GET"])
@track_request("list_booking_payments")
def list_booking_payments(booking_id: str):
    """List payment attempts of one of the calling user's bookings."""
    payments = resolve(ListBookingPaymentsUseCase).execute(booking_id, user_id=current_user_id())
    return jsonify({
        "status": "success",
        "payments": resolve(IPaymentPresenter).present_many(payments)
    }), 200
