"""Booking endpoints."""
import logging

from flask import Blueprint, jsonify, request

from booking_platform.application.use_cases.cancel_booking_use_case import (
    CancelBookingRequest,
    CancelBookingUseCase,
)
from booking_platform.application.use_cases.create_booking_use_case import (
    CreateBookingRequest,
    CreateBookingUseCase,
)
from booking_platform.application.use_cases.get_booking_use_case import (
    GetBookingUseCase,
    ListUserBookingsUseCase,
)
from booking_platform.domain.entities.booking import BookingStatus
from booking_platform.domain.interfaces.presenter import IBookingPresenter
from booking_platform.middleware.error_handler import InvalidBodyError
from booking_platform.middleware.monitoring import track_booking_event, track_request
from booking_platform.views.helpers import current_user_id, parse_body, resolve
from booking_platform.views.schemas import CancelBookingBody, CreateBookingBody


bookings_blueprint = Blueprint("bookings", __name__)
_logger = logging.getLogger(__name__)


@bookings_blueprint.route("/bookings", methods=["POST"])
@track_request("create_booking")
def create_booking():
    """
    Create a pending booking for the calling user.

    Expected payload:
    {
        "resource_id": "room-101",
        "check_in": "2026-11-02",
        "check_out": "2026-11-05",
        "total_price": 360.0,
        "currency": "EUR"  # optional
    }
    """
    user_id = current_user_id()
    body = parse_body(CreateBookingBody)

    use_case: CreateBookingUseCase = resolve(CreateBookingUseCase)
    booking = use_case.execute(CreateBookingRequest(
        user_id=user_id,
        resource_id=body.resource_id,
        start=body.check_in,
        end=body.check_out,
        total_price=body.total_price,
        currency=body.currency,
    ))
    track_booking_event("created")

    return jsonify({
        "status": "success",
        "booking": resolve(IBookingPresenter).present(booking)
    }), 201


@bookings_blueprint.route("/bookings/<booking_id>", methods=["GET"])
@track_request("get_booking")
def get_booking(booking_id: str):
    """Get one of the calling user's bookings."""
    booking = resolve(GetBookingUseCase).execute(booking_id, user_id=current_user_id())
    return jsonify({
        "status": "success",
        "booking": resolve(IBookingPresenter).present(booking)
    }), 200


@bookings_blueprint.route("/users/<user_id>/bookings", methods=["GET"])
@track_request("list_user_bookings")
def list_user_bookings(user_id: str):
    """
    List a user's bookings; optional ?status= filter.

    Users may only list their own bookings.
    """
    if current_user_id() != user_id:
        return jsonify({"status": "error", "message": "Forbidden"}), 403

    status = request.args.get("status")
    if status is not None:
        try:
            status = BookingStatus(status)
        except ValueError:
            raise InvalidBodyError(f"Unknown status filter: {status}")

    bookings = resolve(ListUserBookingsUseCase).execute(user_id, status=status)
    return jsonify({
        "status": "success",
        "bookings": resolve(IBookingPresenter).present_many(bookings)
    }), 200


@bookings_blueprint.route("/bookings/<booking_id>/cancel", methods=["POST"])
@track_request("cancel_booking")
def cancel_booking(booking_id: str):
    """Cancel a booking, refunding any captured payment."""
    user_id = current_user_id()
    body = parse_body(CancelBookingBody, required=False)

    use_case: CancelBookingUseCase = resolve(CancelBookingUseCase)
    booking = use_case.execute(CancelBookingRequest(
        booking_id=booking_id,
        user_id=user_id,
        reason=body.reason,
    ))
    track_booking_event("cancelled")

    return jsonify({
        "status": "success",
        "booking": resolve(IBookingPresenter).present(booking)
    }), 200
