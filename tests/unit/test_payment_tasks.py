"""
Unit tests for the background payment task.

The task body is run in-process against the container wired with TestingConfig.
"""
from datetime import date, timedelta
from unittest.mock import MagicMock, patch

import pytest
from celery.exceptions import Retry

from booking_platform.application.use_cases import (
    CreateBookingRequest,
    CreateBookingUseCase,
    PayForBookingUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from booking_platform.config.settings import TestingConfig
from booking_platform.domain.entities import BookingStatus
from booking_platform.domain.exceptions import PaymentGatewayError
from booking_platform.domain.interfaces import IBookingRepository, IPaymentGateway, IPaymentRepository
from booking_platform.infrastructure.di.service_container import ServiceContainer
from booking_platform.tasks.payment_tasks import process_payment_task


@pytest.fixture
def container():
    return ServiceContainer().bootstrap(config=TestingConfig)


def book(container, total_price=360.0):
    user = container.resolve(RegisterUserUseCase).execute(
        RegisterUserRequest(name="Alice", email="alice@example.com")
    )
    start = date.today() + timedelta(days=30)
    booking = container.resolve(CreateBookingUseCase).execute(CreateBookingRequest(
        user_id=user.user_id,
        resource_id="room-101",
        start=start,
        end=start + timedelta(days=3),
        total_price=total_price,
    ))
    return booking


class TestProcessPaymentTask:

    def test_success(self, container):
        booking = book(container)

        result = process_payment_task.run(booking.booking_id, booking.user_id)

        assert result["status"] == "success"
        assert result["payment_id"].startswith("PY")
        stored = container.resolve(IBookingRepository).get(booking.booking_id)
        assert stored.status == BookingStatus.CONFIRMED

    def test_decline_is_final(self, container):
        booking = book(container, total_price=20000.0)

        result = process_payment_task.run(booking.booking_id, booking.user_id)

        assert result["status"] == "declined"
        assert result["booking_id"] == booking.booking_id

    def test_business_error_is_final(self, container):
        booking = book(container)
        process_payment_task.run(booking.booking_id, booking.user_id)

        result = process_payment_task.run(booking.booking_id, booking.user_id)

        assert result["status"] == "error"

    def test_unknown_booking(self, container):
        result = process_payment_task.run("BK_MISSING", "US_MISSING")

        assert result["status"] == "error"

    def test_gateway_error_is_retried(self, container):
        booking = book(container)
        broken = MagicMock(spec=IPaymentGateway)
        broken.charge.side_effect = PaymentGatewayError("timeout")
        use_case = container.resolve(PayForBookingUseCase)
        use_case.payment_gateway = broken

        with patch.object(process_payment_task, "retry", side_effect=Retry()) as retry:
            with pytest.raises(Retry):
                process_payment_task.run(booking.booking_id, booking.user_id)

        assert retry.call_args.kwargs["countdown"] == 30
        assert isinstance(retry.call_args.kwargs["exc"], PaymentGatewayError)
        stored = container.resolve(IBookingRepository).get(booking.booking_id)
        assert stored.status == BookingStatus.PENDING

    def test_retry_reuses_pending_payment(self, container):
        booking = book(container)
        use_case = container.resolve(PayForBookingUseCase)
        broken = MagicMock(spec=IPaymentGateway)
        broken.charge.side_effect = PaymentGatewayError("timeout")
        use_case.payment_gateway = broken

        with patch.object(process_payment_task, "retry", side_effect=Retry()):
            with pytest.raises(Retry):
                process_payment_task.run(booking.booking_id, booking.user_id)
        pending_id = broken.charge.call_args.kwargs["reference"]

        use_case.payment_gateway = container.resolve(IPaymentGateway)
        result = process_payment_task.run(booking.booking_id, booking.user_id)

        assert result == {
            "status": "success",
            "booking_id": booking.booking_id,
            "payment_id": pending_id,
        }
        payments = container.resolve(IPaymentRepository).list_by_booking(booking.booking_id)
        assert [p.payment_id for p in payments] == [pending_id]
