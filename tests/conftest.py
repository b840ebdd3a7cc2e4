"""Shared fixtures."""
from datetime import date

import pytest

from booking_platform.application.use_cases import (
    CancelBookingUseCase,
    CreateBookingRequest,
    CreateBookingUseCase,
    PayForBookingUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from booking_platform.config.settings import TestingConfig
from booking_platform.infrastructure.clients.fake_payment_gateway import FakePaymentGateway
from booking_platform.infrastructure.di.service_container import ServiceContainer
from booking_platform.infrastructure.repositories.in_memory import (
    InMemoryBookingRepository,
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)
from tests.doubles import FrozenClock, SequentialIdGenerator


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def ids():
    return SequentialIdGenerator()


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def bookings():
    return InMemoryBookingRepository()


@pytest.fixture
def payments():
    return InMemoryPaymentRepository()


@pytest.fixture
def gateway():
    return FakePaymentGateway(decline_above=1000.0)


@pytest.fixture
def register_user(users, clock, ids):
    return RegisterUserUseCase(user_repository=users, clock=clock, id_generator=ids)


@pytest.fixture
def create_booking(bookings, users, clock, ids):
    return CreateBookingUseCase(
        booking_repository=bookings,
        user_repository=users,
        clock=clock,
        id_generator=ids,
    )


@pytest.fixture
def pay_for_booking(bookings, payments, gateway, clock, ids):
    return PayForBookingUseCase(
        booking_repository=bookings,
        payment_repository=payments,
        payment_gateway=gateway,
        clock=clock,
        id_generator=ids,
    )


@pytest.fixture
def cancel_booking(bookings, payments, gateway, clock):
    return CancelBookingUseCase(
        booking_repository=bookings,
        payment_repository=payments,
        payment_gateway=gateway,
        clock=clock,
    )


@pytest.fixture
def alice(register_user):
    return register_user.execute(RegisterUserRequest(name="Alice", email="alice@example.com"))


@pytest.fixture
def pending_booking(create_booking, alice):
    return create_booking.execute(CreateBookingRequest(
        user_id=alice.user_id,
        resource_id="room-101",
        start=date(2026, 11, 2),
        end=date(2026, 11, 5),
        total_price=360.0,
    ))


@pytest.fixture(autouse=True)
def reset_container():
    """Every test starts with a fresh process-wide container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture
def app():
    from booking_platform import create_app

    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
