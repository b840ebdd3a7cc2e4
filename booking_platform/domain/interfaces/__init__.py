"""Domain interfaces following Dependency Inversion Principle."""

from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.user_repository import IUserRepository
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway, ChargeResult
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.presenter import (
    IBookingPresenter,
    IPaymentPresenter,
    IUserPresenter,
)

__all__ = [
    "IBookingRepository",
    "IPaymentRepository",
    "IUserRepository",
    "IPaymentGateway",
    "ChargeResult",
    "IClock",
    "IIdGenerator",
    "IBookingPresenter",
    "IPaymentPresenter",
    "IUserPresenter",
]
