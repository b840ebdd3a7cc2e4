"""Use cases - application-specific business rules."""
from booking_platform.application.use_cases.create_booking_use_case import (
    CreateBookingRequest,
    CreateBookingUseCase,
)
from booking_platform.application.use_cases.get_booking_use_case import (
    GetBookingUseCase,
    ListUserBookingsUseCase,
)
from booking_platform.application.use_cases.cancel_booking_use_case import (
    CancelBookingRequest,
    CancelBookingUseCase,
)
from booking_platform.application.use_cases.pay_for_booking_use_case import (
    ListBookingPaymentsUseCase,
    PayForBookingRequest,
    PayForBookingUseCase,
)
from booking_platform.application.use_cases.register_user_use_case import (
    GetUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)

__all__ = [
    "CreateBookingRequest",
    "CreateBookingUseCase",
    "GetBookingUseCase",
    "ListUserBookingsUseCase",
    "CancelBookingRequest",
    "CancelBookingUseCase",
    "PayForBookingRequest",
    "PayForBookingUseCase",
    "ListBookingPaymentsUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "GetUserUseCase",
]
