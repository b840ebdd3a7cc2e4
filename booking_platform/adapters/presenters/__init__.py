"""Presenters implementing the domain presenter ports."""
from booking_platform.adapters.presenters.booking_presenter import BookingPresenter
from booking_platform.adapters.presenters.payment_presenter import PaymentPresenter
from booking_platform.adapters.presenters.user_presenter import UserPresenter

__all__ = ["BookingPresenter", "PaymentPresenter", "UserPresenter"]
