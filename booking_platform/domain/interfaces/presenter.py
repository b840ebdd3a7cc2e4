"""Presenter interfaces (output ports of the use cases)."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from booking_platform.domain.entities.booking import Booking
from booking_platform.domain.entities.payment import Payment
from booking_platform.domain.entities.user import User


class IBookingPresenter(ABC):
    """Turns bookings into a delivery-friendly view model."""

    @abstractmethod
    def present(self, booking: Booking) -> Dict[str, Any]:
        pass

    def present_many(self, bookings: Iterable[Booking]) -> List[Dict[str, Any]]:
        return [self.present(booking) for booking in bookings]


class IPaymentPresenter(ABC):
    """Turns payments into a delivery-friendly view model."""

    @abstractmethod
    def present(self, payment: Payment) -> Dict[str, Any]:
        pass

    def present_many(self, payments: Iterable[Payment]) -> List[Dict[str, Any]]:
        return [self.present(payment) for payment in payments]


class IUserPresenter(ABC):
    """Turns users into a delivery-friendly view model."""

    @abstractmethod
    def present(self, user: User) -> Dict[str, Any]:
        pass
