"""Interface for payment repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional

from booking_platform.domain.entities.payment import Payment


class IPaymentRepository(ABC):
    """Interface for storing payment attempts."""

    @abstractmethod
    def get(self, payment_id: str) -> Optional[Payment]:
        """Retrieve a payment by id, None if missing."""
        pass

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Insert or update a payment."""
        pass

    @abstractmethod
    def list_by_booking(self, booking_id: str) -> List[Payment]:
        """
        List payment attempts for a booking.

        Args:
            booking_id: Booking identifier

        Returns:
            Payments ordered by creation time (oldest first)
        """
        pass
