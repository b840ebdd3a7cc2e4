"""Interface for booking repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional

from booking_platform.domain.entities.booking import Booking


class IBookingRepository(ABC):
    """
    Interface for booking storage following Repository Pattern.

    Allows switching storage backends (in-memory, Redis, SQL, etc.)
    without changing business logic.
    """

    @abstractmethod
    def get(self, booking_id: str) -> Optional[Booking]:
        """
        Retrieve a booking by id.

        Args:
            booking_id: Booking identifier

        Returns:
            Booking if found, None otherwise
        """
        pass

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """
        Insert or update a booking.

        Args:
            booking: Booking to store
        """
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> List[Booking]:
        """
        List every booking made by a user.

        Args:
            user_id: User identifier

        Returns:
            Bookings in no particular order
        """
        pass

    @abstractmethod
    def list_by_resource(self, resource_id: str) -> List[Booking]:
        """
        List every booking of a resource (used for availability checks).

        Args:
            resource_id: Bookable resource identifier

        Returns:
            Bookings in no particular order
        """
        pass

    @abstractmethod
    def lock_resource(self, resource_id: str) -> ContextManager[None]:
        """
        Hold an exclusive lock on a resource for a check-then-save sequence.

        The availability check and the save of a new booking must run inside
        this block so two callers cannot both see the resource free.

        Args:
            resource_id: Bookable resource identifier

        Raises:
            BookingConflictError: If the lock cannot be acquired in time
        """
        pass
