"""Interface for identifier generation."""
from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """Generates unique entity identifiers."""

    @abstractmethod
    def new_id(self, prefix: str) -> str:
        """
        Generate a new identifier.

        Args:
            prefix: Short entity prefix (e.g., "BK" for bookings)

        Returns:
            Unique identifier starting with the prefix
        """
        pass
