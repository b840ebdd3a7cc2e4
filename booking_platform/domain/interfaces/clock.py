"""Interface for time source."""
from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Source of the current time, swappable in tests."""

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware UTC datetime."""
        pass

    def today(self) -> date:
        """Current UTC date."""
        return self.now().date()
