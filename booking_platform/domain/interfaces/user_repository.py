"""Interface for user repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from booking_platform.domain.entities.user import User


class IUserRepository(ABC):
    """Interface for storing registered users."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        """Retrieve a user by id, None if missing."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by (case-insensitive) email, None if missing."""
        pass

    @abstractmethod
    def add(self, user: User) -> None:
        """
        Insert a new user, atomically claiming its email.

        Raises:
            DuplicateUserError: If the email already belongs to a user
        """
        pass

    @abstractmethod
    def save(self, user: User) -> None:
        """Insert or update a user."""
        pass
