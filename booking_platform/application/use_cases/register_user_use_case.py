"""Use cases for the user module."""
import logging
from dataclasses import dataclass

from booking_platform.domain.entities.user import User
from booking_platform.domain.exceptions import NotFoundError
from booking_platform.domain.interfaces.clock import IClock
from booking_platform.domain.interfaces.id_generator import IIdGenerator
from booking_platform.domain.interfaces.user_repository import IUserRepository


logger = logging.getLogger(__name__)


@dataclass
class RegisterUserRequest:
    """Input for RegisterUserUseCase."""
    name: str
    email: str


class RegisterUserUseCase:
    """Register a new user with a unique email address."""

    def __init__(
        self,
        user_repository: IUserRepository,
        clock: IClock,
        id_generator: IIdGenerator
    ):
        self.user_repository = user_repository
        self.clock = clock
        self.id_generator = id_generator

    def execute(self, request: RegisterUserRequest) -> User:
        """
        Create and store the user.

        Raises:
            ValidationError: If name or email is invalid
            DuplicateUserError: If the email is already registered
        """
        user = User(
            user_id=self.id_generator.new_id("US"),
            name=request.name,
            email=request.email,
            created_at=self.clock.now(),
        )

        # add() claims the email atomically and raises DuplicateUserError
        self.user_repository.add(user)
        logger.info(f"User {user.user_id} registered")
        return user


class GetUserUseCase:
    """Fetch a user by id."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    def execute(self, user_id: str) -> User:
        user = self.user_repository.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
