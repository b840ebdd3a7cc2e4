"""Factory for creating boundary implementations (Factory Pattern)."""
import logging
from typing import Optional

import redis

from booking_platform.config.settings import Config
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.payment_gateway import IPaymentGateway
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.user_repository import IUserRepository
from booking_platform.infrastructure.clients.fake_payment_gateway import FakePaymentGateway
from booking_platform.infrastructure.clients.http_payment_gateway import HttpPaymentGateway
from booking_platform.infrastructure.repositories.in_memory import (
    InMemoryBookingRepository,
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)
from booking_platform.infrastructure.repositories.redis_repositories import (
    RedisBookingRepository,
    RedisPaymentRepository,
    RedisUserRepository,
)


logger = logging.getLogger(__name__)


class AdapterFactory:
    """
    Factory for creating repository and gateway instances following Factory Pattern.

    Centralizes creation logic and allows switching implementations by configuration.
    Unknown types raise ValueError: there is no silent default.
    """

    @staticmethod
    def _require_redis(redis_client: Optional[redis.Redis], what: str) -> redis.Redis:
        if redis_client is None:
            raise RuntimeError(f"Redis storage configured for {what} but Redis is unavailable")
        return redis_client

    @staticmethod
    def create_booking_repository(
        storage_type: str = "memory",
        redis_client: Optional[redis.Redis] = None
    ) -> IBookingRepository:
        """
        Create a booking repository instance.

        Args:
            storage_type: Type of storage ("memory", "redis")
            redis_client: Redis client, required for "redis"

        Returns:
            IBookingRepository instance

        Raises:
            ValueError: If storage type is not supported
            RuntimeError: If Redis is required but unavailable
        """
        storage_type = storage_type.lower()

        if storage_type == "memory":
            return InMemoryBookingRepository()
        elif storage_type == "redis":
            return RedisBookingRepository(AdapterFactory._require_redis(redis_client, "bookings"))
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")

    @staticmethod
    def create_payment_repository(
        storage_type: str = "memory",
        redis_client: Optional[redis.Redis] = None
    ) -> IPaymentRepository:
        """Create a payment repository instance (see create_booking_repository)."""
        storage_type = storage_type.lower()

        if storage_type == "memory":
            return InMemoryPaymentRepository()
        elif storage_type == "redis":
            return RedisPaymentRepository(AdapterFactory._require_redis(redis_client, "payments"))
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")

    @staticmethod
    def create_user_repository(
        storage_type: str = "memory",
        redis_client: Optional[redis.Redis] = None
    ) -> IUserRepository:
        """Create a user repository instance (see create_booking_repository)."""
        storage_type = storage_type.lower()

        if storage_type == "memory":
            return InMemoryUserRepository()
        elif storage_type == "redis":
            return RedisUserRepository(AdapterFactory._require_redis(redis_client, "users"))
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")

    @staticmethod
    def create_payment_gateway(gateway_type: str = "fake", config: type[Config] = Config) -> IPaymentGateway:
        """
        Create a payment gateway instance.

        Args:
            gateway_type: Type of gateway ("fake", "http")
            config: Configuration class holding gateway settings

        Returns:
            IPaymentGateway instance

        Raises:
            ValueError: If gateway type is not supported or misconfigured
        """
        gateway_type = gateway_type.lower()

        if gateway_type == "fake":
            return FakePaymentGateway(decline_above=config.FAKE_GATEWAY_DECLINE_ABOVE)
        elif gateway_type == "http":
            return HttpPaymentGateway(
                base_url=config.PAYMENT_GATEWAY_URL,
                api_key=config.PAYMENT_GATEWAY_API_KEY,
                timeout=config.PAYMENT_GATEWAY_TIMEOUT,
            )
        else:
            raise ValueError(f"Unsupported payment gateway type: {gateway_type}")
