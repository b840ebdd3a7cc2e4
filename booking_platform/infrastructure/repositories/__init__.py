"""Repository implementations (Infrastructure Layer)."""
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

__all__ = [
    "InMemoryBookingRepository",
    "InMemoryPaymentRepository",
    "InMemoryUserRepository",
    "RedisBookingRepository",
    "RedisPaymentRepository",
    "RedisUserRepository",
]
