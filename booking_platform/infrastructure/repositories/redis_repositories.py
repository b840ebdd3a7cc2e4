"""Redis-based repository implementations.

Entities are stored as JSON documents under "<kind>:<id>". Secondary
lookups use Redis sets (or a plain key for the unique email index).
"""
import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

import redis
from redis.exceptions import LockError

from booking_platform.domain.entities.booking import Booking
from booking_platform.domain.entities.payment import Payment
from booking_platform.domain.entities.user import User
from booking_platform.domain.exceptions import BookingConflictError, DuplicateUserError
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.user_repository import IUserRepository
from booking_platform.infrastructure.repositories.mappers import (
    booking_from_record,
    booking_to_record,
    payment_from_record,
    payment_to_record,
    user_from_record,
    user_to_record,
)


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

# Seconds a resource lock lives before Redis expires it, and how long to wait for it
RESOURCE_LOCK_TIMEOUT = 10
RESOURCE_LOCK_WAIT = 5


class RedisDocumentStore:
    """
    Shared JSON document helpers for Redis repositories.

    Follows Repository Pattern and Single Responsibility Principle: this class
    only knows keys and serialisation, subclasses know the entity.
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str):
        """
        Initialize the store.

        Args:
            redis_client: Redis client instance (Dependency Injection)
            key_prefix: Namespace for document keys (e.g., "booking")
        """
        if redis_client is None:
            raise RuntimeError("Redis not available - cannot create repository")
        self.redis = redis_client
        self._key_prefix = key_prefix
        self._logger = logging.getLogger(__name__)

    def _key(self, identifier: str) -> str:
        return f"{self._key_prefix}:{identifier}"

    def _load(self, identifier: str) -> Optional[Dict[str, Any]]:
        data = self.redis.get(self._key(identifier))
        if data is None:
            return None
        return json.loads(data)

    def _load_many(self, identifiers: Iterable[str]) -> List[Dict[str, Any]]:
        keys = [self._key(identifier) for identifier in sorted(identifiers)]
        if not keys:
            return []
        return [json.loads(data) for data in self.redis.mget(keys) if data is not None]

    def _store(self, identifier: str, record: Dict[str, Any], indexes: Dict[str, str]) -> None:
        """Write the document and add it to set indexes in one transaction."""
        try:
            pipe = self.redis.pipeline()
            pipe.set(self._key(identifier), json.dumps(record))
            for index_key in indexes.values():
                pipe.sadd(index_key, identifier)
            pipe.execute()
            self._logger.debug(f"{self._key_prefix} {identifier} stored")
        except redis.RedisError as e:
            self._logger.error(f"Failed to store {self._key_prefix} {identifier}: {e}")
            raise

    def _fetch(self, identifier: str, mapper: Callable[[Dict[str, Any]], Any]) -> Optional[Any]:
        try:
            record = self._load(identifier)
        except redis.RedisError as e:
            self._logger.error(f"Failed to get {self._key_prefix} {identifier}: {e}")
            raise
        return mapper(record) if record else None

    def _fetch_indexed(self, index_key: str, mapper: Callable[[Dict[str, Any]], Any]) -> List[Any]:
        try:
            identifiers = self.redis.smembers(index_key)
            return [mapper(record) for record in self._load_many(identifiers)]
        except redis.RedisError as e:
            self._logger.error(f"Failed to read index {index_key}: {e}")
            raise


class RedisBookingRepository(RedisDocumentStore, IBookingRepository):
    """Booking storage with per-user and per-resource set indexes."""

    def __init__(self, redis_client: redis.Redis):
        super().__init__(redis_client, key_prefix="booking")

    def get(self, booking_id: str) -> Optional[Booking]:
        return self._fetch(booking_id, booking_from_record)

    def save(self, booking: Booking) -> None:
        self._store(
            booking.booking_id,
            booking_to_record(booking),
            indexes={
                "user": f"user_bookings:{booking.user_id}",
                "resource": f"resource_bookings:{booking.resource_id}",
            },
        )

    def list_by_user(self, user_id: str) -> List[Booking]:
        return self._fetch_indexed(f"user_bookings:{user_id}", booking_from_record)

    def list_by_resource(self, resource_id: str) -> List[Booking]:
        return self._fetch_indexed(f"resource_bookings:{resource_id}", booking_from_record)

    @contextmanager
    def lock_resource(self, resource_id: str) -> Iterator[None]:
        lock = self.redis.lock(
            f"resource_lock:{resource_id}",
            timeout=RESOURCE_LOCK_TIMEOUT,
            blocking_timeout=RESOURCE_LOCK_WAIT,
        )
        try:
            acquired = lock.acquire()
        except LockError as e:
            raise BookingConflictError(f"Resource '{resource_id}' is busy, try again") from e
        if not acquired:
            raise BookingConflictError(f"Resource '{resource_id}' is busy, try again")
        try:
            yield
        finally:
            try:
                lock.release()
            except LockError:
                self._logger.warning(f"Resource lock {resource_id} expired before release")


class RedisPaymentRepository(RedisDocumentStore, IPaymentRepository):
    """Payment storage indexed by booking."""

    def __init__(self, redis_client: redis.Redis):
        super().__init__(redis_client, key_prefix="payment")

    def get(self, payment_id: str) -> Optional[Payment]:
        return self._fetch(payment_id, payment_from_record)

    def save(self, payment: Payment) -> None:
        self._store(
            payment.payment_id,
            payment_to_record(payment),
            indexes={"booking": f"booking_payments:{payment.booking_id}"},
        )

    def list_by_booking(self, booking_id: str) -> List[Payment]:
        payments = self._fetch_indexed(f"booking_payments:{booking_id}", payment_from_record)
        return sorted(payments, key=lambda p: p.created_at or _EPOCH)


class RedisUserRepository(RedisDocumentStore, IUserRepository):
    """User storage with a unique email lookup key."""

    def __init__(self, redis_client: redis.Redis):
        super().__init__(redis_client, key_prefix="user")

    @staticmethod
    def _email_key(email: str) -> str:
        return f"user_email:{email.strip().lower()}"

    def get(self, user_id: str) -> Optional[User]:
        return self._fetch(user_id, user_from_record)

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            user_id = self.redis.get(self._email_key(email))
        except redis.RedisError as e:
            self._logger.error(f"Failed to look up user by email: {e}")
            raise
        return self.get(user_id) if user_id else None

    def add(self, user: User) -> None:
        email_key = self._email_key(user.email)
        try:
            claimed = self.redis.set(email_key, user.user_id, nx=True)
        except redis.RedisError as e:
            self._logger.error(f"Failed to claim email for user {user.user_id}: {e}")
            raise
        if not claimed:
            raise DuplicateUserError(f"Email '{user.email}' is already registered")

        try:
            self.redis.set(self._key(user.user_id), json.dumps(user_to_record(user)))
        except redis.RedisError as e:
            self._logger.error(f"Failed to store user {user.user_id}: {e}")
            self.redis.delete(email_key)
            raise

    def save(self, user: User) -> None:
        try:
            pipe = self.redis.pipeline()
            pipe.set(self._key(user.user_id), json.dumps(user_to_record(user)))
            pipe.set(self._email_key(user.email), user.user_id)
            pipe.execute()
        except redis.RedisError as e:
            self._logger.error(f"Failed to store user {user.user_id}: {e}")
            raise
