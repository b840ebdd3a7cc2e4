"""
Unit tests for Redis repositories.

Uses a MagicMock Redis client; asserts on keys written and on entity
reconstruction from stored JSON documents.
"""
import json
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest
import redis

from booking_platform.domain.entities import Booking, BookingStatus, DateRange, Payment, User
from booking_platform.domain.exceptions import BookingConflictError, DuplicateUserError
from booking_platform.infrastructure.repositories.mappers import (
    booking_to_record,
    payment_to_record,
    user_to_record,
)
from booking_platform.infrastructure.repositories.redis_repositories import (
    RedisBookingRepository,
    RedisPaymentRepository,
    RedisUserRepository,
)


CREATED = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def redis_client():
    client = MagicMock(spec=redis.Redis)
    client.pipeline.return_value = MagicMock()
    return client


@pytest.fixture
def booking():
    return Booking(
        booking_id="BK0001",
        user_id="US0001",
        resource_id="room-101",
        period=DateRange(date(2026, 11, 2), date(2026, 11, 5)),
        total_price=360.0,
        status=BookingStatus.CONFIRMED,
        created_at=CREATED,
    )


class TestRedisBookingRepository:

    def test_requires_client(self):
        with pytest.raises(RuntimeError):
            RedisBookingRepository(None)

    def test_save_writes_document_and_indexes(self, redis_client, booking):
        RedisBookingRepository(redis_client).save(booking)

        pipe = redis_client.pipeline.return_value
        key, payload = pipe.set.call_args.args
        assert key == "booking:BK0001"
        assert json.loads(payload)["status"] == "confirmed"
        assert json.loads(payload)["start"] == "2026-11-02"
        pipe.sadd.assert_any_call("user_bookings:US0001", "BK0001")
        pipe.sadd.assert_any_call("resource_bookings:room-101", "BK0001")
        pipe.execute.assert_called_once()

    def test_get_rebuilds_entity(self, redis_client, booking):
        redis_client.get.return_value = json.dumps(booking_to_record(booking))

        loaded = RedisBookingRepository(redis_client).get("BK0001")

        redis_client.get.assert_called_once_with("booking:BK0001")
        assert loaded == booking

    def test_get_missing(self, redis_client):
        redis_client.get.return_value = None
        assert RedisBookingRepository(redis_client).get("BK9999") is None

    def test_list_by_resource_reads_index(self, redis_client, booking):
        redis_client.smembers.return_value = {"BK0001", "BK0002"}
        # BK0002 index entry without a document is skipped
        redis_client.mget.return_value = [json.dumps(booking_to_record(booking)), None]

        result = RedisBookingRepository(redis_client).list_by_resource("room-101")

        redis_client.smembers.assert_called_once_with("resource_bookings:room-101")
        redis_client.mget.assert_called_once_with(["booking:BK0001", "booking:BK0002"])
        assert [b.booking_id for b in result] == ["BK0001"]

    def test_list_empty_index_skips_mget(self, redis_client):
        redis_client.smembers.return_value = set()

        assert RedisBookingRepository(redis_client).list_by_user("US0001") == []
        redis_client.mget.assert_not_called()

    def test_redis_errors_propagate(self, redis_client, booking):
        redis_client.pipeline.return_value.execute.side_effect = redis.ConnectionError("down")

        with pytest.raises(redis.ConnectionError):
            RedisBookingRepository(redis_client).save(booking)

    def test_lock_resource_holds_redis_lock(self, redis_client):
        lock = redis_client.lock.return_value
        lock.acquire.return_value = True

        with RedisBookingRepository(redis_client).lock_resource("room-101"):
            lock.release.assert_not_called()

        redis_client.lock.assert_called_once_with(
            "resource_lock:room-101", timeout=10, blocking_timeout=5
        )
        lock.release.assert_called_once()

    def test_lock_resource_busy(self, redis_client):
        redis_client.lock.return_value.acquire.return_value = False

        with pytest.raises(BookingConflictError):
            with RedisBookingRepository(redis_client).lock_resource("room-101"):
                pytest.fail("entered without the lock")

    def test_unknown_fields_are_ignored(self, redis_client, booking):
        record = booking_to_record(booking)
        record["loyalty_tier"] = "gold"
        redis_client.get.return_value = json.dumps(record)

        assert RedisBookingRepository(redis_client).get("BK0001").booking_id == "BK0001"


class TestRedisPaymentRepository:

    def test_list_by_booking_is_sorted_by_creation(self, redis_client):
        older = Payment("PY0001", "BK0001", "US0001", 360.0, created_at=CREATED)
        newer = Payment("PY0002", "BK0001", "US0001", 360.0,
                        created_at=CREATED.replace(hour=10))
        redis_client.smembers.return_value = {"PY0001", "PY0002"}
        redis_client.mget.return_value = [
            json.dumps(payment_to_record(newer)),
            json.dumps(payment_to_record(older)),
        ]

        result = RedisPaymentRepository(redis_client).list_by_booking("BK0001")

        assert [p.payment_id for p in result] == ["PY0001", "PY0002"]

    def test_save_indexes_by_booking(self, redis_client):
        payment = Payment("PY0001", "BK0001", "US0001", 360.0)

        RedisPaymentRepository(redis_client).save(payment)

        redis_client.pipeline.return_value.sadd.assert_called_once_with("booking_payments:BK0001", "PY0001")


class TestRedisUserRepository:

    def test_save_writes_email_index(self, redis_client):
        user = User("US0001", "Alice", "alice@example.com", created_at=CREATED)

        RedisUserRepository(redis_client).save(user)

        pipe = redis_client.pipeline.return_value
        pipe.set.assert_any_call("user_email:alice@example.com", "US0001")

    def test_add_claims_email_with_set_nx(self, redis_client):
        user = User("US0001", "Alice", "alice@example.com", created_at=CREATED)
        redis_client.set.return_value = True

        RedisUserRepository(redis_client).add(user)

        redis_client.set.assert_any_call("user_email:alice@example.com", "US0001", nx=True)
        key, payload = redis_client.set.call_args.args
        assert key == "user:US0001"
        assert json.loads(payload)["email"] == "alice@example.com"

    def test_add_taken_email(self, redis_client):
        user = User("US0002", "Alice", "alice@example.com", created_at=CREATED)
        redis_client.set.return_value = None

        with pytest.raises(DuplicateUserError):
            RedisUserRepository(redis_client).add(user)

        redis_client.set.assert_called_once()

    def test_add_releases_email_when_document_write_fails(self, redis_client):
        user = User("US0001", "Alice", "alice@example.com", created_at=CREATED)
        redis_client.set.side_effect = [True, redis.ConnectionError("down")]

        with pytest.raises(redis.ConnectionError):
            RedisUserRepository(redis_client).add(user)

        redis_client.delete.assert_called_once_with("user_email:alice@example.com")

    def test_get_by_email_is_case_insensitive(self, redis_client):
        user = User("US0001", "Alice", "alice@example.com", created_at=CREATED)
        documents = {
            "user_email:alice@example.com": "US0001",
            "user:US0001": json.dumps(user_to_record(user)),
        }
        redis_client.get.side_effect = documents.get

        loaded = RedisUserRepository(redis_client).get_by_email(" ALICE@example.com")

        assert loaded == user

    def test_get_by_unknown_email(self, redis_client):
        redis_client.get.return_value = None
        assert RedisUserRepository(redis_client).get_by_email("nobody@example.com") is None
