"""In-memory repository implementations for development and testing."""
import copy
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional

from booking_platform.domain.entities.booking import Booking
from booking_platform.domain.entities.payment import Payment
from booking_platform.domain.entities.user import User
from booking_platform.domain.exceptions import DuplicateUserError
from booking_platform.domain.interfaces.booking_repository import IBookingRepository
from booking_platform.domain.interfaces.payment_repository import IPaymentRepository
from booking_platform.domain.interfaces.user_repository import IUserRepository


logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryBookingRepository(IBookingRepository):
    """
    Dictionary-backed booking storage.

    Entities are copied on the way in and out, so callers mutating a loaded
    booking never change stored state without calling save().
    """

    def __init__(self):
        self._bookings: Dict[str, Booking] = {}
        self._lock = threading.Lock()
        self._resource_locks: Dict[str, threading.Lock] = {}

    def get(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return copy.deepcopy(booking) if booking else None

    def save(self, booking: Booking) -> None:
        with self._lock:
            self._bookings[booking.booking_id] = copy.deepcopy(booking)
        logger.debug(f"Booking {booking.booking_id} stored in memory")

    def list_by_user(self, user_id: str) -> List[Booking]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._bookings.values() if b.user_id == user_id]

    def list_by_resource(self, resource_id: str) -> List[Booking]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._bookings.values() if b.resource_id == resource_id]

    @contextmanager
    def lock_resource(self, resource_id: str) -> Iterator[None]:
        with self._lock:
            resource_lock = self._resource_locks.setdefault(resource_id, threading.Lock())
        with resource_lock:
            yield


class InMemoryPaymentRepository(IPaymentRepository):
    """Dictionary-backed payment storage."""

    def __init__(self):
        self._payments: Dict[str, Payment] = {}
        self._lock = threading.Lock()

    def get(self, payment_id: str) -> Optional[Payment]:
        with self._lock:
            payment = self._payments.get(payment_id)
            return copy.deepcopy(payment) if payment else None

    def save(self, payment: Payment) -> None:
        with self._lock:
            self._payments[payment.payment_id] = copy.deepcopy(payment)

    def list_by_booking(self, booking_id: str) -> List[Payment]:
        with self._lock:
            payments = [copy.deepcopy(p) for p in self._payments.values() if p.booking_id == booking_id]
        return sorted(payments, key=lambda p: p.created_at or _EPOCH)


class InMemoryUserRepository(IUserRepository):
    """Dictionary-backed user storage with an email index."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._emails: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user else None

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._emails.get(email.strip().lower())
            user = self._users.get(user_id) if user_id else None
            return copy.deepcopy(user) if user else None

    def add(self, user: User) -> None:
        with self._lock:
            if user.email in self._emails:
                raise DuplicateUserError(f"Email '{user.email}' is already registered")
            self._users[user.user_id] = copy.deepcopy(user)
            self._emails[user.email] = user.user_id

    def save(self, user: User) -> None:
        with self._lock:
            previous = self._users.get(user.user_id)
            if previous and previous.email != user.email:
                self._emails.pop(previous.email, None)
            self._users[user.user_id] = copy.deepcopy(user)
            self._emails[user.email] = user.user_id
