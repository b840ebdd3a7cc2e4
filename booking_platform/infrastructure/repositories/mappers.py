"""Mapping between domain entities and their storage records.

Entities never know how they are stored; repositories translate through
these functions so JSON documents stay flat and version-tolerant.
"""
from datetime import date, datetime
from typing import Any, Dict, Optional

from booking_platform.domain.entities.booking import Booking, BookingStatus, DateRange
from booking_platform.domain.entities.payment import Payment, PaymentStatus
from booking_platform.domain.entities.user import User


def _dt_to_str(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _str_to_dt(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def booking_to_record(booking: Booking) -> Dict[str, Any]:
    """Convert a Booking into a JSON-serialisable record."""
    return {
        "booking_id": booking.booking_id,
        "user_id": booking.user_id,
        "resource_id": booking.resource_id,
        "start": booking.period.start.isoformat(),
        "end": booking.period.end.isoformat(),
        "total_price": booking.total_price,
        "currency": booking.currency,
        "status": booking.status.value,
        "created_at": _dt_to_str(booking.created_at),
        "cancelled_at": _dt_to_str(booking.cancelled_at),
        "cancellation_reason": booking.cancellation_reason,
    }


def booking_from_record(record: Dict[str, Any]) -> Booking:
    """
    Rebuild a Booking from a stored record.

    Unknown keys are ignored so older readers survive newer writers.
    """
    return Booking(
        booking_id=record["booking_id"],
        user_id=record["user_id"],
        resource_id=record["resource_id"],
        period=DateRange(date.fromisoformat(record["start"]), date.fromisoformat(record["end"])),
        total_price=float(record["total_price"]),
        currency=record.get("currency", "USD"),
        status=BookingStatus(record.get("status", BookingStatus.PENDING.value)),
        created_at=_str_to_dt(record.get("created_at")),
        cancelled_at=_str_to_dt(record.get("cancelled_at")),
        cancellation_reason=record.get("cancellation_reason"),
    )


def payment_to_record(payment: Payment) -> Dict[str, Any]:
    """Convert a Payment into a JSON-serialisable record."""
    return {
        "payment_id": payment.payment_id,
        "booking_id": payment.booking_id,
        "user_id": payment.user_id,
        "amount": payment.amount,
        "currency": payment.currency,
        "status": payment.status.value,
        "gateway_reference": payment.gateway_reference,
        "failure_reason": payment.failure_reason,
        "created_at": _dt_to_str(payment.created_at),
    }


def payment_from_record(record: Dict[str, Any]) -> Payment:
    """Rebuild a Payment from a stored record."""
    return Payment(
        payment_id=record["payment_id"],
        booking_id=record["booking_id"],
        user_id=record["user_id"],
        amount=float(record["amount"]),
        currency=record.get("currency", "USD"),
        status=PaymentStatus(record.get("status", PaymentStatus.PENDING.value)),
        gateway_reference=record.get("gateway_reference"),
        failure_reason=record.get("failure_reason"),
        created_at=_str_to_dt(record.get("created_at")),
    )


def user_to_record(user: User) -> Dict[str, Any]:
    """Convert a User into a JSON-serialisable record."""
    return {
        "user_id": user.user_id,
        "name": user.name,
        "email": user.email,
        "created_at": _dt_to_str(user.created_at),
    }


def user_from_record(record: Dict[str, Any]) -> User:
    """Rebuild a User from a stored record."""
    return User(
        user_id=record["user_id"],
        name=record["name"],
        email=record["email"],
        created_at=_str_to_dt(record.get("created_at")),
    )
