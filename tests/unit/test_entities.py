"""
Unit tests for domain entities (Booking, DateRange, Payment, User).
"""
from datetime import date, datetime, timezone

import pytest

from booking_platform.domain.entities import (
    Booking,
    BookingStatus,
    DateRange,
    Payment,
    PaymentStatus,
    User,
)
from booking_platform.domain.exceptions import InvalidStatusTransitionError, ValidationError


def make_booking(**overrides) -> Booking:
    values = dict(
        booking_id="BK0001",
        user_id="US0001",
        resource_id="room-101",
        period=DateRange(date(2026, 11, 2), date(2026, 11, 5)),
        total_price=360.0,
    )
    values.update(overrides)
    return Booking(**values)


class TestDateRange:

    def test_nights(self):
        assert DateRange(date(2026, 11, 2), date(2026, 11, 5)).nights == 3

    @pytest.mark.parametrize("start,end", [
        (date(2026, 11, 5), date(2026, 11, 2)),
        (date(2026, 11, 2), date(2026, 11, 2)),
    ])
    def test_start_must_precede_end(self, start, end):
        with pytest.raises(ValidationError):
            DateRange(start, end)

    def test_rejects_non_dates(self):
        with pytest.raises(ValidationError):
            DateRange("2026-11-02", "2026-11-05")

    @pytest.mark.parametrize("other,expected", [
        (DateRange(date(2026, 11, 4), date(2026, 11, 8)), True),   # tail overlap
        (DateRange(date(2026, 10, 30), date(2026, 11, 3)), True),  # head overlap
        (DateRange(date(2026, 11, 3), date(2026, 11, 4)), True),   # inside
        (DateRange(date(2026, 11, 1), date(2026, 11, 9)), True),   # around
        (DateRange(date(2026, 11, 5), date(2026, 11, 7)), False),  # check-in on check-out day
        (DateRange(date(2026, 10, 30), date(2026, 11, 2)), False), # check-out on check-in day
    ])
    def test_overlaps(self, other, expected):
        stay = DateRange(date(2026, 11, 2), date(2026, 11, 5))
        assert stay.overlaps(other) is expected
        assert other.overlaps(stay) is expected

    def test_contains_is_half_open(self):
        stay = DateRange(date(2026, 11, 2), date(2026, 11, 5))
        assert stay.contains(date(2026, 11, 2))
        assert stay.contains(date(2026, 11, 4))
        assert not stay.contains(date(2026, 11, 5))


class TestBooking:

    def test_defaults(self):
        booking = make_booking()
        assert booking.status == BookingStatus.PENDING
        assert booking.currency == "USD"
        assert booking.is_active

    def test_currency_is_upper_cased(self):
        assert make_booking(currency="eur").currency == "EUR"

    @pytest.mark.parametrize("overrides", [
        {"booking_id": ""},
        {"user_id": ""},
        {"resource_id": ""},
        {"total_price": -1},
        {"total_price": float("inf")},
        {"total_price": float("nan")},
        {"total_price": "360"},
        {"currency": "EURO"},
        {"currency": "12$"},
        {"status": "lost"},
    ])
    def test_validation(self, overrides):
        with pytest.raises(ValidationError):
            make_booking(**overrides)

    def test_status_accepts_plain_string(self):
        assert make_booking(status="confirmed").status == BookingStatus.CONFIRMED

    def test_confirm_then_complete(self):
        booking = make_booking()
        booking.confirm()
        assert booking.status == BookingStatus.CONFIRMED
        booking.complete()
        assert booking.status == BookingStatus.COMPLETED
        assert not booking.is_active

    def test_cancel_records_reason_and_time(self):
        booking = make_booking()
        at = datetime(2026, 10, 20, tzinfo=timezone.utc)

        booking.cancel(reason="plans changed", at=at)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancelled_at == at
        assert booking.cancellation_reason == "plans changed"

    @pytest.mark.parametrize("status,action", [
        (BookingStatus.PENDING, "complete"),
        (BookingStatus.CONFIRMED, "confirm"),
        (BookingStatus.CANCELLED, "confirm"),
        (BookingStatus.CANCELLED, "cancel"),
        (BookingStatus.COMPLETED, "cancel"),
    ])
    def test_illegal_transitions(self, status, action):
        booking = make_booking(status=status)

        with pytest.raises(InvalidStatusTransitionError):
            getattr(booking, action)()

        assert booking.status == status

    def test_conflicts_with_overlapping_active_booking(self):
        booking = make_booking()
        other = make_booking(booking_id="BK0002", period=DateRange(date(2026, 11, 4), date(2026, 11, 6)))
        assert booking.conflicts_with(other)

    def test_no_conflict_with_other_resource_or_inactive(self):
        booking = make_booking()
        elsewhere = make_booking(booking_id="BK0002", resource_id="room-202")
        cancelled = make_booking(booking_id="BK0003", status=BookingStatus.CANCELLED)

        assert not booking.conflicts_with(elsewhere)
        assert not booking.conflicts_with(cancelled)
        assert not booking.conflicts_with(booking)


class TestPayment:

    def make(self, **overrides) -> Payment:
        values = dict(payment_id="PY0001", booking_id="BK0001", user_id="US0001", amount=360.0)
        values.update(overrides)
        return Payment(**values)

    def test_succeed_then_refund(self):
        payment = self.make()
        payment.mark_succeeded("ch_1")
        assert payment.status == PaymentStatus.SUCCEEDED
        assert payment.gateway_reference == "ch_1"

        payment.refund()
        assert payment.status == PaymentStatus.REFUNDED

    def test_failed_payment_cannot_be_refunded(self):
        payment = self.make()
        payment.mark_failed("insufficient_funds")

        assert payment.failure_reason == "insufficient_funds"
        with pytest.raises(InvalidStatusTransitionError):
            payment.refund()

    def test_cannot_succeed_twice(self):
        payment = self.make()
        payment.mark_succeeded("ch_1")
        with pytest.raises(InvalidStatusTransitionError):
            payment.mark_succeeded("ch_2")

    def test_negative_amount(self):
        with pytest.raises(ValidationError):
            self.make(amount=-5)

    @pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_amount(self, amount):
        with pytest.raises(ValidationError):
            self.make(amount=amount)


class TestUser:

    def test_email_is_normalised(self):
        user = User(user_id="US0001", name="  Alice ", email=" Alice@Example.COM ")
        assert user.email == "alice@example.com"
        assert user.name == "Alice"

    @pytest.mark.parametrize("email", ["", "alice", "@example.com", "alice@", "a@b@c"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError):
            User(user_id="US0001", name="Alice", email=email)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            User(user_id="US0001", name="   ", email="alice@example.com")
