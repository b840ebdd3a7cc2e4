"""Payment domain entities."""
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from booking_platform.domain.exceptions import (
    InvalidStatusTransitionError,
    ValidationError,
)


class PaymentStatus(str, Enum):
    """Lifecycle states of a payment."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"


@dataclass
class Payment:
    """Domain entity representing one charge attempt for a booking."""

    payment_id: str
    booking_id: str
    user_id: str
    amount: float
    currency: str = "USD"
    status: PaymentStatus = PaymentStatus.PENDING
    gateway_reference: Optional[str] = None
    failure_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate payment entity."""
        if not self.payment_id:
            raise ValidationError("payment_id is required")
        if not self.booking_id:
            raise ValidationError("booking_id is required")
        if not self.user_id:
            raise ValidationError("user_id is required")
        if not isinstance(self.amount, (int, float)) or not math.isfinite(self.amount):
            raise ValidationError(f"amount must be a finite number, got {self.amount!r}")
        if self.amount < 0:
            raise ValidationError("amount must be non-negative")
        try:
            self.status = PaymentStatus(self.status)
        except ValueError:
            raise ValidationError(f"Invalid status: {self.status}")

    def mark_succeeded(self, gateway_reference: str) -> None:
        """Record a successful charge."""
        self._require(PaymentStatus.PENDING, PaymentStatus.SUCCEEDED)
        self.status = PaymentStatus.SUCCEEDED
        self.gateway_reference = gateway_reference

    def mark_failed(self, reason: str) -> None:
        """Record a declined or failed charge."""
        self._require(PaymentStatus.PENDING, PaymentStatus.FAILED)
        self.status = PaymentStatus.FAILED
        self.failure_reason = reason

    def refund(self) -> None:
        """Record that a successful charge was refunded."""
        self._require(PaymentStatus.SUCCEEDED, PaymentStatus.REFUNDED)
        self.status = PaymentStatus.REFUNDED

    def _require(self, expected: PaymentStatus, target: PaymentStatus) -> None:
        if self.status != expected:
            raise InvalidStatusTransitionError("Payment", self.status.value, target.value)
