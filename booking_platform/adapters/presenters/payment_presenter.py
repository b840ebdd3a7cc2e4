"""Payment presenter (view model builder)."""
from typing import Any, Dict

from booking_platform.domain.entities.payment import Payment
from booking_platform.domain.interfaces.presenter import IPaymentPresenter


class PaymentPresenter(IPaymentPresenter):
    """Presents payments; the gateway reference is not exposed."""

    def present(self, payment: Payment) -> Dict[str, Any]:
        return {
            "payment_id": payment.payment_id,
            "booking_id": payment.booking_id,
            "amount": round(payment.amount, 2),
            "currency": payment.currency,
            "status": payment.status.value,
            "failure_reason": payment.failure_reason,
            "created_at": payment.created_at.isoformat() if payment.created_at else None,
        }
