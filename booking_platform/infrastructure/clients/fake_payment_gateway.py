"""Fake implementation of payment gateway for development/testing."""
import logging
import uuid
from typing import Any, Dict, List, Optional

from booking_platform.domain.exceptions import PaymentGatewayError
from booking_platform.domain.interfaces.payment_gateway import ChargeResult, IPaymentGateway


logger = logging.getLogger(__name__)


class FakePaymentGateway(IPaymentGateway):
    """
    In-memory payment gateway.

    Accepts every charge unless the amount is above decline_above. Keeps a
    record of charges and refunds so tests can assert on them.

    Charges are idempotent per reference, like a real provider honouring
    the Idempotency-Key header.
    """

    def __init__(self, decline_above: Optional[float] = None):
        """
        Initialize fake gateway.

        Args:
            decline_above: Decline charges strictly above this amount
        """
        self.decline_above = decline_above
        self.charges: Dict[str, Dict[str, Any]] = {}
        self.refunds: List[str] = []

    def charge(
        self,
        amount: float,
        currency: str,
        reference: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChargeResult:
        if self.decline_above is not None and amount > self.decline_above:
            logger.info(f"Fake: declining charge {reference} of {amount} {currency}")
            return ChargeResult(success=False, failure_reason="amount_limit_exceeded")

        for charge_id, charge in self.charges.items():
            if charge["reference"] == reference:
                logger.info(f"Fake: replaying charge {charge_id} for {reference}")
                return ChargeResult(success=True, reference=charge_id)

        charge_id = f"ch_{uuid.uuid4().hex[:16]}"
        self.charges[charge_id] = {
            "amount": amount,
            "currency": currency,
            "reference": reference,
            "metadata": metadata or {},
        }
        logger.info(f"Fake: charged {amount} {currency} for {reference} as {charge_id}")
        return ChargeResult(success=True, reference=charge_id)

    def refund(self, gateway_reference: str, amount: float) -> None:
        if gateway_reference not in self.charges:
            raise PaymentGatewayError(f"Unknown charge: {gateway_reference}")
        if gateway_reference in self.refunds:
            raise PaymentGatewayError(f"Charge already refunded: {gateway_reference}")
        self.refunds.append(gateway_reference)
        logger.info(f"Fake: refunded {amount} for {gateway_reference}")
