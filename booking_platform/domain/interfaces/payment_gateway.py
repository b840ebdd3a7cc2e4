"""Interface for external payment gateways (Adapter Pattern).

This allows switching between payment service providers
or faking them for testing/development.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ChargeResult:
    """Outcome of a charge request that reached the gateway."""

    success: bool
    reference: Optional[str] = None
    failure_reason: Optional[str] = None


class IPaymentGateway(ABC):
    """
    Interface for payment service providers following Adapter Pattern.

    A declined charge is a normal outcome and is reported through
    ChargeResult. Transport problems raise PaymentGatewayError.
    """

    @abstractmethod
    def charge(
        self,
        amount: float,
        currency: str,
        reference: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChargeResult:
        """
        Charge the customer.

        Args:
            amount: Amount in major currency units
            currency: ISO 4217 currency code
            reference: Idempotency reference (the payment id)
            metadata: Optional extra data forwarded to the provider

        Returns:
            ChargeResult describing acceptance or decline

        Raises:
            PaymentGatewayError: If the gateway is unreachable
        """
        pass

    @abstractmethod
    def refund(self, gateway_reference: str, amount: float) -> None:
        """
        Refund a previous charge.

        Args:
            gateway_reference: Reference returned by charge()
            amount: Amount to refund

        Raises:
            PaymentGatewayError: If the refund could not be performed
        """
        pass
