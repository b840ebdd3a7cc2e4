"""HTTP payment gateway client for making authenticated charge requests."""
import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from booking_platform.domain.exceptions import PaymentGatewayError
from booking_platform.domain.interfaces.payment_gateway import ChargeResult, IPaymentGateway


logger = logging.getLogger(__name__)


class HttpPaymentGateway(IPaymentGateway):
    """
    Client for a REST payment service provider.

    Charges are sent with an Idempotency-Key header equal to the payment id,
    which makes retrying POST requests safe.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the gateway client.

        Args:
            base_url: Base URL of the payment API
            api_key: Bearer token for authentication
            timeout: Request timeout in seconds
            session: Optional preconfigured session (for testing)
        """
        if not base_url:
            raise ValueError("base_url is required")
        if not api_key:
            raise ValueError("api_key is required")

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=3,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=frozenset({"GET", "POST"}),
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def _post(self, endpoint: str, payload: Dict[str, Any], idempotency_key: str) -> requests.Response:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Idempotency-Key": idempotency_key,
        }
        try:
            response = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Payment gateway request to {url} failed: {e}")
            raise PaymentGatewayError(f"Payment gateway unreachable: {e}") from e
        logger.debug(f"POST {url} -> {response.status_code}")
        return response

    @staticmethod
    def _json(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise PaymentGatewayError(
                f"Invalid JSON from payment gateway (status {response.status_code})"
            ) from e
        if not isinstance(data, dict):
            raise PaymentGatewayError("Unexpected payment gateway response shape")
        return data

    def charge(
        self,
        amount: float,
        currency: str,
        reference: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChargeResult:
        """
        Create a charge.

        A 402 response or a body with status "declined" is a decline;
        other non-2xx responses are gateway errors.
        """
        payload = {
            "amount": round(amount, 2),
            "currency": currency,
            "reference": reference,
            "metadata": metadata or {},
        }
        response = self._post("charges", payload, idempotency_key=reference)

        if response.status_code == 402:
            data = self._json(response)
            return ChargeResult(success=False, failure_reason=data.get("decline_reason", "declined"))

        if not response.ok:
            raise PaymentGatewayError(
                f"Payment gateway returned {response.status_code} for charge {reference}"
            )

        data = self._json(response)
        if data.get("status") == "declined":
            return ChargeResult(success=False, failure_reason=data.get("decline_reason", "declined"))
        if data.get("status") != "succeeded" or not data.get("id"):
            raise PaymentGatewayError(f"Unexpected charge status: {data.get('status')!r}")

        logger.info(f"Charge {reference} accepted by gateway as {data['id']}")
        return ChargeResult(success=True, reference=data["id"])

    def refund(self, gateway_reference: str, amount: float) -> None:
        """Refund a charge; any non-2xx response is an error."""
        payload = {"charge_id": gateway_reference, "amount": round(amount, 2)}
        response = self._post("refunds", payload, idempotency_key=f"refund-{gateway_reference}")
        if not response.ok:
            raise PaymentGatewayError(
                f"Payment gateway returned {response.status_code} refunding {gateway_reference}"
            )
        logger.info(f"Charge {gateway_reference} refunded")
