"""External service clients (Infrastructure Layer)."""
from booking_platform.infrastructure.clients.fake_payment_gateway import FakePaymentGateway
from booking_platform.infrastructure.clients.http_payment_gateway import HttpPaymentGateway

__all__ = ["FakePaymentGateway", "HttpPaymentGateway"]
