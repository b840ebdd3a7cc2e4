"""Monitoring and metrics middleware using Prometheus."""
import functools
import logging
import time
from typing import Callable

from flask import Flask, request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from booking_platform.domain.exceptions import DomainError
from booking_platform.middleware.error_handler import InvalidBodyError, MissingUserError, status_for

logger = logging.getLogger(__name__)

# Prometheus metrics
http_requests_total = Counter(
    "booking_http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status"]
)

http_request_duration = Histogram(
    "booking_http_request_duration_seconds",
    "Time spent processing HTTP requests",
    ["endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)

booking_events_total = Counter(
    "booking_events_total",
    "Booking lifecycle events",
    ["event"]
)

payments_total = Counter(
    "booking_payments_total",
    "Payment attempts by outcome",
    ["status"]
)


def register_metrics_middleware(app: Flask) -> None:
    """
    Register Prometheus metrics endpoint.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    @app.route("/metrics")
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {"Content-Type": CONTENT_TYPE_LATEST}

    logger.info("Prometheus metrics enabled at /metrics")


def track_request(endpoint: str):
    """
    Decorator to track request count and latency.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            status_code = 500
            try:
                response = f(*args, **kwargs)
                status_code = response[1] if isinstance(response, tuple) else 200
                return response
            except DomainError as e:
                status_code = status_for(e)
                raise
            except InvalidBodyError:
                status_code = 400
                raise
            except MissingUserError:
                status_code = 401
                raise
            finally:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=status_code
                ).inc()
                http_request_duration.labels(endpoint=endpoint).observe(time.time() - start_time)
        return wrapper
    return decorator


def track_booking_event(event: str) -> None:
    """
    Count a booking lifecycle event.

    Args:
        event: Event name (e.g., 'created', 'cancelled')
    """
    booking_events_total.labels(event=event).inc()


def track_payment(status: str) -> None:
    """
    Count a payment attempt outcome.

    Args:
        status: Payment status (e.g., 'succeeded', 'failed')
    """
    payments_total.labels(status=status).inc()
