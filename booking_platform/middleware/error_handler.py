"""Error handling middleware with Sentry integration."""
import logging
from typing import Any, Tuple, Type

from flask import Flask, jsonify

from booking_platform.domain.exceptions import (
    BookingConflictError,
    DomainError,
    DuplicateUserError,
    InvalidStatusTransitionError,
    NotFoundError,
    PaymentDeclinedError,
    PaymentGatewayError,
    ValidationError,
)
from booking_platform.infrastructure.di.exceptions import RegistryError

logger = logging.getLogger(__name__)


class MissingUserError(Exception):
    """Raised when a request lacks the caller identity header."""


class InvalidBodyError(Exception):
    """Raised when a request body fails schema validation."""

    def __init__(self, message: str, errors: Any = None):
        self.errors = errors or []
        super().__init__(message)


# Most specific first; the first match wins
DOMAIN_ERROR_STATUS: Tuple[Tuple[Type[DomainError], int], ...] = (
    (ValidationError, 400),
    (PaymentDeclinedError, 402),
    (NotFoundError, 404),
    (BookingConflictError, 409),
    (InvalidStatusTransitionError, 409),
    (DuplicateUserError, 409),
    (PaymentGatewayError, 502),
)


def status_for(error: DomainError) -> int:
    """Map a domain error to an HTTP status code (422 when unmapped)."""
    for error_type, status in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 422


def error_response(message: str, status: int, **extra):
    """Build the JSON error body used by every endpoint."""
    body = {"status": "error", "message": message}
    body.update(extra)
    return jsonify(body), status


def init_error_handlers(app: Flask) -> None:
    """
    Initialize error handlers for the application.

    Args:
        app: Flask application instance
    """
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration
        from sentry_sdk.integrations.celery import CeleryIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
                CeleryIntegration(),
            ],
            traces_sample_rate=0.1,
            environment=app.config.get("FLASK_ENV", "production"),
        )
        logger.info("Sentry error tracking initialized")

    @app.errorhandler(DomainError)
    def domain_error(error: DomainError):
        """Handle business rule violations."""
        status = status_for(error)
        logger.info(f"{type(error).__name__} -> {status}: {error}")
        extra = {"error": type(error).__name__}
        if isinstance(error, PaymentDeclinedError) and error.payment_id:
            extra["payment_id"] = error.payment_id
        return error_response(str(error), status, **extra)

    @app.errorhandler(MissingUserError)
    def missing_user(error: MissingUserError):
        """Handle requests without a caller identity."""
        return error_response(str(error), 401)

    @app.errorhandler(InvalidBodyError)
    def invalid_body(error: InvalidBodyError):
        """Handle malformed request bodies."""
        return error_response(str(error), 400, errors=error.errors)

    @app.errorhandler(RegistryError)
    def registry_error(error: RegistryError):
        """Handle wiring mistakes that slipped past startup."""
        logger.critical(f"Service wiring error while serving request: {error}", exc_info=True)
        return error_response("Service misconfigured", 500)

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return error_response("Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return error_response("Internal server error", 500)

    @app.errorhandler(429)
    def rate_limit_error(error):
        """Handle rate limit errors."""
        return error_response("Rate limit exceeded. Please try again later.", 429)
