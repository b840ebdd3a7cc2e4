"""Rate limiting middleware using Flask-Limiter."""
import logging

from flask import Flask, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

logger = logging.getLogger(__name__)

USER_HEADER = "X-User-Id"


def get_limiter_key() -> str:
    """
    Get rate limit key based on the calling user or IP address.

    Returns:
        String key for rate limiting
    """
    user_id = request.headers.get(USER_HEADER)
    if user_id:
        return f"rate_limit:user:{user_id}"
    return get_remote_address()


def create_rate_limiter(app: Flask) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED"):
        # Limiter stays registered so decorators keep working, without limits
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False,
        )

    return Limiter(
        get_limiter_key,
        app=app,
        default_limits=["1000 per hour", "100 per minute"],
        storage_uri=app.config.get("RATELIMIT_STORAGE_URL", "memory://"),
        strategy="fixed-window",
        headers_enabled=True,
    )
