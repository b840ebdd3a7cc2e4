"""
Unit tests for the request metrics decorator.

Counters are process-wide, so each test compares samples before and after.
"""
import pytest
from flask import Flask
from prometheus_client import REGISTRY

from booking_platform.domain.exceptions import BookingConflictError
from booking_platform.middleware.error_handler import InvalidBodyError, MissingUserError
from booking_platform.middleware.monitoring import track_request


@pytest.fixture
def flask_app():
    return Flask(__name__)


def requests_counted(endpoint: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "booking_http_requests_total",
        {"method": "POST", "endpoint": endpoint, "status": status},
    )
    return value or 0.0


def call_tracked(flask_app, endpoint, view):
    with flask_app.test_request_context(method="POST"):
        return track_request(endpoint)(view)()


class TestTrackRequest:

    def test_counts_returned_status(self, flask_app):
        before = requests_counted("metrics_created", "201")

        call_tracked(flask_app, "metrics_created", lambda: ({"ok": True}, 201))

        assert requests_counted("metrics_created", "201") == before + 1

    @pytest.mark.parametrize("error, status", [
        (InvalidBodyError("Request body must be a JSON object"), "400"),
        (MissingUserError("X-User-Id header is required"), "401"),
        (BookingConflictError("room-101 is taken"), "409"),
    ])
    def test_counts_status_of_handled_errors(self, flask_app, error, status):
        endpoint = f"metrics_{type(error).__name__}"
        before = requests_counted(endpoint, status)

        def view():
            raise error

        with pytest.raises(type(error)):
            call_tracked(flask_app, endpoint, view)

        assert requests_counted(endpoint, status) == before + 1
        assert requests_counted(endpoint, "500") == 0

    def test_unexpected_error_counts_as_500(self, flask_app):
        before = requests_counted("metrics_crash", "500")

        def view():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            call_tracked(flask_app, "metrics_crash", view)

        assert requests_counted("metrics_crash", "500") == before + 1
