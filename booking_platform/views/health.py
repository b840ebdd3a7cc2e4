"""Health check endpoints."""
import logging

from flask import Blueprint, current_app, jsonify

from booking_platform.infrastructure.service_providers.foundation import REDIS_CLIENT_PORT

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """Basic health check endpoint."""
    return jsonify({
        "status": "healthy",
        "service": "booking-platform"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks wiring and dependencies).

    Returns:
        JSON response with readiness status
    """
    container = current_app.config.get("service_container")
    checks = {
        "registry": bool(container and container.is_bootstrapped),
    }

    # Redis only matters when a module stores data in it
    if container and container.registry.is_registered(REDIS_CLIENT_PORT):
        try:
            container.resolve(REDIS_CLIENT_PORT).ping()
            checks["redis"] = True
        except Exception as e:
            _logger.error(f"Redis health check failed: {e}")
            checks["redis"] = False

    ready = all(checks.values())
    body = {
        "status": "ready" if ready else "not_ready",
        "checks": checks,
    }
    if container:
        body["modules"] = [provider.name for provider in container.providers]
        body["bindings"] = len(container.registry.registered_ports())

    return jsonify(body), 200 if ready else 503


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """Liveness check endpoint (for Kubernetes)."""
    return jsonify({
        "status": "alive",
        "service": "booking-platform"
    }), 200
