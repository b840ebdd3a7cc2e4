"""Flask application factory with per-module dependency wiring."""
import logging
import sys
from typing import Optional

from flask import Flask, jsonify

from booking_platform.config.settings import Config, get_config
from booking_platform.infrastructure.di.exceptions import RegistryError
from booking_platform.infrastructure.di.service_container import ServiceContainer
from booking_platform.middleware.error_handler import init_error_handlers
from booking_platform.middleware.monitoring import register_metrics_middleware
from booking_platform.middleware.rate_limiter import create_rate_limiter
from booking_platform.views import (
    bookings_blueprint,
    health_blueprint,
    payments_blueprint,
    users_blueprint,
)


def create_app(config_class: Optional[type[Config]] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Every module's ports are bound and verified before the app is returned.
    A wiring mistake raises instead of producing an app that would serve
    requests against a missing or wrong implementation.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application

    Raises:
        ValueError: If configuration is invalid
        RegistryError: If any port is unbound, bound twice, or fails to build
    """
    config = config_class or get_config()
    _logger = logging.getLogger(__name__)

    if not getattr(config, "TESTING", False):
        _configure_logging(config)

    config.validate()

    app = Flask(__name__)
    app.config.from_object(config)

    init_error_handlers(app)
    app.config["limiter"] = create_rate_limiter(app)
    register_metrics_middleware(app)

    app.register_blueprint(health_blueprint)
    app.register_blueprint(users_blueprint)
    app.register_blueprint(bookings_blueprint)
    app.register_blueprint(payments_blueprint)

    @app.route("/", methods=["GET"])
    def root():
        """Root endpoint for testing."""
        return jsonify({
            "status": "ok",
            "service": "booking-platform",
            "message": "Service is running"
        }), 200

    _initialize_services(app, config)

    _logger.info(f"Application ready - registered blueprints: {[bp.name for bp in app.blueprints.values()]}")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_services(app: Flask, config: type[Config]) -> None:
    """
    Bootstrap the Service Container and store it in app config.

    Args:
        app: Flask application instance
        config: Configuration class selecting implementations
    """
    container = ServiceContainer()
    try:
        container.bootstrap(config=config)
    except RegistryError as e:
        logging.getLogger(__name__).critical(f"Refusing to start: {e}")
        raise

    # Store container in app config for access in views
    app.config["service_container"] = container
