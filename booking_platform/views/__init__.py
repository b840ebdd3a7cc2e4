"""Views module - exports all blueprints."""
from booking_platform.views.bookings import bookings_blueprint
from booking_platform.views.health import health_blueprint
from booking_platform.views.payments import payments_blueprint
from booking_platform.views.users import users_blueprint

__all__ = ["bookings_blueprint", "health_blueprint", "payments_blueprint", "users_blueprint"]
