"""Foundation boundary implementations shared by every module."""
from booking_platform.infrastructure.foundation.system_clock import SystemClock
from booking_platform.infrastructure.foundation.uuid_id_generator import UuidIdGenerator

__all__ = ["SystemClock", "UuidIdGenerator"]
