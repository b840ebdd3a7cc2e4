"""Wall-clock implementation of IClock."""
from datetime import datetime, timezone

from booking_platform.domain.interfaces.clock import IClock


class SystemClock(IClock):
    """Clock backed by the system time, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
