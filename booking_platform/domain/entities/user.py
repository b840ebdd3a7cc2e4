"""User domain entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from booking_platform.domain.exceptions import ValidationError


@dataclass
class User:
    """Domain entity representing a registered customer."""

    user_id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate and normalise user entity."""
        if not self.user_id:
            raise ValidationError("user_id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("name is required")
        self.name = self.name.strip()
        self.email = (self.email or "").strip().lower()
        local, sep, domain = self.email.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValidationError(f"Invalid email: {self.email!r}")
