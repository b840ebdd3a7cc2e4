"""UUID-based identifier generator."""
import uuid

from booking_platform.domain.interfaces.id_generator import IIdGenerator


class UuidIdGenerator(IIdGenerator):
    """Generates identifiers like "BK1A2B3C4D5E6F" (prefix + upper-case hex)."""

    def __init__(self, length: int = 12):
        if not 4 <= length <= 32:
            raise ValueError("length must be between 4 and 32")
        self.length = length

    def new_id(self, prefix: str) -> str:
        return f"{prefix}{uuid.uuid4().hex[:self.length].upper()}"
