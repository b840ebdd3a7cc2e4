"""Request body schemas for the HTTP boundary (pydantic)."""
from datetime import date
from typing import Any, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_day(value: Any) -> Any:
    """Accept ISO dates and other unambiguous date strings."""
    if isinstance(value, str):
        try:
            return date_parser.parse(value, fuzzy=False).date()
        except (ValueError, OverflowError) as e:
            raise ValueError(f"invalid date: {value!r}") from e
    return value


class RegisterUserBody(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)


class CreateBookingBody(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    resource_id: str = Field(min_length=1, max_length=100)
    check_in: date
    check_out: date
    total_price: float = Field(ge=0, allow_inf_nan=False)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Any:
        return parse_day(value)


class CancelBookingBody(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    reason: Optional[str] = Field(default=None, max_length=500)
