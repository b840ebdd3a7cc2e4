"""Shared helpers for blueprints."""
import json
from typing import Any, Hashable, Type, TypeVar

from flask import current_app, request
from pydantic import BaseModel, ValidationError as SchemaValidationError

from booking_platform.middleware.error_handler import InvalidBodyError, MissingUserError
from booking_platform.middleware.rate_limiter import USER_HEADER


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def resolve(port: Hashable) -> Any:
    """Resolve a port through the application's service container."""
    return current_app.config["service_container"].resolve(port)


def current_user_id() -> str:
    """Identity of the caller (authentication itself happens upstream)."""
    user_id = request.headers.get(USER_HEADER, "").strip()
    if not user_id:
        raise MissingUserError(f"Missing {USER_HEADER} header")
    return user_id


def parse_body(schema: Type[SchemaT], required: bool = True) -> SchemaT:
    """
    Validate the JSON body against a schema.

    Raises:
        InvalidBodyError: If the body is missing, not JSON, or invalid
    """
    body = request.get_json(silent=True)
    if body is None:
        if required:
            raise InvalidBodyError("Request body must be a JSON object")
        body = {}
    if not isinstance(body, dict):
        raise InvalidBodyError("Request body must be a JSON object")
    try:
        return schema.model_validate(body)
    except SchemaValidationError as e:
        raise InvalidBodyError("Invalid request body", json.loads(e.json(include_url=False))) from e
