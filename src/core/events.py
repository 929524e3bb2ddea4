"""Helpers for reading API Gateway proxy events."""

import json
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from core.errors import UnauthorizedError, ValidationError

M = TypeVar("M", bound=BaseModel)


def get_user_id(event: dict[str, Any]) -> int:
    """User id placed in the request context by the API authorizer."""
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    try:
        return int(authorizer["userId"])
    except (KeyError, TypeError, ValueError) as e:
        raise UnauthorizedError("Missing or malformed userId in authorizer context") from e


def parse_params(model: type[M], data: dict[str, Any] | None) -> M:
    try:
        return model.model_validate(data or {})
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e}") from e


def parse_body(model: type[M], event: dict[str, Any]) -> M:
    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as e:
        raise ValidationError(f"Request body is not valid JSON: {e}") from e
    return parse_params(model, body if isinstance(body, dict) else None)
