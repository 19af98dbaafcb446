"""
Validation of path identifiers and inbound settings payloads.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from core.errors import Result, ValidationFailure
from core.pagination import in_bigint_range, parse_bigint

from .schemas import ClientSettings, ClientSettingsBody

INVALID_CLIENT_ID_MESSAGE = "Invalid clientId. Must be a number."
MALFORMED_PAYLOAD_MESSAGE = "malformed payload"


def validate_client_id(value: Any) -> Result[int]:
    if isinstance(value, bool):
        return Result.failure(ValidationFailure(INVALID_CLIENT_ID_MESSAGE))
    if isinstance(value, int) and in_bigint_range(value):
        return Result.success(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and in_bigint_range(int(value)):
            return Result.success(int(value))
        return Result.failure(ValidationFailure(INVALID_CLIENT_ID_MESSAGE))
    if isinstance(value, str):
        parsed = parse_bigint(value)
        if parsed is not None:
            return Result.success(parsed)
    return Result.failure(ValidationFailure(INVALID_CLIENT_ID_MESSAGE))


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg") or "Validation failed")
    return f"{location}: {message}" if location else message


def validate_client_settings(payload: Any, client_id: int) -> Result[ClientSettings]:
    """
    Validate a full settings body and bind it to `client_id`.

    Any `clientId` in the payload is ignored; the caller's value always wins.
    Only the first problem found is reported.
    """
    if not isinstance(payload, dict):
        return Result.failure(ValidationFailure(MALFORMED_PAYLOAD_MESSAGE))

    try:
        body = ClientSettingsBody.model_validate(payload)
    except ValidationError as exc:
        return Result.failure(ValidationFailure(_first_error_message(exc)))

    settings = ClientSettings.model_validate({**body.model_dump(by_alias=True), "clientId": client_id})
    return Result.success(settings)
