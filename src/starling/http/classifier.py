# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response classification.

The API uses two incompatible error conventions: most endpoints reply with
``{"message": "..."}`` while others put an endpoint-specific payload (often a
list of validation messages) in the error body. ``classify`` resolves a raw
response into one of four outcomes using this table:

    status   body                                     outcome
    2xx      empty or JSON null                       Success(None)
    2xx      decodes into target                      Success(value)
    2xx      anything else                            DecodeError is raised
    other    object with non-empty string "message"   StandardError
    other    decodes into target                      OpaqueError
    other    anything else                            StatusError
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import ApiMessageError, ApiPayloadError, ApiStatusError, DecodeError
from .models import RawResponse


@dataclass(frozen=True)
class Success:
    value: Any = None


@dataclass(frozen=True)
class StandardError:
    message: str


@dataclass(frozen=True)
class OpaqueError:
    payload: Any


@dataclass(frozen=True)
class StatusError:
    status_code: int
    status: str


Outcome = Union[Success, StandardError, OpaqueError, StatusError]


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _adapter(target: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target)
    except TypeError:
        # Unhashable type expressions cannot be cached.
        return TypeAdapter(target)


def decode_json(content: bytes, target: Any = None) -> Any:
    """Decode ``content`` into ``target`` (plain JSON values when ``target`` is None)."""
    return _adapter(Any if target is None else target).validate_json(content)


def validate_value(value: Any, target: Any) -> Any:
    """Validate an already-decoded JSON value against ``target``."""
    return _adapter(target).validate_python(value)


def standard_error_message(content: bytes) -> str | None:
    """Return the message of a ``{"message": ...}`` error body, if it is one."""
    try:
        data = json.loads(content)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def classify(response: RawResponse, target: Any = None) -> Outcome:
    if response.ok:
        if not response.content or response.content.strip() == b"null":
            return Success(None)
        try:
            return Success(decode_json(response.content, target))
        except ValidationError as exc:
            raise DecodeError(f"unable to decode response body: {exc}", response) from exc

    message = standard_error_message(response.content)
    if message is not None:
        return StandardError(message)

    if target is not None:
        try:
            return OpaqueError(decode_json(response.content, target))
        except ValidationError:
            pass

    return StatusError(response.status_code, response.status)


def unwrap_outcome(outcome: Outcome, response: RawResponse) -> Any:
    """Return the value of a Success outcome or raise the matching ApiError."""
    if isinstance(outcome, Success):
        return outcome.value
    if isinstance(outcome, StandardError):
        raise ApiMessageError(outcome.message, response)
    if isinstance(outcome, OpaqueError):
        raise ApiPayloadError(response.status, response, outcome.payload)
    raise ApiStatusError(outcome.status, response)


__all__ = [
    "OpaqueError",
    "Outcome",
    "StandardError",
    "StatusError",
    "Success",
    "classify",
    "decode_json",
    "standard_error_message",
    "unwrap_outcome",
    "validate_value",
]
