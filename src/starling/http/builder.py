# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outbound request construction.

Turns ``(method, relative path, optional body)`` into an ApiRequest against the
configured base URL. No I/O happens here; every failure is raised as a
RequestBuildError subclass.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import json
import re
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import urljoin, urlsplit
from uuid import UUID

from pydantic import BaseModel

from ..config import ClientSettings
from ..errors import ConfigurationError, InvalidMethodError, InvalidPathError, SerializationError
from .models import ApiRequest

JSON_MEDIA_TYPE = "application/json"

# RFC 9110 token characters.
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+\Z")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*\Z")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def check_base_url(base_url: str) -> None:
    """Raise ConfigurationError unless ``base_url`` is absolute and ends with a slash."""
    parts = urlsplit(str(base_url or ""))
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"client base URL is not absolute: {base_url!r}")
    if not parts.path.endswith("/"):
        raise ConfigurationError(f"client base URL does not have a trailing slash: {base_url!r}")


def resolve_url(base_url: str, path: str) -> str:
    """Resolve ``path`` against ``base_url`` using standard URL-reference rules."""
    ref = str(path)
    if _CONTROL_RE.search(ref):
        raise InvalidPathError(f"invalid control character in URL: {ref!r}")

    # Anything before the first ':' in the leading segment must be a scheme.
    head = re.split(r"[/?#]", ref, maxsplit=1)[0]
    if ":" in head:
        scheme = head.split(":", 1)[0]
        if not scheme:
            raise InvalidPathError(f"missing protocol scheme: {ref!r}")
        if not _SCHEME_RE.match(scheme):
            raise InvalidPathError(f"first path segment in URL cannot contain colon: {ref!r}")

    try:
        parts = urlsplit(ref)
        parts.port  # noqa: B018 - validates the port component
    except ValueError as exc:
        raise InvalidPathError(f"invalid URL reference {ref!r}: {exc}") from exc

    return urljoin(base_url, ref)


def _decimal_number(value: Decimal) -> int | float:
    # Only amounts a JSON number can carry exactly are accepted.
    if not value.is_finite():
        raise ValueError(f"Decimal {value} is not a finite number")
    if value == value.to_integral_value():
        return int(value)
    number = float(value)
    if Decimal(repr(number)) != value:
        raise ValueError(f"Decimal {value} cannot be encoded as a JSON number without losing precision")
    return number


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return _decimal_number(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json_body(body: Any) -> bytes:
    """
    Encode ``body`` as compact JSON followed by a newline.

    HTML-significant characters (``&``, ``<``, ``>``) and non-ASCII text are
    emitted verbatim.
    """
    try:
        text = json.dumps(
            body,
            default=_json_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        return (text + "\n").encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"unable to encode request body as JSON: {exc}") from exc


def build_request(settings: ClientSettings, method: str, path: str, body: Any = None) -> ApiRequest:
    """Create an ApiRequest for ``method`` and ``path`` relative to ``settings.base_url``."""
    check_base_url(settings.base_url)
    url = resolve_url(settings.base_url, path)

    content = encode_json_body(body) if body is not None else None

    verb = method or "GET"
    if not _METHOD_RE.match(verb):
        raise InvalidMethodError(f"invalid method {method!r}")

    headers: dict[str, str] = {}
    if content is not None:
        headers["Content-Type"] = JSON_MEDIA_TYPE
    headers["Accept"] = JSON_MEDIA_TYPE
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent

    return ApiRequest(method=verb, url=url, headers=headers, content=content)


__all__ = ["JSON_MEDIA_TYPE", "build_request", "check_base_url", "encode_json_body", "resolve_url"]
