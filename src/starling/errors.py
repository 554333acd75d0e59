# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers.

Exceptions fall into five families:

- ``RequestBuildError``: the request could not be constructed (no I/O happened).
- ``TransportError``: no HTTP response was obtained.
- ``ContextError``: the caller's CallContext was cancelled or its deadline passed.
- ``ResponseError``: a response was obtained; ``.response`` holds it.
- ``WebhookError``: an inbound webhook body could not be read.

Only ``ResponseError`` instances carry a raw response, which lets callers tell
"no response" apart from "a response indicating failure".
"""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .http.models import RawResponse


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _iter_causes(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps the underlying socket/ssl error, so the cause chain is inspected
    before falling back to the httpx class.
    """
    for cause in _iter_causes(exc):
        if isinstance(cause, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(cause, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class StarlingError(Exception):
    """Base exception for all client errors."""


# Request construction


class RequestBuildError(StarlingError):
    """The outbound request could not be constructed."""


class ConfigurationError(RequestBuildError):
    """Client configuration is unusable (e.g. base URL without trailing slash)."""


class InvalidPathError(RequestBuildError):
    """The relative path is not a valid URL reference."""


class SerializationError(RequestBuildError):
    """The request body could not be encoded as JSON."""


class InvalidMethodError(RequestBuildError):
    """The HTTP method is not a valid request-line token."""


# Transport


class TransportError(StarlingError):
    """The request could not be delivered or no response was received."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR) -> None:
        super().__init__(message)
        self.category = category


class BodyReadError(TransportError):
    """The response status line arrived but reading the body failed."""


# Execution context


class ContextError(StarlingError):
    """The call's CallContext ended before the call completed."""


class Cancelled(ContextError):
    def __init__(self, message: str = "context cancelled") -> None:
        super().__init__(message)


class DeadlineExceeded(ContextError):
    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


# Responses


class ResponseError(StarlingError):
    """A response was received but could not be turned into a result."""

    def __init__(self, message: str, response: RawResponse) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class DecodeError(ResponseError):
    """A 2xx response body was not valid JSON for the requested type."""


class ApiError(ResponseError):
    """The API answered with a non-2xx status."""


class ApiMessageError(ApiError):
    """Failure reported with the standard ``{"message": ...}`` error shape."""


class ApiPayloadError(ApiError):
    """Failure whose body did not match the standard shape but decoded into the target type."""

    def __init__(self, message: str, response: RawResponse, payload: Any) -> None:
        super().__init__(message, response)
        self.payload = payload


class ApiStatusError(ApiError):
    """Failure with nothing better to report than the HTTP status line."""


class SavingsGoalError(ResponseError):
    """A savings goal operation replied 2xx but reported ``success: false``."""

    def __init__(self, message: str, response: RawResponse, errors: list[str] | None = None) -> None:
        super().__init__(message, response)
        self.errors = errors or []


# Webhooks


class WebhookError(StarlingError):
    """The inbound webhook request could not be validated."""


class MissingBodyError(WebhookError):
    def __init__(self, message: str = "no body to validate") -> None:
        super().__init__(message)


class WebhookReadError(WebhookError):
    """Reading the inbound webhook body failed."""


class InvalidPayloadError(WebhookError):
    """The webhook body is not a recognised JSON payload."""


__all__ = [
    "ApiError",
    "ApiMessageError",
    "ApiPayloadError",
    "ApiStatusError",
    "BodyReadError",
    "Cancelled",
    "ConfigurationError",
    "ContextError",
    "DeadlineExceeded",
    "DecodeError",
    "ErrorCategory",
    "InvalidMethodError",
    "InvalidPayloadError",
    "InvalidPathError",
    "MissingBodyError",
    "RequestBuildError",
    "ResponseError",
    "SavingsGoalError",
    "SerializationError",
    "StarlingError",
    "TransportError",
    "WebhookError",
    "WebhookReadError",
    "categorize_exception",
]
