# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Starling Bank API client.

Requests are built against an immutable base URL, executed over an injectable
``httpx.Client``, and classified into a decoded value or a typed ApiError that
keeps the raw response. Webhook signatures are checked against WSGI requests
without consuming their body.
"""

from .client import Client
from .config import PRODUCTION_URL, SANDBOX_URL, ClientSettings, load_client_settings
from .context import CallContext
from .errors import (
    ApiError,
    ApiMessageError,
    ApiPayloadError,
    ApiStatusError,
    ContextError,
    DecodeError,
    ErrorCategory,
    RequestBuildError,
    ResponseError,
    StarlingError,
    TransportError,
    WebhookError,
)
from .http import ApiRequest, RawResponse, StaticTokenAuth, create_default_transport
from .log import setup_logging
from .version import __version__
from .webhook import parse_payload, sign, validate, validate_body

__all__ = [
    "ApiError",
    "ApiMessageError",
    "ApiPayloadError",
    "ApiRequest",
    "ApiStatusError",
    "CallContext",
    "Client",
    "ClientSettings",
    "ContextError",
    "DecodeError",
    "ErrorCategory",
    "PRODUCTION_URL",
    "RawResponse",
    "RequestBuildError",
    "ResponseError",
    "SANDBOX_URL",
    "StarlingError",
    "StaticTokenAuth",
    "TransportError",
    "WebhookError",
    "create_default_transport",
    "load_client_settings",
    "parse_payload",
    "setup_logging",
    "sign",
    "validate",
    "validate_body",
    "__version__",
]
