# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request pipeline exports."""

from .builder import JSON_MEDIA_TYPE, build_request, check_base_url, encode_json_body, resolve_url
from .classifier import (
    OpaqueError,
    Outcome,
    StandardError,
    StatusError,
    Success,
    classify,
    decode_json,
    unwrap_outcome,
    validate_value,
)
from .envelope import EMBEDDED_KEY, unwrap_embedded
from .executor import execute
from .models import ApiRequest, Headers, RawResponse
from .transport import StaticTokenAuth, create_default_transport

__all__ = [
    "ApiRequest",
    "EMBEDDED_KEY",
    "Headers",
    "JSON_MEDIA_TYPE",
    "OpaqueError",
    "Outcome",
    "RawResponse",
    "StandardError",
    "StaticTokenAuth",
    "StatusError",
    "Success",
    "build_request",
    "check_base_url",
    "classify",
    "create_default_transport",
    "decode_json",
    "encode_json_body",
    "execute",
    "resolve_url",
    "unwrap_embedded",
    "unwrap_outcome",
    "validate_value",
]
