# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Webhook signature verification.

Starling signs each webhook by sending ``X-Hook-Signature`` set to
``base64(sha512(secret + raw_body))``. ``validate`` works on a WSGI environ
(or any request object exposing one as ``.environ``, as Flask/Werkzeug do).
Reading ``wsgi.input`` consumes it, so the buffered bytes are put back as a
fresh stream before returning and later handlers see the original body.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import io
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import ValidationError

from .errors import InvalidPayloadError, MissingBodyError, WebhookReadError
from .models import MastercardTransactionPayload, WebhookPayload

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Hook-Signature"
_SIGNATURE_ENVIRON_KEY = "HTTP_X_HOOK_SIGNATURE"


def _to_bytes(value: str | bytes) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def sign(secret: str | bytes, body: str | bytes) -> str:
    """Return the signature Starling would send for ``body``."""
    digest = hashlib.sha512(_to_bytes(secret) + _to_bytes(body)).digest()
    return base64.b64encode(digest).decode("ascii")


def validate_body(body: bytes, signature: str | None, secret: str | bytes) -> bool:
    """Check ``signature`` against ``body``; any mismatch, including a missing signature, is False."""
    expected = sign(secret, body).encode("ascii")
    received = (signature or "").encode("utf-8", errors="surrogateescape")
    return hmac.compare_digest(expected, received)


def _environ_of(request: Any) -> MutableMapping[str, Any]:
    environ = getattr(request, "environ", request)
    if not isinstance(environ, MutableMapping):
        raise TypeError(f"expected a WSGI environ or a request exposing .environ, got {type(request).__name__}")
    return environ


def _content_length(environ: Mapping[str, Any]) -> int | None:
    raw = environ.get("CONTENT_LENGTH")
    if raw in (None, ""):
        return None
    try:
        length = int(raw)
    except (TypeError, ValueError):
        return None
    return length if length >= 0 else None


def read_body(request: Any) -> bytes:
    """
    Read the whole request body and replace ``wsgi.input`` with an unread copy.

    Raises MissingBodyError when the request has no body stream and
    WebhookReadError when reading it fails.
    """
    environ = _environ_of(request)
    stream = environ.get("wsgi.input")
    if stream is None:
        raise MissingBodyError()

    length = _content_length(environ)
    try:
        body = stream.read(length) if length is not None else stream.read()
    except OSError as exc:
        raise WebhookReadError(f"unable to read webhook body: {exc}") from exc
    body = bytes(body or b"")

    environ["wsgi.input"] = io.BytesIO(body)
    environ["CONTENT_LENGTH"] = str(len(body))
    return body


def validate(request: Any, secret: str | bytes) -> bool:
    """
    Return True when the request's ``X-Hook-Signature`` matches its body.

    The body stays readable afterwards. A missing or wrong signature is False,
    not an error.
    """
    body = read_body(request)
    signature = _environ_of(request).get(_SIGNATURE_ENVIRON_KEY)
    valid = validate_body(body, signature, secret)
    logger.debug("webhook signature %s (%d byte body)", "valid" if valid else "invalid", len(body))
    return valid


def parse_payload(body: bytes | str) -> WebhookPayload | MastercardTransactionPayload:
    """Decode a webhook body, preferring the Mastercard transaction shape when it matches."""
    try:
        candidate = MastercardTransactionPayload.model_validate_json(body)
    except ValidationError:
        candidate = None
    if candidate is not None and candidate.event_uid:
        return candidate
    try:
        return WebhookPayload.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidPayloadError(f"invalid webhook payload: {exc}") from exc


__all__ = [
    "SIGNATURE_HEADER",
    "parse_payload",
    "read_body",
    "sign",
    "validate",
    "validate_body",
]
