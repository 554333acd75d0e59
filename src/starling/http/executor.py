# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-shot request execution through a caller-supplied httpx.Client."""

from __future__ import annotations

import logging
from typing import Union

import httpx

from ..context import CallContext
from ..errors import BodyReadError, DeadlineExceeded, InvalidPathError, TransportError, categorize_exception
from .models import ApiRequest, RawResponse

logger = logging.getLogger(__name__)

# A transport timeout this close to the deadline is the deadline firing.
DEADLINE_SLACK = 0.05

TimeoutTypes = Union[float, httpx.Timeout, None]


class _ContextDone(httpx.TransportError):
    """Raised inside the transport boundary when the bound CallContext has ended."""


def _check_bound_context(ctx: CallContext, request: httpx.Request) -> None:
    if ctx.done():
        raise _ContextDone("request aborted: context done", request=request)


def _deadline_hit(ctx: CallContext, exc: Exception) -> bool:
    remaining = ctx.remaining()
    return isinstance(exc, httpx.TimeoutException) and remaining is not None and remaining <= DEADLINE_SLACK


def _context_or_transport_error(ctx: CallContext, exc: Exception, error_cls: type[TransportError]) -> Exception:
    # A finished context explains the failure better than whatever the socket reported.
    context_error = ctx.error()
    if context_error is not None:
        return context_error
    if _deadline_hit(ctx, exc):
        return DeadlineExceeded()
    return error_cls(str(exc) or type(exc).__name__, category=categorize_exception(exc))


def effective_timeout(default: httpx.Timeout, remaining: float | None) -> httpx.Timeout:
    """Cap every phase of ``default`` at ``remaining`` seconds (unbounded phases included)."""
    if remaining is None:
        return default

    def bound(value: float | None) -> float:
        return remaining if value is None else min(value, remaining)

    return httpx.Timeout(
        connect=bound(default.connect),
        read=bound(default.read),
        write=bound(default.write),
        pool=bound(default.pool),
    )


def _bind(transport: httpx.Client, request: ApiRequest, ctx: CallContext, timeout: TimeoutTypes) -> httpx.Request:
    default = transport.timeout if timeout is None else httpx.Timeout(timeout)
    try:
        return transport.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.content,
            timeout=effective_timeout(default, ctx.remaining()),
        )
    except httpx.InvalidURL as exc:
        raise InvalidPathError(f"invalid request URL {request.url!r}: {exc}") from exc


def execute(
    transport: httpx.Client,
    request: ApiRequest,
    ctx: CallContext | None = None,
    *,
    timeout: TimeoutTypes = None,
) -> RawResponse:
    """
    Send ``request`` and return the fully-read response.

    ``timeout`` overrides the transport's default; either way each phase is
    capped by the time left on ``ctx``. The stream is closed before returning.
    Transport failures raise TransportError unless the context had already
    ended, in which case its Cancelled or DeadlineExceeded error is raised
    instead.
    """
    ctx = ctx or CallContext.background()
    outbound = _bind(transport, request, ctx, timeout)

    logger.debug("%s %s", request.method, request.url)
    try:
        _check_bound_context(ctx, outbound)
        response = transport.send(outbound, stream=True)
    except httpx.HTTPError as exc:
        raise _context_or_transport_error(ctx, exc, TransportError) from exc

    try:
        content = bytearray()
        for chunk in response.iter_bytes():
            _check_bound_context(ctx, outbound)
            content.extend(chunk)
    except httpx.HTTPError as exc:
        raise _context_or_transport_error(ctx, exc, BodyReadError) from exc
    finally:
        response.close()

    logger.debug("%s %s -> %s (%d bytes)", request.method, request.url, response.status_code, len(content))
    return RawResponse(
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers={str(key).lower(): value for key, value in response.headers.items()},
        content=bytes(content),
        url=str(response.url),
    )


__all__ = ["DEADLINE_SLACK", "effective_timeout", "execute"]
