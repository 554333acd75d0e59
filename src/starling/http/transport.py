# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Default httpx transport and authentication helpers."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from ..config import ClientSettings, load_client_settings


class StaticTokenAuth(httpx.Auth):
    """Attach a fixed bearer token (e.g. a personal access token) to every request."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def create_default_transport(settings: ClientSettings | None = None, *, token: str | None = None) -> httpx.Client:
    """Factory for the default httpx.Client used when the caller does not inject one."""
    settings = settings or load_client_settings()
    return httpx.Client(
        timeout=settings.timeout,
        verify=settings.verify_ssl,
        auth=StaticTokenAuth(token) if token else None,
    )


__all__ = ["StaticTokenAuth", "create_default_transport"]
