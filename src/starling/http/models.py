# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the request pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

Headers = dict[str, str]


@dataclass(frozen=True)
class ApiRequest:
    """Fully-formed outbound request produced by the request builder."""

    method: str
    url: str
    headers: Headers = field(default_factory=dict)
    content: bytes | None = None

    def with_query(self, params: Mapping[str, Any]) -> ApiRequest:
        """Return a copy with ``params`` appended to the URL query string."""
        if not params:
            return self
        parts = urlsplit(self.url)
        encoded = urlencode([(key, str(value)) for key, value in params.items()])
        query = f"{parts.query}&{encoded}" if parts.query else encoded
        return replace(self, url=urlunsplit(parts._replace(query=query)))


@dataclass(frozen=True)
class RawResponse:
    """HTTP response whose body has been read to completion and whose stream is closed."""

    status_code: int
    reason_phrase: str = ""
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def status(self) -> str:
        """Status line in the ``"404 Not Found"`` form."""
        return f"{self.status_code} {self.reason_phrase}".strip()

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def header(self, name: str, default: str = "") -> str:
        return self.headers.get(name.lower(), default)


__all__ = ["ApiRequest", "Headers", "RawResponse"]
