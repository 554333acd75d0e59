# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared plumbing for endpoint groups."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from ..client import Client


def segment(value: object) -> str:
    """Quote a caller-supplied identifier for use as a single path segment."""
    return quote(str(value), safe="")


class Resource:
    """An endpoint group bound to a Client."""

    def __init__(self, client: Client):
        self._client = client
