# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Normalization of HAL-style ``_embedded`` envelopes.

Legacy endpoints wrap collections as ``{"_links": ..., "_embedded": {"<field>": [...]}}``;
newer ones return the collection (or an object holding it) directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

EMBEDDED_KEY = "_embedded"


def unwrap_embedded(payload: Any, field: str) -> Any:
    """
    Return the collection named ``field`` from ``payload``.

    A null or missing ``_embedded`` object, or a null or missing inner field,
    yields an empty list.
    """
    if payload is None:
        return []
    if isinstance(payload, Mapping):
        if EMBEDDED_KEY in payload:
            embedded = payload.get(EMBEDDED_KEY)
            if not isinstance(embedded, Mapping):
                return []
            inner = embedded.get(field)
            return [] if inner is None else inner
        inner = payload.get(field)
        return [] if inner is None else inner
    return payload


__all__ = ["EMBEDDED_KEY", "unwrap_embedded"]
