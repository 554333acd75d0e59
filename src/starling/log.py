# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the ``starling`` command and scripts embedding the client."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "STARLING_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# httpx logs every request at INFO; keep it quiet unless we are debugging.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: str | int | None = None) -> int:
    """Turn a level name (or $STARLING_LOG_LEVEL) into a logging level, WARNING when unknown."""
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | int | None = None) -> int:
    """Configure root logging for CLI use and return the effective level."""
    effective = resolve_level(level)
    logging.basicConfig(level=effective, format=LOG_FORMAT)
    logging.getLogger("starling").setLevel(effective)
    transport_level = logging.DEBUG if effective <= logging.DEBUG else max(effective, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective


__all__ = ["resolve_level", "setup_logging"]
