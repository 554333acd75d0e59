# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared value types."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .base import StarlingModel


class CurrencyAndAmount(StarlingModel):
    currency: str  # ISO-4217 3 character currency code
    minor_units: int  # e.g. pence in GBP, cents in EUR


class ErrorDetail(StarlingModel):
    message: str = ""


class HalLink(StarlingModel):
    href: str = ""
    templated: bool = False
    type: str | None = None
    deprecation: str | None = None
    name: str | None = None
    profile: str | None = None
    title: str | None = None
    hreflang: str | None = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range used to filter listings."""

    start: dt.date
    end: dt.date

    def to_params(self) -> dict[str, str]:
        return {"from": self.start.strftime("%Y-%m-%d"), "to": self.end.strftime("%Y-%m-%d")}
