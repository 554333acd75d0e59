# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Payee (contact) models."""

from __future__ import annotations

from pydantic import Field

from .base import StarlingModel


class Contact(StarlingModel):
    uid: str = Field("", alias="id")
    name: str = ""


class ContactAccount(StarlingModel):
    uid: str = Field("", alias="id")
    type: str = ""
    name: str = ""
    account_number: str = ""
    sort_code: str = ""


class ContactAccountList(StarlingModel):
    contact_accounts: list[ContactAccount] | None = None
