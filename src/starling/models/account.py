# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Account holder models: accounts, balances, addresses, cards, identity."""

from __future__ import annotations

from pydantic import Field

from .base import StarlingModel
from .common import HalLink


class Account(StarlingModel):
    uid: str = Field("", alias="id")
    name: str = ""
    account_number: str = ""
    sort_code: str = ""
    currency: str = ""
    iban: str = ""
    bic: str = ""
    created_at: str = ""


class Balance(StarlingModel):
    cleared_balance: float = 0.0
    effective_balance: float = 0.0
    pending_transactions: float = 0.0
    available_to_spend: float = 0.0
    accepted_overdraft: float = 0.0
    currency: str = ""
    amount: float = 0.0


class Address(StarlingModel):
    line1: str = ""
    line2: str = ""
    line3: str = ""
    post_town: str = ""
    country_code: str = ""
    post_code: str = ""


class AddressHistory(StarlingModel):
    current: Address = Field(default_factory=Address)
    previous: list[Address] = Field(default_factory=list)


class Card(StarlingModel):
    uid: str = Field("", alias="id")
    name_on_card: str = ""
    type: str = ""
    enabled: bool = False
    cancelled: bool = False
    activation_requested: bool = False
    activated: bool = False
    dispatch_date: str = ""
    last_four_digits: str = ""
    transactions: HalLink | None = None


class Customer(StarlingModel):
    uid: str = Field("", alias="customerUid")
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    email: str = ""
    phone: str = ""
    account_holder_type: str = ""


class Identity(StarlingModel):
    """Identity of the token's owner, as reported by ``/me``."""

    uid: str = Field("", alias="customerUid")
    expires_at: str = ""
    authenticated: bool = False
    expires_in_seconds: int = 0
    scopes: list[str] = Field(default_factory=list)
