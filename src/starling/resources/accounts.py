# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..models import Account, AddressHistory, Balance, Card, Customer, Identity
from .base import Resource


class AccountsResource(Resource):
    def get(self, ctx: CallContext | None = None) -> Account | None:
        """Account details for the current customer."""
        return self._client.get("api/v1/accounts", Account, ctx)

    def balance(self, ctx: CallContext | None = None) -> Balance | None:
        """Balance of the current customer's account."""
        return self._client.get("api/v1/accounts/balance", Balance, ctx)


class AddressesResource(Resource):
    def history(self, ctx: CallContext | None = None) -> AddressHistory | None:
        """Current and previous addresses of the customer."""
        return self._client.get("api/v2/addresses", AddressHistory, ctx)


class CardsResource(Resource):
    def get(self, ctx: CallContext | None = None) -> Card | None:
        return self._client.get("api/v1/cards", Card, ctx)


class CustomersResource(Resource):
    def get(self, ctx: CallContext | None = None) -> Customer | None:
        return self._client.get("api/v1/customers", Customer, ctx)


class UserResource(Resource):
    def me(self, ctx: CallContext | None = None) -> Identity | None:
        """Identity of the user the access token belongs to."""
        return self._client.get("api/v1/me", Identity, ctx)
