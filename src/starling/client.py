# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Starling API client facade."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from .config import ClientSettings, load_client_settings
from .context import CallContext
from .errors import DecodeError
from .http.builder import build_request
from .http.classifier import classify, unwrap_outcome, validate_value
from .http.envelope import unwrap_embedded
from .http.executor import execute
from .http.models import ApiRequest, RawResponse
from .http.transport import create_default_transport
from .resources import (
    AccountsResource,
    AddressesResource,
    CardsResource,
    ContactsResource,
    CustomersResource,
    DirectDebitsResource,
    MerchantsResource,
    PaymentsResource,
    ReceiptsResource,
    SavingsGoalsResource,
    TransactionsResource,
    UserResource,
)

T = TypeVar("T")


class Client:
    """
    Client for the Starling Bank API.

    Most endpoints need an authenticated transport: pass an ``httpx.Client`` that
    authenticates for you (an OAuth2 client, or one using StaticTokenAuth).
    Without one, a plain client is created from ``settings`` and closed with
    this client. An injected transport is never closed here.

    Settings are immutable; use ``with_settings`` to derive a differently
    configured client sharing the same transport.
    """

    def __init__(self, transport: httpx.Client | None = None, settings: ClientSettings | None = None):
        self._settings = settings or load_client_settings()
        self._owns_transport = transport is None
        self._transport = transport or create_default_transport(self._settings)

        self.accounts = AccountsResource(self)
        self.addresses = AddressesResource(self)
        self.cards = CardsResource(self)
        self.contacts = ContactsResource(self)
        self.customers = CustomersResource(self)
        self.direct_debits = DirectDebitsResource(self)
        self.merchants = MerchantsResource(self)
        self.payments = PaymentsResource(self)
        self.receipts = ReceiptsResource(self)
        self.savings_goals = SavingsGoalsResource(self)
        self.transactions = TransactionsResource(self)
        self.user = UserResource(self)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def transport(self) -> httpx.Client:
        return self._transport

    def with_settings(self, **changes: Any) -> Client:
        """Return a new client with ``changes`` applied to the settings."""
        return Client(self._transport, self._settings.replace(**changes))

    def new_request(self, method: str, path: str, body: Any = None) -> ApiRequest:
        """Build a request for ``path`` relative to the configured base URL."""
        return build_request(self._settings, method, path, body)

    def send(self, request: ApiRequest, ctx: CallContext | None = None) -> RawResponse:
        """Execute ``request`` without classifying the response."""
        return execute(self._transport, request, ctx)

    def do(self, request: ApiRequest, target: Any = None, ctx: CallContext | None = None) -> tuple[Any, RawResponse]:
        """
        Execute ``request`` and decode a 2xx body into ``target``.

        Returns ``(value, response)``; ``value`` is None when the body is empty.
        Non-2xx replies raise an ApiError subclass carrying the response.
        """
        response = self.send(request, ctx)
        return unwrap_outcome(classify(response, target), response), response

    def get(self, path: str, target: type[T] | Any, ctx: CallContext | None = None) -> T | None:
        value, _ = self.do(self.new_request("GET", path), target, ctx)
        return value

    def get_collection(
        self,
        path: str,
        item_type: type[T],
        field: str,
        ctx: CallContext | None = None,
        *,
        params: dict[str, str] | None = None,
    ) -> list[T]:
        """Fetch a list that may arrive bare or inside an ``_embedded`` envelope."""
        request = self.new_request("GET", path)
        if params:
            request = request.with_query(params)
        payload, response = self.do(request, None, ctx)
        try:
            return validate_value(unwrap_embedded(payload, field), list[item_type])
        except ValidationError as exc:
            raise DecodeError(f"unable to decode {field!r} collection: {exc}", response) from exc

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["Client"]
