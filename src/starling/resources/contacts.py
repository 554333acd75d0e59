# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..http.models import RawResponse
from ..models import Contact, ContactAccount
from ..models.contacts import ContactAccountList
from .base import Resource, segment


class ContactsResource(Resource):
    """Payees of the current customer."""

    def list(self, ctx: CallContext | None = None) -> list[Contact]:
        return self._client.get_collection("api/v1/contacts", Contact, "contacts", ctx)

    def get(self, uid: str, ctx: CallContext | None = None) -> Contact | None:
        return self._client.get(f"api/v1/contacts/{segment(uid)}", Contact, ctx)

    def delete(self, uid: str, ctx: CallContext | None = None) -> RawResponse:
        """Delete a contact. The API answers 204 No Content on success."""
        _, response = self._client.do(self._client.new_request("DELETE", f"api/v1/contacts/{segment(uid)}"), None, ctx)
        return response

    def accounts(self, uid: str, ctx: CallContext | None = None) -> list[ContactAccount]:
        result = self._client.get(f"api/v1/contacts/{segment(uid)}/accounts", ContactAccountList, ctx)
        if result is None or result.contact_accounts is None:
            return []
        return result.contact_accounts
