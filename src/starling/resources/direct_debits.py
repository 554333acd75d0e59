# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..http.models import RawResponse
from ..models import DirectDebitMandate
from .base import Resource, segment


class DirectDebitsResource(Resource):
    def mandates(self, ctx: CallContext | None = None) -> list[DirectDebitMandate]:
        return self._client.get_collection("api/v1/direct-debit/mandates", DirectDebitMandate, "mandates", ctx)

    def mandate(self, uid: str, ctx: CallContext | None = None) -> DirectDebitMandate | None:
        return self._client.get(f"api/v1/direct-debit/mandates/{segment(uid)}", DirectDebitMandate, ctx)

    def delete_mandate(self, uid: str, ctx: CallContext | None = None) -> RawResponse:
        """Cancel a mandate. The API answers 204 No Content on success."""
        request = self._client.new_request("DELETE", f"api/v1/direct-debit/mandates/{segment(uid)}")
        _, response = self._client.do(request, None, ctx)
        return response
