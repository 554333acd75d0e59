# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..models import Merchant, MerchantLocation
from .base import Resource, segment


class MerchantsResource(Resource):
    def get(self, uid: str, ctx: CallContext | None = None) -> Merchant | None:
        return self._client.get(f"api/v1/merchants/{segment(uid)}", Merchant, ctx)

    def location(self, merchant_uid: str, location_uid: str, ctx: CallContext | None = None) -> MerchantLocation | None:
        path = f"api/v1/merchants/{segment(merchant_uid)}/locations/{segment(location_uid)}"
        return self._client.get(path, MerchantLocation, ctx)
