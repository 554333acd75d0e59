# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..http.models import RawResponse
from ..models import LocalPayment, Receipt, ScheduledPayment
from .base import Resource, segment


class PaymentsResource(Resource):
    def make_local(self, payment: LocalPayment, ctx: CallContext | None = None) -> RawResponse:
        _, response = self._client.do(self._client.new_request("POST", "api/v1/payments/local", payment), None, ctx)
        return response

    def scheduled(self, ctx: CallContext | None = None) -> list[ScheduledPayment]:
        """
        All payment orders on the account: previous immediate payments as well
        as scheduled orders for future or recurring payments.
        """
        return self._client.get_collection("api/v1/payments/scheduled", ScheduledPayment, "paymentOrders", ctx)


class ReceiptsResource(Resource):
    def create(self, transaction_uid: str, receipt: Receipt, ctx: CallContext | None = None) -> RawResponse:
        """Attach a receipt to a Mastercard transaction."""
        path = f"api/v1/transactions/mastercard/{segment(transaction_uid)}/receipt"
        _, response = self._client.do(self._client.new_request("POST", path, receipt), None, ctx)
        return response
