# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..context import CallContext
from ..models import DateRange, TransactionSummary
from .base import Resource, segment


class TransactionsResource(Resource):
    def list(self, date_range: DateRange | None = None, ctx: CallContext | None = None) -> list[TransactionSummary]:
        """
        Transaction summaries for the current customer.

        Without a date range the API returns the most recent 100 transactions.
        """
        params = date_range.to_params() if date_range is not None else None
        return self._client.get_collection("api/v1/transactions", TransactionSummary, "transactions", ctx, params=params)

    def get(self, uid: str, ctx: CallContext | None = None) -> TransactionSummary | None:
        return self._client.get(f"api/v1/transactions/{segment(uid)}", TransactionSummary, ctx)
