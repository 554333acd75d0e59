# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import uuid

from ..context import CallContext
from ..errors import SavingsGoalError
from ..http.models import RawResponse
from ..models import (
    CurrencyAndAmount,
    SavingsGoal,
    SavingsGoalList,
    SavingsGoalPhoto,
    SavingsGoalRequest,
    SavingsGoalResponse,
    SavingsGoalTransferResponse,
    TopUpRequest,
    WithdrawalRequest,
)
from .base import Resource, segment


def _check_success(result: SavingsGoalResponse | SavingsGoalTransferResponse | None, response: RawResponse) -> None:
    if result is None or result.success:
        return
    messages = [error.message for error in result.errors]
    raise SavingsGoalError(", ".join(messages) or response.status, response, messages)


class SavingsGoalsResource(Resource):
    def list(self, ctx: CallContext | None = None) -> list[SavingsGoal]:
        """All savings goals of the current customer (possibly none)."""
        result = self._client.get("api/v1/savings-goals", SavingsGoalList, ctx)
        if result is None or result.savings_goal_list is None:
            return []
        return result.savings_goal_list

    def get(self, uid: str, ctx: CallContext | None = None) -> SavingsGoal | None:
        return self._client.get(f"api/v1/savings-goals/{segment(uid)}", SavingsGoal, ctx)

    def photo(self, uid: str, ctx: CallContext | None = None) -> SavingsGoalPhoto | None:
        return self._client.get(f"api/v1/savings-goals/{segment(uid)}/photo", SavingsGoalPhoto, ctx)

    def create(self, uid: str, goal: SavingsGoalRequest, ctx: CallContext | None = None) -> str:
        """
        Create (or replace) the savings goal ``uid`` and return its UID.

        Raises SavingsGoalError when the API accepts the call but reports failure.
        """
        request = self._client.new_request("PUT", f"api/v1/savings-goals/{segment(uid)}", goal)
        result, response = self._client.do(request, SavingsGoalResponse, ctx)
        _check_success(result, response)
        return result.uid if result is not None and result.uid else uid

    def add_money(self, goal_uid: str, amount: CurrencyAndAmount, ctx: CallContext | None = None) -> str | None:
        """Transfer ``amount`` into a savings goal; returns the transfer UID."""
        return self._transfer(goal_uid, "add-money", TopUpRequest(amount=amount), ctx)

    def withdraw(self, goal_uid: str, amount: CurrencyAndAmount, ctx: CallContext | None = None) -> str | None:
        """Transfer ``amount`` out of a savings goal; returns the transfer UID."""
        return self._transfer(goal_uid, "withdraw-money", WithdrawalRequest(amount=amount), ctx)

    def _transfer(
        self,
        goal_uid: str,
        action: str,
        body: TopUpRequest | WithdrawalRequest,
        ctx: CallContext | None,
    ) -> str | None:
        path = f"api/v1/savings-goals/{segment(goal_uid)}/{action}/{uuid.uuid4()}"
        result, response = self._client.do(self._client.new_request("PUT", path, body), SavingsGoalTransferResponse, ctx)
        _check_success(result, response)
        return result.uid if result is not None else None

    def delete(self, uid: str, ctx: CallContext | None = None) -> RawResponse:
        """Delete a savings goal. The API answers 204 No Content on success."""
        _, response = self._client.do(self._client.new_request("DELETE", f"api/v1/savings-goals/{segment(uid)}"), None, ctx)
        return response
