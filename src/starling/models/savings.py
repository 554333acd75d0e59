# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Savings goal models."""

from __future__ import annotations

from pydantic import Field

from .base import StarlingModel
from .common import CurrencyAndAmount, ErrorDetail


class SavingsGoal(StarlingModel):
    uid: str = ""
    name: str = ""
    target: CurrencyAndAmount | None = None
    total_saved: CurrencyAndAmount | None = None
    saved_percentage: int = 0


class SavingsGoalList(StarlingModel):
    savings_goal_list: list[SavingsGoal] | None = None


class SavingsGoalRequest(StarlingModel):
    name: str
    currency: str
    target: CurrencyAndAmount
    base64_encoded_photo: str = Field("", alias="base64EncodedPhoto")


class SavingsGoalResponse(StarlingModel):
    """Reply to creating or updating a savings goal."""

    uid: str = Field("", alias="savingsGoalUid")
    success: bool = False
    errors: list[ErrorDetail] = Field(default_factory=list)


class SavingsGoalTransferResponse(StarlingModel):
    """Reply to moving money into or out of a savings goal."""

    uid: str = Field("", alias="transferUid")
    success: bool = False
    errors: list[ErrorDetail] = Field(default_factory=list)


class SavingsGoalPhoto(StarlingModel):
    base64_encoded_photo: str = Field("", alias="base64EncodedPhoto")


class TopUpRequest(StarlingModel):
    amount: CurrencyAndAmount


class WithdrawalRequest(StarlingModel):
    amount: CurrencyAndAmount
