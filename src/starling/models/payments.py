# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Payment, payment order and direct debit mandate models."""

from __future__ import annotations

from pydantic import Field

from .base import StarlingModel


class PaymentAmount(StarlingModel):
    currency: str
    amount: float


class LocalPayment(StarlingModel):
    payment: PaymentAmount
    destination_account_uid: str
    reference: str = ""


class RecurrenceRule(StarlingModel):
    start_date: str = ""
    frequency: str = ""
    interval: int | None = None
    count: int | None = None
    until_date: str | None = None
    week_start: str = ""


class ScheduledPayment(StarlingModel):
    """A payment order: a previous immediate payment or a future/recurring one."""

    uid: str = Field("", alias="paymentOrderId")
    currency: str = ""
    amount: float = 0.0
    reference: str = ""
    receiving_contact_account_uid: str = Field("", alias="receivingContactAccountId")
    recipient_name: str = ""
    immediate: bool = False
    recurrence_rule: RecurrenceRule | None = None
    start_date: str = ""
    next_date: str = ""
    cancelled_at: str = ""
    payment_type: str = ""
    mandate_uid: str = Field("", alias="mandateId")


class DirectDebitMandate(StarlingModel):
    uid: str = ""
    reference: str = ""
    status: str = ""
    source: str = ""
    created: str = ""
    cancelled: str = ""
    originator_name: str = ""
    originator_uid: str = ""
