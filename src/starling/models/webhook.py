# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Inbound webhook payload models."""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from .base import StarlingModel
from .common import CurrencyAndAmount


class WebhookContent(StarlingModel):
    class_: str = Field("", alias="class")
    transaction_uid: str = ""
    amount: float = 0.0
    source_currency: str = ""
    source_amount: float = 0.0
    counter_party: str = ""
    reference: str = ""
    type: str = ""
    for_customer: str = ""


class WebhookPayload(StarlingModel):
    webhook_notification_uid: str = ""
    timestamp: dt.datetime | None = None
    content: WebhookContent = Field(default_factory=WebhookContent)
    account_holder_uid: str = ""
    webhook_type: str = ""
    customer_uid: str = ""
    uid: str = ""


class MerchantPosData(StarlingModel):
    pos_timestamp: str = ""  # as reported at the point of sale
    card_last4: str = Field("", alias="cardLast4")
    authorisation_code: str = ""
    country: str = ""  # ISO-3
    merchant_identifier: str = ""  # Mastercard MID


class MastercardTransactionPayload(StarlingModel):
    webhook_notification_uid: str = ""
    customer_uid: str = ""
    webhook_type: str = ""
    event_uid: str = ""
    transaction_amount: CurrencyAndAmount | None = None
    source_amount: CurrencyAndAmount | None = None
    direction: str = ""
    description: str = ""
    merchant_uid: str = ""
    merchant_location_uid: str = ""
    status: str = ""
    transaction_method: str = ""
    transaction_timestamp: str = ""
    merchant_pos_data: MerchantPosData | None = None
