# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transaction and receipt models."""

from __future__ import annotations

from pydantic import Field

from .base import StarlingModel


class TransactionSummary(StarlingModel):
    uid: str = Field("", alias="id")
    currency: str = ""
    amount: float = 0.0
    direction: str = ""
    created: str = ""
    narrative: str = ""
    source: str = ""
    balance: float = 0.0


class ReceiptItem(StarlingModel):
    uid: str = Field("", alias="receiptItemUid")
    description: str = ""
    quantity: int = 0
    amount: float = 0.0
    tax: float = 0.0
    url: str | None = None


class ReceiptNote(StarlingModel):
    uid: str = Field("", alias="noteUid")
    description: str = ""
    url: str | None = None


class Receipt(StarlingModel):
    uid: str = Field("", alias="receiptUid")
    event_uid: str = ""
    metadata_source: str = ""
    receipt_identifier: str = ""
    merchant_identifier: str = ""
    merchant_address: str | None = None
    total_amount: float = 0.0
    total_tax: float = 0.0
    tax_reference: str | None = Field(None, alias="taxNumber")
    auth_code: str = ""
    card_last4: str = Field("", alias="cardLast4")
    provider_name: str | None = None
    items: list[ReceiptItem] = Field(default_factory=list)
    notes: list[ReceiptNote] = Field(default_factory=list)
