# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""API schema exports."""

from .account import Account, Address, AddressHistory, Balance, Card, Customer, Identity
from .base import StarlingModel
from .common import CurrencyAndAmount, DateRange, ErrorDetail, HalLink
from .contacts import Contact, ContactAccount
from .merchants import Merchant, MerchantLocation
from .payments import DirectDebitMandate, LocalPayment, PaymentAmount, RecurrenceRule, ScheduledPayment
from .savings import (
    SavingsGoal,
    SavingsGoalList,
    SavingsGoalPhoto,
    SavingsGoalRequest,
    SavingsGoalResponse,
    SavingsGoalTransferResponse,
    TopUpRequest,
    WithdrawalRequest,
)
from .transactions import Receipt, ReceiptItem, ReceiptNote, TransactionSummary
from .webhook import MastercardTransactionPayload, MerchantPosData, WebhookContent, WebhookPayload

__all__ = [
    "Account",
    "Address",
    "AddressHistory",
    "Balance",
    "Card",
    "Contact",
    "ContactAccount",
    "CurrencyAndAmount",
    "Customer",
    "DateRange",
    "DirectDebitMandate",
    "ErrorDetail",
    "HalLink",
    "Identity",
    "LocalPayment",
    "MastercardTransactionPayload",
    "Merchant",
    "MerchantLocation",
    "MerchantPosData",
    "PaymentAmount",
    "Receipt",
    "ReceiptItem",
    "ReceiptNote",
    "RecurrenceRule",
    "SavingsGoal",
    "SavingsGoalList",
    "SavingsGoalPhoto",
    "SavingsGoalRequest",
    "SavingsGoalResponse",
    "SavingsGoalTransferResponse",
    "ScheduledPayment",
    "StarlingModel",
    "TopUpRequest",
    "TransactionSummary",
    "WebhookContent",
    "WebhookPayload",
    "WithdrawalRequest",
]
