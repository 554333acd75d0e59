# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint groups exposed as attributes of Client."""

from .accounts import AccountsResource, AddressesResource, CardsResource, CustomersResource, UserResource
from .base import Resource
from .contacts import ContactsResource
from .direct_debits import DirectDebitsResource
from .merchants import MerchantsResource
from .payments import PaymentsResource, ReceiptsResource
from .savings import SavingsGoalsResource
from .transactions import TransactionsResource

__all__ = [
    "AccountsResource",
    "AddressesResource",
    "CardsResource",
    "ContactsResource",
    "CustomersResource",
    "DirectDebitsResource",
    "MerchantsResource",
    "PaymentsResource",
    "ReceiptsResource",
    "Resource",
    "SavingsGoalsResource",
    "TransactionsResource",
    "UserResource",
]
