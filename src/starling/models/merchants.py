# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from .base import StarlingModel


class Merchant(StarlingModel):
    merchant_uid: str = ""
    name: str = ""
    website: str | None = None
    phone_number: str | None = None
    twitter_username: str | None = None


class MerchantLocation(StarlingModel):
    merchant_uid: str = ""
    merchant_location_uid: str = ""
    merchant_name: str = ""
    location_name: str = ""
    address: str | None = None
    google_place_id: str | None = None
    mastercard_merchant_category_code: int | None = None
