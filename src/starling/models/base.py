# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Base model for API schemas.

Field names are snake_case in Python and camelCase on the wire. Fields whose
wire name does not follow that rule declare an explicit alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StarlingModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_mapping(self) -> dict:
        """Wire representation (camelCase keys, unset optional fields dropped)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
