# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import uuid

from pydantic import Field

from ..primitives.enums import PropertyTypeEnum
from ..primitives.model import Model
from ..primitives.types import PositiveInt


class Property(Model):
    """
    A managed property. Tenants reference it by name.
    """

    # Identity
    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(min_length=1)
    location: str = ""

    # Physical Characteristics
    units: PositiveInt = 0
    property_type: PropertyTypeEnum = PropertyTypeEnum.OTHER
