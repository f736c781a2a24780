# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime
import uuid

from pydantic import Field

from ..primitives.enums import PaymentMethodEnum
from ..primitives.model import Model
from ..primitives.types import PositiveAmount


class Payment(Model):
    """
    A rent payment received from a tenant.

    Payments are append-only: once logged on a tenant they are never edited
    or removed. ``method`` is informational and plays no part in status
    derivation.
    """

    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    date: datetime.date
    amount: PositiveAmount
    method: PaymentMethodEnum = PaymentMethodEnum.MOBILE_MONEY
