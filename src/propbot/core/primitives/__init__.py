# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropBot Core Primitives

Essential building blocks shared by the rent engine, the tenant ledger and
reporting. Handles billing-cycle arithmetic, settings, enums and validation.
"""

from .billing import BillingCycle, cycle_start, month_end, month_periods
from .enums import (
    MessageMethodEnum,
    PaymentMethodEnum,
    PropertyTypeEnum,
    RentStatusEnum,
    StatusRuleEnum,
)
from .model import Model
from .settings import (
    CommunicationSettings,
    GlobalSettings,
    RentSettings,
    ReportingSettings,
)
from .types import (
    DayOfMonth,
    DecimalPlaces,
    PositiveAmount,
    PositiveInt,
    PositiveIntGe1,
)
from .validation import ValidationMixin, validate_lease_window

__all__ = [
    # Core models
    "Model",
    "BillingCycle",
    # Billing helpers
    "cycle_start",
    "month_end",
    "month_periods",
    # Settings
    "GlobalSettings",
    "RentSettings",
    "ReportingSettings",
    "CommunicationSettings",
    # Enums
    "RentStatusEnum",
    "StatusRuleEnum",
    "PaymentMethodEnum",
    "PropertyTypeEnum",
    "MessageMethodEnum",
    # Types
    "PositiveInt",
    "PositiveIntGe1",
    "DecimalPlaces",
    "PositiveAmount",
    "DayOfMonth",
    # Validation
    "ValidationMixin",
    "validate_lease_window",
]
