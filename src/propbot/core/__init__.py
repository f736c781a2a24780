# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropBot Core Framework

Foundational building blocks for rent tracking: primitives (settings, enums,
billing cycles) and the immutable tenant, payment and property values.
"""

from . import base, primitives
from .base import Payment, Property, Tenant
from .primitives import (
    BillingCycle,
    GlobalSettings,
    PaymentMethodEnum,
    PropertyTypeEnum,
    RentSettings,
    RentStatusEnum,
)

__all__ = [
    "base",
    "primitives",
    "BillingCycle",
    "GlobalSettings",
    "Payment",
    "PaymentMethodEnum",
    "Property",
    "PropertyTypeEnum",
    "RentSettings",
    "RentStatusEnum",
    "Tenant",
]
