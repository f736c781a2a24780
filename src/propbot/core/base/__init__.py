# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core value types: tenants, their payments, and properties.
"""

from .payment import Payment
from .property import Property
from .tenant import Tenant

__all__ = [
    "Payment",
    "Property",
    "Tenant",
]
