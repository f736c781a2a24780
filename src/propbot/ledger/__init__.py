# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant ledger: storage interface, payment index and the service that keeps
derived rent status current.
"""

from .payments import PaymentLedger
from .repository import InMemoryTenantRepository, TenantRepository
from .service import EDITABLE_FIELDS, TenantLedger

__all__ = [
    "EDITABLE_FIELDS",
    "InMemoryTenantRepository",
    "PaymentLedger",
    "TenantLedger",
    "TenantRepository",
]
