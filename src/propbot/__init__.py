# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging
import warnings

# Silence pandas FutureWarning related to monthly frequency alias 'M'.
# Billing cycles and collection reports use monthly Periods throughout.
warnings.filterwarnings(
    "ignore",
    message=".*'M' is deprecated and will be removed in a future version.*",
    category=FutureWarning,
)

"""
PropBot - Rent tracking for landlords

Tracks tenants, leases and rent payments, derives each tenant's rent status
for the current billing cycle, and produces dashboard and report figures.

Key Entry Points:
- propbot.rent.compute_rent_status() - Paid / Pending / Overdue for a tenant
- propbot.ledger.TenantLedger - Tenant store service keeping status current
- propbot.reporting.* - Dashboard overview and report tables
- propbot.communication.* - Reminder templates and message log

Example Usage:
    ```python
    from datetime import date
    from propbot.core.base import Payment, Tenant
    from propbot.rent import compute_rent_status

    tenant = Tenant(
        name="Chanda Mwale",
        rent_amount=3000,
        lease_start_date=date(2023, 6, 1),
        lease_end_date=date(2025, 6, 1),
    )
    compute_rent_status(tenant, today=date(2024, 7, 6))  # RentStatusEnum.OVERDUE
    ```
"""

# Add a NullHandler to the package logger so applications that don't
# configure logging see no "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "communication",
    "core",
    "ledger",
    "rent",
    "reporting",
]


_LAZY_MODULES = {
    "communication": "propbot.communication",
    "core": "propbot.core",
    "ledger": "propbot.ledger",
    "rent": "propbot.rent",
    "reporting": "propbot.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propbot' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
