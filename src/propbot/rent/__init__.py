# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent status engine.

Pure functions deriving Paid / Pending / Overdue from lease dates, rent
amount and payment history.
"""

from .status import (
    RentStatusResult,
    compute_rent_status,
    effective_rent_status,
    explain_rent_status,
)

__all__ = [
    "RentStatusResult",
    "compute_rent_status",
    "effective_rent_status",
    "explain_rent_status",
]
