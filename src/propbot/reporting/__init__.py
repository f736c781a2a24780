# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
PropBot Reporting Module

Dashboard figures and report tables as pandas objects. Reports only read
tenant records; they never derive rent status themselves.
"""

from .financial import (
    monthly_collections,
    payment_history_frame,
    payment_method_breakdown,
)
from .occupancy import occupancy_by_property
from .overview import (
    OverviewStats,
    overview_stats,
    rent_status_breakdown,
    upcoming_expirations,
)
from .tenants import tenant_report

__all__ = [
    "OverviewStats",
    "overview_stats",
    "rent_status_breakdown",
    "upcoming_expirations",
    "payment_history_frame",
    "monthly_collections",
    "payment_method_breakdown",
    "occupancy_by_property",
    "tenant_report",
]
