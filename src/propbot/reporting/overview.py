# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Dashboard overview figures.

Reads the persisted (effective) rent status of each tenant; nothing here
re-derives status, so the dashboard always agrees with the tenant list.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence

import pandas as pd

from ..core.base.property import Property
from ..core.base.tenant import Tenant
from ..core.primitives.billing import BillingCycle
from ..core.primitives.enums import RentStatusEnum
from ..core.primitives.model import Model
from ..core.primitives.settings import ReportingSettings


class OverviewStats(Model):
    """Headline figures for the landlord dashboard."""

    total_units: int
    occupied_units: int
    occupancy_rate: float  # percent, 0-100
    rent_collected: float  # payments dated in the current calendar month
    rent_pending: float  # rent of tenants not yet Paid
    rent_due: float  # rent of leases overlapping the current month
    overdue_tenants: int
    upcoming_expirations: int


def _leases_overlapping(tenants: Sequence[Tenant], cycle: BillingCycle) -> List[Tenant]:
    return [
        t
        for t in tenants
        if t.lease_start_date <= cycle.end and t.lease_end_date >= cycle.start
    ]


def upcoming_expirations(
    tenants: Sequence[Tenant],
    today: date,
    settings: Optional[ReportingSettings] = None,
) -> List[Tenant]:
    """Tenants whose lease ends within the look-ahead window, soonest first."""
    settings = settings or ReportingSettings()
    horizon = today + timedelta(days=settings.expiration_window_days)
    expiring = [t for t in tenants if today <= t.lease_end_date <= horizon]
    return sorted(expiring, key=lambda t: t.lease_end_date)


def rent_status_breakdown(tenants: Sequence[Tenant]) -> pd.Series:
    """
    Number of tenants per effective rent status.

    Every status appears in the result, with zero where no tenant has it, in
    the order Paid, Pending, Overdue.
    """
    labels = [status.value for status in RentStatusEnum]
    counts = pd.Series(
        [t.effective_status.value for t in tenants], dtype="object"
    ).value_counts()
    return counts.reindex(labels, fill_value=0).astype(int).rename("tenants")


def overview_stats(
    tenants: Sequence[Tenant],
    properties: Sequence[Property],
    today: date,
    settings: Optional[ReportingSettings] = None,
) -> OverviewStats:
    """
    Compute the dashboard overview as of ``today``.

    Args:
        tenants: All current tenant records.
        properties: All managed properties.
        today: Reference date for the current month and expiration window.
        settings: Reporting settings (expiration look-ahead).

    Returns:
        OverviewStats for the dashboard cards.
    """
    settings = settings or ReportingSettings()
    month = BillingCycle.for_month(today)

    total_units = sum(p.units for p in properties)
    occupied_units = len(tenants)
    occupancy_rate = (
        round(occupied_units / total_units * 100, 1) if total_units > 0 else 0.0
    )

    rent_collected = sum(month.total_paid(t.payment_history) for t in tenants)
    rent_pending = sum(
        t.rent_amount
        for t in tenants
        if t.effective_status in (RentStatusEnum.PENDING, RentStatusEnum.OVERDUE)
    )
    rent_due = sum(t.rent_amount for t in _leases_overlapping(tenants, month))
    overdue = sum(1 for t in tenants if t.effective_status == RentStatusEnum.OVERDUE)

    return OverviewStats(
        total_units=total_units,
        occupied_units=occupied_units,
        occupancy_rate=occupancy_rate,
        rent_collected=float(rent_collected),
        rent_pending=float(rent_pending),
        rent_due=float(rent_due),
        overdue_tenants=overdue,
        upcoming_expirations=len(upcoming_expirations(tenants, today, settings)),
    )
