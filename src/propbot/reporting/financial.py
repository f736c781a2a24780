# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial report frames: payment history, monthly collections and the
split of collections by payment method.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import pandas as pd

from ..core.base.tenant import Tenant
from ..core.primitives.billing import month_periods
from ..core.primitives.enums import PaymentMethodEnum
from ..core.primitives.settings import ReportingSettings

PAYMENT_COLUMNS = ["date", "tenant_name", "property", "unit", "amount", "method"]


def payment_history_frame(tenants: Sequence[Tenant]) -> pd.DataFrame:
    """
    One row per payment across all tenants, newest first.

    Returns:
        DataFrame with columns date (datetime64), tenant_name, property, unit,
        amount, method.
    """
    rows = [
        {
            "date": payment.date,
            "tenant_name": tenant.name,
            "property": tenant.property_name,
            "unit": tenant.unit,
            "amount": payment.amount,
            "method": payment.method.value,
        }
        for tenant in tenants
        for payment in tenant.payment_history
    ]
    if not rows:
        return pd.DataFrame(columns=PAYMENT_COLUMNS)

    df = pd.DataFrame(rows, columns=PAYMENT_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df.sort_values(
        ["date", "tenant_name"], ascending=[False, True], kind="stable"
    ).reset_index(drop=True)


def monthly_collections(
    tenants: Sequence[Tenant],
    today: date,
    settings: Optional[ReportingSettings] = None,
) -> pd.Series:
    """
    Total collected per calendar month for the trailing months ending with
    today's month.

    Returns:
        Series indexed by monthly Period (oldest first), zero for months
        without payments.
    """
    settings = settings or ReportingSettings()
    periods = month_periods(today, settings.trailing_months)

    history = payment_history_frame(tenants)
    if history.empty:
        return pd.Series(0.0, index=periods, name="collected")

    by_month = history.groupby(history["date"].dt.to_period("M"))["amount"].sum()
    return by_month.reindex(periods, fill_value=0.0).astype(float).rename("collected")


def payment_method_breakdown(tenants: Sequence[Tenant]) -> pd.Series:
    """Total collected per payment method, every method present."""
    labels = [method.value for method in PaymentMethodEnum]
    history = payment_history_frame(tenants)
    if history.empty:
        return pd.Series(0.0, index=labels, name="amount")
    totals = history.groupby("method")["amount"].sum()
    return totals.reindex(labels, fill_value=0.0).astype(float).rename("amount")
