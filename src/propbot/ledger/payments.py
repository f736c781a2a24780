# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DuckDB-backed payment ledger.

Keeps one row per logged payment, enriched with the tenant's name, property
and unit, in an in-memory DuckDB table. The tenant ledger service uses it to
reject payment ids that are already logged to any tenant and to materialize
the cross-tenant payment list. It is a derived index: it can always be
rebuilt from the tenants' payment histories.
"""

from __future__ import annotations

import logging
from typing import Iterable

import duckdb
import pandas as pd

from ..core.base.payment import Payment
from ..core.base.tenant import Tenant

logger = logging.getLogger(__name__)

_COLUMNS = [
    "payment_id",
    "date",
    "amount",
    "method",
    "tenant_id",
    "tenant_name",
    "property",
    "unit",
]


class PaymentLedger:
    """
    In-memory DuckDB table of payments across all tenants.

    Example:
        ```python
        ledger = PaymentLedger()
        ledger.record(tenant, payment)
        assert ledger.has_payment(payment.uid)
        history_df = ledger.to_dataframe()
        ```
    """

    def __init__(self):
        """Initialize the in-memory DuckDB connection and create the payments table."""
        self.con = duckdb.connect(database=":memory:", read_only=False)
        self.table_name = "payments"

        create_table_sql = f"""
        CREATE TABLE {self.table_name} (
            payment_id VARCHAR PRIMARY KEY,
            date DATE NOT NULL,
            amount DOUBLE NOT NULL,
            method VARCHAR(20) NOT NULL,
            tenant_id VARCHAR NOT NULL,
            tenant_name VARCHAR,
            property VARCHAR,
            unit VARCHAR
        );
        """
        self.con.execute(create_table_sql)
        logger.debug(f"DuckDB table '{self.table_name}' created in memory.")

    def record(self, tenant: Tenant, payment: Payment) -> None:
        """Insert one payment attributed to ``tenant``."""
        self.con.execute(
            f"INSERT INTO {self.table_name} VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                str(payment.uid),
                payment.date,
                float(payment.amount),
                payment.method.value,
                str(tenant.uid),
                tenant.name,
                tenant.property_name,
                tenant.unit,
            ],
        )

    def record_tenant(self, tenant: Tenant) -> None:
        """Insert every payment in the tenant's history."""
        for payment in tenant.payment_history:
            self.record(tenant, payment)

    def remove_tenant(self, tenant_id) -> None:
        self.con.execute(
            f"DELETE FROM {self.table_name} WHERE tenant_id = ?", [str(tenant_id)]
        )

    def rebuild(self, tenants: Iterable[Tenant]) -> None:
        """Discard all rows and re-index from tenant histories."""
        self.clear()
        for tenant in tenants:
            self.record_tenant(tenant)

    def clear(self) -> None:
        self.con.execute(f"DELETE FROM {self.table_name}")
        logger.debug("Cleared all records from DuckDB payment ledger")

    def to_dataframe(self) -> pd.DataFrame:
        """
        Materialize all payments, newest first.

        Returns:
            DataFrame with columns payment_id, date, amount, method, tenant_id,
            tenant_name, property, unit. ``date`` is datetime64.
        """
        df = self.con.execute(
            f"SELECT * FROM {self.table_name} ORDER BY date DESC, tenant_name"
        ).df()
        if df.empty:
            return pd.DataFrame(columns=_COLUMNS)
        df["date"] = pd.to_datetime(df["date"])
        return df

    def has_payment(self, payment_id) -> bool:
        """Whether a payment with this id is already indexed."""
        result = self.con.execute(
            f"SELECT COUNT(*) FROM {self.table_name} WHERE payment_id = ?",
            [str(payment_id)],
        ).fetchone()
        return result[0] > 0

    def __len__(self) -> int:
        return self.con.execute(f"SELECT COUNT(*) FROM {self.table_name}").fetchone()[0]
