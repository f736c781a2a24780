# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from ..core.base.tenant import Tenant
from ..core.primitives.enums import RentStatusEnum

TENANT_COLUMNS = [
    "name",
    "property",
    "unit",
    "phone",
    "email",
    "rent_status",
    "rent_amount",
    "lease_start",
    "lease_end",
]


def tenant_report(
    tenants: Sequence[Tenant], status: Optional[RentStatusEnum] = None
) -> pd.DataFrame:
    """Tenant table for the reports page, optionally limited to one status."""
    selected = [t for t in tenants if status is None or t.effective_status == status]
    if not selected:
        return pd.DataFrame(columns=TENANT_COLUMNS)

    return pd.DataFrame(
        [
            {
                "name": t.name,
                "property": t.property_name,
                "unit": t.unit,
                "phone": t.phone,
                "email": t.email,
                "rent_status": t.effective_status.value,
                "rent_amount": t.rent_amount,
                "lease_start": t.lease_start_date,
                "lease_end": t.lease_end_date,
            }
            for t in selected
        ],
        columns=TENANT_COLUMNS,
    )
