# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..core.base.property import Property
from ..core.base.tenant import Tenant

OCCUPANCY_COLUMNS = ["property", "units", "occupied", "vacant", "rate"]


def occupancy_by_property(
    properties: Sequence[Property], tenants: Sequence[Tenant]
) -> pd.DataFrame:
    """
    Occupied and vacant units per property.

    A unit counts as occupied when a tenant record names the property.
    ``rate`` is a percentage (0-100); properties without units report 0.
    Vacancy never goes below zero even if more tenants than units are
    recorded against a property.
    """
    if not properties:
        return pd.DataFrame(columns=OCCUPANCY_COLUMNS)

    occupied = pd.Series(
        [t.property_name for t in tenants], dtype="object"
    ).value_counts()

    df = pd.DataFrame(
        {
            "property": [p.name for p in properties],
            "units": [p.units for p in properties],
        }
    )
    df["occupied"] = df["property"].map(occupied).fillna(0).astype(int)
    df["vacant"] = (df["units"] - df["occupied"]).clip(lower=0)
    df["rate"] = 0.0
    has_units = df["units"] > 0
    df.loc[has_units, "rate"] = df.loc[has_units, "occupied"] / df.loc[has_units, "units"] * 100
    return df[OCCUPANCY_COLUMNS]
