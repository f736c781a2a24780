# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Shared base for PropBot records.

    Tenants, payments, properties, settings and message records are value
    objects: the tenant ledger replaces a stored record with an updated copy
    rather than editing it, so a record handed to a report or reminder cannot
    change underneath it.
    """

    model_config = ConfigDict(
        frozen=True,
        slots=True,
        extra="forbid",  # misspelled fields in imported records fail loudly
    )
