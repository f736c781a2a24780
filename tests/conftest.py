# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for PropBot testing.

This module provides convenient factories for tenants, payments and
properties so tests only spell out the fields they care about.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Tuple

import pytest

from propbot.core.base import Payment, Property, Tenant
from propbot.core.primitives import (
    PaymentMethodEnum,
    PropertyTypeEnum,
    RentStatusEnum,
)


# Tenant Utilities
def make_payment(
    on: str,
    amount: float,
    method: PaymentMethodEnum = PaymentMethodEnum.MOBILE_MONEY,
) -> Payment:
    """Create a payment dated ``on`` (YYYY-MM-DD)."""
    return Payment(date=date.fromisoformat(on), amount=amount, method=method)


def make_tenant(
    start: str = "2023-06-01",
    end: str = "2025-06-01",
    rent: float = 3000,
    payments: Iterable[Tuple[str, float]] = (),
    name: str = "Chanda Mwale",
    property_name: str = "Kalingalinga Complex",
    unit: str = "A1",
    phone: str = "+260971000001",
    rent_status: RentStatusEnum = RentStatusEnum.PENDING,
    status_override: Optional[RentStatusEnum] = None,
) -> Tenant:
    """
    Create a tenant for testing.

    Example:
        >>> tenant = make_tenant(payments=[("2024-07-10", 3000)])
        >>> len(tenant.payment_history)
        1
    """
    return Tenant(
        name=name,
        property_name=property_name,
        unit=unit,
        phone=phone,
        email="tenant@example.com",
        rent_amount=rent,
        lease_start_date=date.fromisoformat(start),
        lease_end_date=date.fromisoformat(end),
        payment_history=tuple(make_payment(on, amount) for on, amount in payments),
        rent_status=rent_status,
        status_override=status_override,
    )


@pytest.fixture
def active_tenant() -> Tenant:
    """Lease well inside its term for July 2024, no payments."""
    return make_tenant(start="2023-06-01", end="2025-06-01", rent=3000)


@pytest.fixture
def ended_tenant() -> Tenant:
    """Lease that ended mid-January 2024."""
    return make_tenant(start="2023-01-15", end="2024-01-14", rent=2500)


@pytest.fixture
def sample_properties() -> list:
    return [
        Property(
            name="Kalingalinga Complex",
            location="Lusaka",
            units=10,
            property_type=PropertyTypeEnum.SHOPPING_COMPLEX,
        ),
        Property(
            name="Woodlands Apartments",
            location="Lusaka",
            units=5,
            property_type=PropertyTypeEnum.RESIDENTIAL_APARTMENTS,
        ),
    ]
