# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, field_validator

from .model import Model
from .types import DayOfMonth, DecimalPlaces, PositiveIntGe1


class RentSettings(Model):
    """
    Billing policy applied by the rent status engine.

    Rent is due on the 1st of each calendar month. Non-payment is tolerated
    through ``grace_period_days``; from the following day the tenant is
    reported as overdue. The same day also decides whether a lease starting
    mid-month owes rent for its first, partial month.

    Usage Examples:
        # Default policy (due on the 1st, overdue from the 6th)
        rent_settings = RentSettings()

        # Stricter landlord (overdue from the 4th)
        rent_settings = RentSettings(grace_period_days=3)
    """

    grace_period_days: DayOfMonth = Field(
        default=5,
        description="Last day of the month on which an unpaid cycle is still Pending.",
    )
    currency_code: str = Field(
        default="ZMW", description="ISO currency code used in rendered amounts."
    )
    amount_precision: DecimalPlaces = Field(
        default=2,
        description="Decimal places used when comparing payment sums against rent.",
    )

    @field_validator("currency_code")
    @classmethod
    def normalize_currency_code(cls, v: str) -> str:
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"currency_code must be a 3-letter ISO code, got {v!r}")
        return code


class ReportingSettings(Model):
    """Settings related to dashboard and report aggregation."""

    expiration_window_days: PositiveIntGe1 = Field(
        default=30, description="Look-ahead window for upcoming lease expirations."
    )
    trailing_months: PositiveIntGe1 = Field(
        default=6, description="Number of months in the collections history."
    )


class CommunicationSettings(Model):
    """Settings for composing tenant messages."""

    sender_name: str = Field(default="PropBot", min_length=1)
    date_format: str = Field(
        default="%Y-%m-%d", description="strftime format for date tags."
    )


class GlobalSettings(Model):
    """Global application settings

    Groups policy by functional area. Operations that need only one group
    accept that group directly; callers holding a GlobalSettings pass the
    relevant attribute.
    """

    rent: RentSettings = Field(default_factory=RentSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    communication: CommunicationSettings = Field(
        default_factory=CommunicationSettings
    )
