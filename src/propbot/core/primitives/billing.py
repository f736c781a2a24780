# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING, Iterable, List, Union

import pandas as pd
from pydantic import field_validator, model_validator

from .model import Model

if TYPE_CHECKING:
    from ..base.payment import Payment


def cycle_start(day: date) -> date:
    """First calendar day of the month containing ``day``."""
    return day.replace(day=1)


def month_end(day: date) -> date:
    """Last calendar day of the month containing ``day``."""
    return pd.Period(day, freq="M").end_time.date()


def month_periods(end: Union[date, pd.Period], count: int) -> pd.PeriodIndex:
    """Monthly PeriodIndex of ``count`` months, oldest first, ending at ``end``."""
    return pd.period_range(end=pd.Period(end, freq="M"), periods=count, freq="M")


class BillingCycle(Model):
    """
    An inclusive window of calendar days over which rent payments are summed.

    A full cycle spans a calendar month. Truncated cycles occur in two places:
    the current cycle ends at "today", and a lease's final cycle ends on the
    lease end date, so payments recorded after either bound never count.

    Attributes:
        start: First day of the window (always the 1st of a month).
        end: Last day of the window, inclusive, within the same month.

    Examples:
        >>> from datetime import date
        >>> cycle = BillingCycle.current(date(2024, 7, 20))
        >>> cycle.start, cycle.end
        (datetime.date(2024, 7, 1), datetime.date(2024, 7, 20))
        >>> cycle.contains(date(2024, 7, 21))
        False
    """

    start: date
    end: date

    @field_validator("start")
    @classmethod
    def check_start_is_first(cls, v: date) -> date:
        if v.day != 1:
            raise ValueError("BillingCycle.start must be the first day of a month")
        return v

    @model_validator(mode="after")
    def check_same_month(self) -> "BillingCycle":
        if self.end < self.start:
            raise ValueError("BillingCycle.end must be on or after start")
        if (self.end.year, self.end.month) != (self.start.year, self.start.month):
            raise ValueError("BillingCycle must not span more than one calendar month")
        return self

    @classmethod
    def current(cls, today: date) -> "BillingCycle":
        """Cycle from the 1st of today's month through today."""
        return cls(start=cycle_start(today), end=today)

    @classmethod
    def final(cls, lease_end_date: date) -> "BillingCycle":
        """Last cycle of a lease: the 1st of the ending month through the end date."""
        return cls(start=cycle_start(lease_end_date), end=lease_end_date)

    @classmethod
    def for_month(cls, month: Union[date, pd.Period]) -> "BillingCycle":
        """The complete calendar month containing ``month``."""
        first = pd.Period(month, freq="M").start_time.date()
        return cls(start=first, end=month_end(first))

    def contains(self, day: date) -> bool:
        """Whether ``day`` lies within the window, bounds inclusive."""
        return self.start <= day <= self.end

    def total_paid(self, payments: Iterable["Payment"]) -> float:
        """Sum of the amounts of payments dated within this cycle."""
        return math.fsum(p.amount for p in self.payments_within(payments))

    def payments_within(self, payments: Iterable["Payment"]) -> List["Payment"]:
        """Payments dated within this cycle, in their original order."""
        return [p for p in payments if self.contains(p.date)]
