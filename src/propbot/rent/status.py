# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent status derivation.

Classifies a tenant as Paid, Pending or Overdue for the billing cycle that
matters on a given day. The computation is pure: it reads the lease window,
rent amount and payment history, takes "today" as an argument, and never
touches storage. The tenant ledger persists the result.

Rules, in order of precedence:

1. Lease ended (today after the lease end date): only the final cycle counts,
   from the 1st of the ending month through the end date. Short of rent is
   Overdue, otherwise Paid. A lapsed lease is never Pending and later
   payments cannot clear it.
2. Current cycle paid: payments from the 1st of this month through today
   covering the rent make the tenant Paid. Partial payments accumulate.
3. Grace period elapsed: when the obligation for this month has started (the
   lease began before this month, or on or before the grace day of this
   month) and today is past the grace day, the tenant is Overdue.
4. Otherwise Pending.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable, Optional

from ..core.primitives.billing import BillingCycle, cycle_start
from ..core.primitives.enums import RentStatusEnum, StatusRuleEnum
from ..core.primitives.model import Model
from ..core.primitives.settings import RentSettings

if TYPE_CHECKING:
    from ..core.base.payment import Payment
    from ..core.base.tenant import Tenant

logger = logging.getLogger(__name__)


class RentStatusResult(Model):
    """
    Outcome of a status derivation together with the figures behind it.

    Attributes:
        status: Derived rent status.
        rule: The rule that decided the status.
        cycle: Billing cycle whose payments were summed.
        amount_due: Rent due for the cycle.
        amount_paid: Sum of payments dated within the cycle.
        obligation_started: Whether rent is owed for the cycle at all. False
            for the first partial month of a lease starting after the grace
            day, and before a lease begins.
    """

    status: RentStatusEnum
    rule: StatusRuleEnum
    cycle: BillingCycle
    amount_due: float
    amount_paid: float
    obligation_started: bool = True

    @property
    def shortfall(self) -> float:
        """Rent still owed for the cycle; zero once covered or when nothing is owed."""
        if not self.obligation_started:
            return 0.0
        return max(self.amount_due - self.amount_paid, 0.0)


def _covers(paid: float, due: float, precision: int) -> bool:
    return round(paid, precision) >= round(due, precision)


def _obligation_started(lease_start_date: date, today: date, grace_day: int) -> bool:
    """Whether the lease owes rent for today's month."""
    month_start = cycle_start(today)
    if lease_start_date < month_start:
        return True
    return cycle_start(lease_start_date) == month_start and lease_start_date.day <= grace_day


def explain_rent_status(
    tenant: "Tenant",
    today: date,
    settings: Optional[RentSettings] = None,
) -> RentStatusResult:
    """
    Derive a tenant's rent status and report the cycle figures used.

    Args:
        tenant: Any object exposing ``rent_amount``, ``lease_start_date``,
            ``lease_end_date`` and ``payment_history``.
        today: Reference date, normally the current date.
        settings: Billing policy; defaults to ``RentSettings()``.

    Returns:
        RentStatusResult with the status, deciding rule, cycle and amounts.
    """
    settings = settings or RentSettings()
    payments: Iterable["Payment"] = tenant.payment_history
    due = float(tenant.rent_amount)
    precision = settings.amount_precision

    started = True
    if today > tenant.lease_end_date:
        cycle = BillingCycle.final(tenant.lease_end_date)
        paid = cycle.total_paid(payments)
        status = (
            RentStatusEnum.PAID
            if _covers(paid, due, precision)
            else RentStatusEnum.OVERDUE
        )
        rule = StatusRuleEnum.LEASE_ENDED
    else:
        cycle = BillingCycle.current(today)
        paid = cycle.total_paid(payments)
        started = _obligation_started(
            tenant.lease_start_date, today, settings.grace_period_days
        )
        if _covers(paid, due, precision):
            status, rule = RentStatusEnum.PAID, StatusRuleEnum.CURRENT_CYCLE_PAID
        elif started and today.day > settings.grace_period_days:
            status, rule = RentStatusEnum.OVERDUE, StatusRuleEnum.GRACE_PERIOD_ELAPSED
        else:
            status, rule = RentStatusEnum.PENDING, StatusRuleEnum.DEFAULT

    logger.debug(
        f"Rent status {status.value} by {rule.value}: paid {paid:.2f} of {due:.2f} "
        f"in cycle {cycle.start}..{cycle.end}"
    )
    return RentStatusResult(
        status=status,
        rule=rule,
        cycle=cycle,
        amount_due=due,
        amount_paid=paid,
        obligation_started=started,
    )


def compute_rent_status(
    tenant: "Tenant",
    today: date,
    settings: Optional[RentSettings] = None,
) -> RentStatusEnum:
    """
    Compute a tenant's rent status for the cycle relevant on ``today``.

    Example:
        ```python
        status = compute_rent_status(tenant, today=date(2024, 7, 6))
        if status is RentStatusEnum.OVERDUE:
            ...
        ```
    """
    return explain_rent_status(tenant, today, settings).status


def effective_rent_status(
    tenant: "Tenant",
    today: date,
    settings: Optional[RentSettings] = None,
) -> RentStatusEnum:
    """The manual override when the tenant carries one, else the derived status."""
    override = getattr(tenant, "status_override", None)
    if override is not None:
        return override
    return compute_rent_status(tenant, today, settings)
