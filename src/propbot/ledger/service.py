# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant ledger service.

Owns every mutation of tenant records and re-derives ``rent_status`` after
each one: tenant creation, lease or rent edits, and logged payments. Status
derivation itself lives in ``propbot.rent``; this module only fetches,
recomputes and stores.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Callable, Iterable, List, Optional

import pandas as pd

from ..core.base.payment import Payment
from ..core.base.tenant import Tenant
from ..core.primitives.enums import RentStatusEnum
from ..core.primitives.settings import RentSettings
from ..rent.status import compute_rent_status
from .payments import PaymentLedger
from .repository import InMemoryTenantRepository, TenantRepository

logger = logging.getLogger(__name__)

# Fields that may be changed through update_tenant. Payment history is
# append-only and derived status is never set directly.
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "property_name",
        "unit",
        "phone",
        "email",
        "rent_amount",
        "lease_start_date",
        "lease_end_date",
        "payment_history_summary",
    }
)


class TenantLedger:
    """
    Application service over a tenant repository.

    Args:
        repository: Tenant store; defaults to an in-memory repository.
        settings: Billing policy passed to the status engine.
        clock: Callable returning "today"; injected for deterministic tests.

    Example:
        ```python
        ledger = TenantLedger(clock=lambda: date(2024, 7, 6))
        tenant = ledger.add_tenant(Tenant(name="Chanda", rent_amount=3000, ...))
        tenant = ledger.log_payment(tenant.uid, Payment(date=date(2024, 7, 2), amount=3000))
        assert tenant.rent_status is RentStatusEnum.PAID
        ```
    """

    def __init__(
        self,
        repository: Optional[TenantRepository] = None,
        settings: Optional[RentSettings] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.repository = repository if repository is not None else InMemoryTenantRepository()
        self.settings = settings or RentSettings()
        self.clock = clock
        self.payments = PaymentLedger()
        self.payments.rebuild(self.repository.list())

    def _recompute(self, tenant: Tenant, today: Optional[date] = None) -> Tenant:
        today = today or self.clock()
        status = compute_rent_status(tenant, today, self.settings)
        if status != tenant.rent_status:
            logger.debug(
                f"Tenant {tenant.name} status {tenant.rent_status.value} -> {status.value}"
            )
        return tenant.with_status(status)

    def _check_new_payments(self, payments: Iterable[Payment]) -> None:
        """Reject payment ids repeated in ``payments`` or already indexed."""
        seen = set()
        for payment in payments:
            if payment.uid in seen or self.payments.has_payment(payment.uid):
                raise ValueError(f"Payment {payment.uid} already logged")
            seen.add(payment.uid)

    def get_tenant(self, uid: uuid.UUID) -> Tenant:
        return self.repository.get(uid)

    def list_tenants(self, status: Optional[RentStatusEnum] = None) -> List[Tenant]:
        """All tenants, newest first, optionally filtered by effective status."""
        tenants = self.repository.list()
        if status is None:
            return tenants
        return [t for t in tenants if t.effective_status == status]

    def add_tenant(self, tenant: Tenant) -> Tenant:
        """Store a new tenant with its status derived from the supplied history."""
        if tenant.uid in self.repository:
            raise ValueError(f"Tenant {tenant.uid} already exists")
        self._check_new_payments(tenant.payment_history)
        stored = self._recompute(tenant)
        self.repository.add(stored)
        self.payments.record_tenant(stored)
        logger.info(f"Added tenant {stored.name} ({stored.uid})")
        return stored

    def update_tenant(self, uid: uuid.UUID, **changes) -> Tenant:
        """
        Merge ``changes`` into a tenant and re-derive its status.

        Raises:
            KeyError: If the tenant does not exist.
            ValueError: If a field is not editable or the result is invalid.
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {sorted(unknown)}")

        current = self.repository.get(uid)
        # Re-validate through the constructor so lease ordering is enforced
        updated = Tenant.model_validate({**current.model_dump(), **changes})
        stored = self._recompute(updated)
        self.repository.save(stored)

        # Name, property or unit may have changed on the indexed rows
        self.payments.remove_tenant(uid)
        self.payments.record_tenant(stored)
        logger.info(f"Updated tenant {stored.name}: {sorted(changes)}")
        return stored

    def log_payment(self, uid: uuid.UUID, payment: Payment) -> Tenant:
        """Append a payment to the tenant's history and re-derive its status."""
        current = self.repository.get(uid)
        self._check_new_payments([payment])

        stored = self._recompute(current.with_payment(payment))
        self.repository.save(stored)
        self.payments.record(stored, payment)
        logger.info(
            f"Logged payment of {payment.amount:.2f} for {stored.name} on {payment.date}"
        )
        return stored

    def set_status_override(
        self, uid: uuid.UUID, status: Optional[RentStatusEnum]
    ) -> Tenant:
        """Pin a manual status on a tenant, or clear it with ``None``."""
        current = self.repository.get(uid)
        stored = current.model_copy(update={"status_override": status})
        self.repository.save(stored)
        if status is None:
            logger.info(f"Cleared status override for {stored.name}")
        else:
            logger.info(f"Status of {stored.name} overridden to {status.value}")
        return stored

    def refresh_statuses(self, today: Optional[date] = None) -> List[Tenant]:
        """Re-derive every tenant's status, e.g. after a month rollover."""
        today = today or self.clock()
        refreshed = []
        for tenant in self.repository.list():
            stored = self._recompute(tenant, today)
            if stored.rent_status != tenant.rent_status:
                self.repository.save(stored)
            refreshed.append(stored)
        logger.info(f"Refreshed rent status for {len(refreshed)} tenants as of {today}")
        return refreshed

    def delete_tenant(self, uid: uuid.UUID) -> None:
        tenant = self.repository.get(uid)
        self.repository.delete(uid)
        self.payments.remove_tenant(uid)
        logger.info(f"Deleted tenant {tenant.name} ({uid})")

    def all_payments(self) -> pd.DataFrame:
        """Every logged payment enriched with tenant name, property and unit."""
        return self.payments.to_dataframe()
