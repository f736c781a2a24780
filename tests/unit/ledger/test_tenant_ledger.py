# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from propbot.core.primitives import RentSettings, RentStatusEnum
from propbot.ledger import InMemoryTenantRepository, TenantLedger
from tests.conftest import make_payment, make_tenant

TODAY = date(2024, 7, 6)


@pytest.fixture
def ledger() -> TenantLedger:
    return TenantLedger(clock=lambda: TODAY)


def test_add_tenant_derives_status(ledger):
    stored = ledger.add_tenant(make_tenant())
    assert stored.rent_status == RentStatusEnum.OVERDUE
    assert ledger.get_tenant(stored.uid) == stored


def test_add_tenant_with_history_is_indexed(ledger):
    stored = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    assert stored.rent_status == RentStatusEnum.PAID
    assert len(ledger.all_payments()) == 1


def test_new_lease_starting_mid_month_is_pending(ledger):
    stored = ledger.add_tenant(make_tenant(start="2024-07-20", end="2025-07-19"))
    assert stored.rent_status == RentStatusEnum.PENDING


def test_log_payment_recomputes_status(ledger):
    tenant = ledger.add_tenant(make_tenant(rent=3000))

    tenant = ledger.log_payment(tenant.uid, make_payment("2024-07-02", 1000))
    assert tenant.rent_status == RentStatusEnum.OVERDUE

    tenant = ledger.log_payment(tenant.uid, make_payment("2024-07-05", 2000))
    assert tenant.rent_status == RentStatusEnum.PAID
    assert len(tenant.payment_history) == 2
    assert ledger.all_payments()["amount"].sum() == 3000.0


def test_log_same_payment_twice_raises(ledger):
    tenant = ledger.add_tenant(make_tenant())
    payment = make_payment("2024-07-02", 1000)
    ledger.log_payment(tenant.uid, payment)
    with pytest.raises(ValueError, match="already logged"):
        ledger.log_payment(tenant.uid, payment)


def test_payment_logged_to_another_tenant_is_rejected_without_writes(ledger):
    first = ledger.add_tenant(make_tenant(name="Chanda Mwale", unit="A1"))
    second = ledger.add_tenant(make_tenant(name="Mutale Banda", unit="B2"))
    payment = make_payment("2024-07-02", 3000)
    ledger.log_payment(first.uid, payment)

    with pytest.raises(ValueError, match="already logged"):
        ledger.log_payment(second.uid, payment)

    untouched = ledger.get_tenant(second.uid)
    assert untouched.payment_history == ()
    assert untouched.rent_status == RentStatusEnum.OVERDUE
    assert len(ledger.all_payments()) == 1


def test_add_tenant_with_repeated_payment_is_rejected_without_writes(ledger):
    payment = make_payment("2024-07-02", 3000)
    tenant = make_tenant().with_payment(payment).with_payment(payment)

    with pytest.raises(ValueError, match="already logged"):
        ledger.add_tenant(tenant)

    assert tenant.uid not in ledger.repository
    assert ledger.all_payments().empty


def test_add_tenant_with_already_indexed_payment_is_rejected(ledger):
    existing = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    reused = make_tenant(name="Mutale Banda").with_payment(existing.payment_history[0])

    with pytest.raises(ValueError, match="already logged"):
        ledger.add_tenant(reused)

    assert len(ledger.list_tenants()) == 1
    assert len(ledger.all_payments()) == 1


def test_add_same_tenant_twice_is_rejected(ledger):
    tenant = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    with pytest.raises(ValueError, match="already exists"):
        ledger.add_tenant(tenant)
    assert len(ledger.all_payments()) == 1


def test_log_payment_unknown_tenant(ledger):
    with pytest.raises(KeyError):
        ledger.log_payment(uuid.uuid4(), make_payment("2024-07-02", 1000))


def test_update_rent_amount_recomputes_status(ledger):
    tenant = ledger.add_tenant(make_tenant(rent=3000, payments=[("2024-07-02", 2500)]))
    assert tenant.rent_status == RentStatusEnum.OVERDUE

    updated = ledger.update_tenant(tenant.uid, rent_amount=2500)
    assert updated.rent_status == RentStatusEnum.PAID
    assert ledger.get_tenant(tenant.uid).rent_amount == 2500


def test_update_lease_dates_recomputes_status(ledger):
    tenant = ledger.add_tenant(make_tenant(start="2023-06-01", end="2025-06-01"))
    updated = ledger.update_tenant(tenant.uid, lease_end_date=date(2024, 6, 30))
    assert updated.rent_status == RentStatusEnum.OVERDUE

    updated = ledger.update_tenant(
        tenant.uid, lease_start_date=date(2024, 7, 10), lease_end_date=date(2025, 7, 9)
    )
    assert updated.rent_status == RentStatusEnum.PENDING


def test_update_rejects_non_editable_fields(ledger):
    tenant = ledger.add_tenant(make_tenant())
    with pytest.raises(ValueError, match="cannot be edited"):
        ledger.update_tenant(tenant.uid, rent_status=RentStatusEnum.PAID)
    with pytest.raises(ValueError, match="cannot be edited"):
        ledger.update_tenant(tenant.uid, payment_history=())


def test_update_rejects_inverted_lease(ledger):
    tenant = ledger.add_tenant(make_tenant(start="2023-06-01", end="2025-06-01"))
    with pytest.raises(ValidationError):
        ledger.update_tenant(tenant.uid, lease_end_date=date(2023, 1, 1))
    assert ledger.get_tenant(tenant.uid).lease_end_date == date(2025, 6, 1)


def test_update_name_reindexes_payments(ledger):
    tenant = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    ledger.update_tenant(tenant.uid, name="Chanda M. Phiri")
    assert list(ledger.all_payments()["tenant_name"]) == ["Chanda M. Phiri"]


def test_status_override_survives_recomputation(ledger):
    tenant = ledger.add_tenant(make_tenant())
    ledger.set_status_override(tenant.uid, RentStatusEnum.PAID)

    tenant = ledger.log_payment(tenant.uid, make_payment("2024-07-02", 100))
    assert tenant.rent_status == RentStatusEnum.OVERDUE
    assert tenant.status_override == RentStatusEnum.PAID
    assert tenant.effective_status == RentStatusEnum.PAID

    cleared = ledger.set_status_override(tenant.uid, None)
    assert cleared.effective_status == RentStatusEnum.OVERDUE


def test_list_tenants_filters_by_effective_status(ledger):
    paid = ledger.add_tenant(make_tenant(name="Paid Tenant", payments=[("2024-07-01", 3000)]))
    overdue = ledger.add_tenant(make_tenant(name="Overdue Tenant"))

    assert [t.uid for t in ledger.list_tenants(RentStatusEnum.PAID)] == [paid.uid]
    assert [t.uid for t in ledger.list_tenants(RentStatusEnum.OVERDUE)] == [overdue.uid]
    assert len(ledger.list_tenants()) == 2


def test_refresh_statuses_on_month_rollover(ledger):
    tenant = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    assert tenant.rent_status == RentStatusEnum.PAID

    refreshed = ledger.refresh_statuses(date(2024, 8, 2))
    assert [t.rent_status for t in refreshed] == [RentStatusEnum.PENDING]

    refreshed = ledger.refresh_statuses(date(2024, 8, 6))
    assert ledger.get_tenant(tenant.uid).rent_status == RentStatusEnum.OVERDUE


def test_delete_tenant_drops_payments(ledger):
    tenant = ledger.add_tenant(make_tenant(payments=[("2024-07-01", 3000)]))
    ledger.delete_tenant(tenant.uid)
    assert len(ledger.list_tenants()) == 0
    assert ledger.all_payments().empty
    with pytest.raises(KeyError):
        ledger.delete_tenant(tenant.uid)


def test_ledger_uses_injected_repository_and_settings():
    repository = InMemoryTenantRepository()
    existing = make_tenant(payments=[("2024-07-01", 500)])
    repository.add(existing)

    ledger = TenantLedger(
        repository=repository,
        settings=RentSettings(grace_period_days=10),
        clock=lambda: TODAY,
    )
    assert len(ledger.all_payments()) == 1

    refreshed = ledger.refresh_statuses()
    assert refreshed[0].rent_status == RentStatusEnum.PENDING
