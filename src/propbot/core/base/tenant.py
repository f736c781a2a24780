# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Tuple

from pydantic import Field, model_validator

from ..primitives.enums import RentStatusEnum
from ..primitives.model import Model
from ..primitives.types import PositiveAmount
from ..primitives.validation import ValidationMixin, validate_lease_window
from .payment import Payment


class Tenant(Model, ValidationMixin):
    """
    A tenant occupying one unit of a property under a single lease.

    ``rent_status`` is derived: the ledger recomputes it from the lease window,
    rent amount and payment history on every change and it is never
    authoritative on its own. A landlord may pin a different status through
    ``status_override``; the override is kept apart from the derived value so
    that recomputation never overwrites a human decision, and clearing the
    override restores the derived status.

    Attributes:
        rent_amount: Contractual rent due per monthly billing cycle.
        lease_start_date: First day of the lease, inclusive.
        lease_end_date: Last day of the lease, inclusive.
        payment_history: Payments in the order they were logged.
        rent_status: Derived standing for the current billing cycle.
        status_override: Manual status set by an operator, if any.
    """

    # Identity
    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    property_name: str = ""
    unit: str = ""

    # Contact
    phone: str = ""
    email: str = ""

    # Lease terms
    rent_amount: PositiveAmount
    lease_start_date: date
    lease_end_date: date

    # Payments and standing
    payment_history: Tuple[Payment, ...] = ()
    payment_history_summary: str = ""
    rent_status: RentStatusEnum = RentStatusEnum.PENDING
    status_override: Optional[RentStatusEnum] = None

    @model_validator(mode="before")
    @classmethod
    def check_name(cls, data):
        if isinstance(data, dict):
            cls.validate_not_blank(data, "name", "Tenant name must not be blank")
        return data

    @model_validator(mode="after")
    def check_lease_window(self) -> "Tenant":
        return validate_lease_window(type(self), self)

    @property
    def effective_status(self) -> RentStatusEnum:
        """The status shown to users: the manual override when set, else derived."""
        if self.status_override is not None:
            return self.status_override
        return self.rent_status

    def is_active_on(self, day: date) -> bool:
        """Whether ``day`` falls inside the lease window, bounds inclusive."""
        return self.lease_start_date <= day <= self.lease_end_date

    def with_payment(self, payment: Payment) -> "Tenant":
        """Return a copy with ``payment`` appended to the history."""
        return self.model_copy(
            update={"payment_history": self.payment_history + (payment,)}
        )

    def with_status(self, status: RentStatusEnum) -> "Tenant":
        return self.model_copy(update={"rent_status": status})
