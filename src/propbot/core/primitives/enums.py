# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class RentStatusEnum(str, Enum):
    """
    Standing of a tenant for the billing cycle under evaluation.

    Options:
        PAID: Cycle obligation satisfied by payments dated within the cycle
        PENDING: Obligation not yet satisfied but still within the grace period,
            or not yet started
        OVERDUE: Grace period elapsed (or lease lapsed) with insufficient payment
    """

    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class StatusRuleEnum(str, Enum):
    """
    The rule of the status derivation that produced a result.

    Options:
        LEASE_ENDED: Lease lapsed; final cycle decided the outcome
        CURRENT_CYCLE_PAID: Payments this month cover the rent
        GRACE_PERIOD_ELAPSED: Obligation started and grace period has passed
        DEFAULT: Nothing fired; obligation still within grace or not started
    """

    LEASE_ENDED = "lease_ended"
    CURRENT_CYCLE_PAID = "current_cycle_paid"
    GRACE_PERIOD_ELAPSED = "grace_period_elapsed"
    DEFAULT = "default"


class PaymentMethodEnum(str, Enum):
    """How a rent payment was received. Carried for reporting only."""

    MOBILE_MONEY = "Mobile Money"
    BANK_TRANSFER = "Bank Transfer"
    CASH = "Cash"


class PropertyTypeEnum(str, Enum):
    """Kinds of managed property."""

    SHOPPING_COMPLEX = "Shopping Complex"
    BOARDING_HOUSE = "Boarding House"
    RESIDENTIAL_APARTMENTS = "Residential Apartments"
    HOUSE = "House"
    OTHER = "Other"


class MessageMethodEnum(str, Enum):
    """Channel a tenant message is recorded against."""

    SMS = "SMS"
    WHATSAPP = "WhatsApp"
