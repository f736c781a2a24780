# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Message templates and tag rendering.

Templates carry ``{{tag}}`` placeholders filled from a tenant's record and
current rent standing. Unknown tags are left untouched so a landlord can see
what did not resolve.
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import date
from typing import Dict, List, Optional

from pydantic import Field

from ..core.base.tenant import Tenant
from ..core.primitives.model import Model
from ..core.primitives.settings import CommunicationSettings, RentSettings
from ..rent.status import explain_rent_status

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")

SUPPORTED_TAGS = (
    "name",
    "rent_due",
    "arrears",
    "due_date",
    "property",
    "lease_end_date",
)


class MessageTemplate(Model):
    """A reusable message body with ``{{tag}}`` placeholders."""

    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = "General"

    @property
    def tags(self) -> List[str]:
        """Tag names used in the content, in order of first appearance."""
        return list(dict.fromkeys(TAG_PATTERN.findall(self.content)))


DEFAULT_TEMPLATES = (
    MessageTemplate(
        title="Rent Reminder",
        category="Reminder",
        content=(
            "Hi {{name}}, a friendly reminder that your rent of {{rent_due}} "
            "for {{property}} was due on {{due_date}}."
        ),
    ),
    MessageTemplate(
        title="Rent Overdue Notice",
        category="Arrears",
        content=(
            "Dear {{name}}, your rent for {{property}} is overdue. "
            "Outstanding balance: {{arrears}}. Please pay as soon as possible."
        ),
    ),
    MessageTemplate(
        title="Lease Expiry Notice",
        category="Lease",
        content=(
            "Hi {{name}}, your lease at {{property}} ends on {{lease_end_date}}. "
            "Please contact us to discuss renewal."
        ),
    ),
)


def format_amount(amount: float, settings: Optional[RentSettings] = None) -> str:
    settings = settings or RentSettings()
    return f"{settings.currency_code} {amount:,.{settings.amount_precision}f}"


def tag_values(
    tenant: Tenant,
    today: date,
    rent_settings: Optional[RentSettings] = None,
    settings: Optional[CommunicationSettings] = None,
) -> Dict[str, str]:
    """Values for every supported tag for ``tenant`` as of ``today``."""
    rent_settings = rent_settings or RentSettings()
    settings = settings or CommunicationSettings()
    result = explain_rent_status(tenant, today, rent_settings)

    return {
        "name": tenant.name,
        "rent_due": format_amount(tenant.rent_amount, rent_settings),
        "arrears": format_amount(result.shortfall, rent_settings),
        "due_date": result.cycle.start.strftime(settings.date_format),
        "property": tenant.property_name,
        "lease_end_date": tenant.lease_end_date.strftime(settings.date_format),
    }


def render_message(
    content: str,
    tenant: Tenant,
    today: date,
    rent_settings: Optional[RentSettings] = None,
    settings: Optional[CommunicationSettings] = None,
) -> str:
    """
    Substitute ``{{tag}}`` placeholders in ``content`` for ``tenant``.

    Tags are matched case-sensitively and may carry inner whitespace
    (``{{ name }}``). Unknown tags are kept verbatim.
    """
    values = tag_values(tenant, today, rent_settings, settings)
    unresolved = []

    def _substitute(match: re.Match) -> str:
        tag = match.group(1)
        if tag in values:
            return values[tag]
        unresolved.append(tag)
        return match.group(0)

    rendered = TAG_PATTERN.sub(_substitute, content)
    if unresolved:
        logger.warning(
            f"Unresolved message tags for {tenant.name}: {sorted(set(unresolved))}"
        )
    return rendered
