# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Bulk reminder composition and the outgoing message log.

Messages are composed and recorded here; delivery belongs to whatever SMS or
WhatsApp gateway the application wires in.
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict, Iterable, List, Literal, Optional, Sequence

from pydantic import Field

from ..core.base.tenant import Tenant
from ..core.primitives.enums import MessageMethodEnum, RentStatusEnum
from ..core.primitives.model import Model
from ..core.primitives.settings import GlobalSettings
from .templates import MessageTemplate, render_message

logger = logging.getLogger(__name__)


class MessageLog(Model):
    """A message composed for a tenant."""

    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    tenant_uid: uuid.UUID
    tenant_name: str
    message: str
    date: datetime.date
    method: MessageMethodEnum = MessageMethodEnum.SMS
    direction: Literal["outgoing", "incoming"] = "outgoing"
    status: str = "queued"


def compose_reminders(
    tenants: Iterable[Tenant],
    template: MessageTemplate,
    today: datetime.date,
    statuses: Sequence[RentStatusEnum] = (RentStatusEnum.OVERDUE,),
    method: MessageMethodEnum = MessageMethodEnum.SMS,
    settings: Optional[GlobalSettings] = None,
) -> List[MessageLog]:
    """
    Render ``template`` for every tenant whose effective status is selected.

    Tenants without a phone number are skipped.

    Args:
        tenants: Candidate recipients.
        template: Template to render.
        today: Date used for rendering and stamped on the messages.
        statuses: Effective statuses that receive the message.
        method: Channel recorded on the messages.
        settings: Rent and communication settings used for rendering.

    Returns:
        One MessageLog per recipient, in input order.
    """
    settings = settings or GlobalSettings()
    wanted = set(statuses)
    messages = []
    for tenant in tenants:
        if tenant.effective_status not in wanted:
            continue
        if not tenant.phone.strip():
            logger.debug(f"Skipping reminder for {tenant.name}: no phone number")
            continue
        body = render_message(
            template.content, tenant, today, settings.rent, settings.communication
        )
        messages.append(
            MessageLog(
                tenant_uid=tenant.uid,
                tenant_name=tenant.name,
                message=body,
                date=today,
                method=method,
            )
        )
    logger.info(f"Composed {len(messages)} '{template.title}' reminders")
    return messages


class MessageLogBook:
    """In-memory log of composed messages, newest first."""

    def __init__(self):
        self._logs: Dict[uuid.UUID, MessageLog] = {}

    def add(self, message: MessageLog) -> None:
        self._logs[message.uid] = message

    def extend(self, messages: Iterable[MessageLog]) -> None:
        for message in messages:
            self.add(message)

    def update_status(self, uid: uuid.UUID, status: str) -> MessageLog:
        """Record a delivery status reported by the gateway. Raises KeyError if unknown."""
        try:
            current = self._logs[uid]
        except KeyError:
            raise KeyError(f"Message {uid} not found") from None
        updated = current.model_copy(update={"status": status})
        self._logs[uid] = updated
        return updated

    def for_tenant(self, tenant_uid: uuid.UUID) -> List[MessageLog]:
        return [m for m in self.list() if m.tenant_uid == tenant_uid]

    def list(self) -> List[MessageLog]:
        return list(reversed(self._logs.values()))

    def __len__(self) -> int:
        return len(self._logs)
