# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant communication: message templates, tag rendering, bulk reminder
composition and the outgoing message log. No delivery transport.
"""

from .reminders import MessageLog, MessageLogBook, compose_reminders
from .templates import (
    DEFAULT_TEMPLATES,
    SUPPORTED_TAGS,
    MessageTemplate,
    format_amount,
    render_message,
    tag_values,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "SUPPORTED_TAGS",
    "MessageLog",
    "MessageLogBook",
    "MessageTemplate",
    "compose_reminders",
    "format_amount",
    "render_message",
    "tag_values",
]
