"""
Reusable Pydantic validation utilities for common patterns across the codebase.

This module provides standardized validators for:
- Date ordering (inclusive or strict windows)
- Non-blank text fields
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside Pydantic Model to add common
    validation patterns without code duplication.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Dict[str, Any],
        start_field: str,
        end_field: str,
        allow_equal: bool = True,
        error_message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Validate that the end date does not precede the start date.

        Args:
            data: Model data dictionary
            start_field: Name of start date field
            end_field: Name of end date field
            allow_equal: Accept a single-day window (start == end)
            error_message: Custom error message

        Returns:
            Validated data dictionary

        Raises:
            ValueError: If the window is inverted
        """
        start_date = data.get(start_field)
        end_date = data.get(end_field)

        if isinstance(start_date, date) and isinstance(end_date, date):
            inverted = end_date < start_date if allow_equal else end_date <= start_date
            if inverted:
                relation = "on or after" if allow_equal else "after"
                msg = error_message or f"{end_field} must be {relation} {start_field}"
                raise ValueError(msg)

        return data

    @classmethod
    def validate_not_blank(
        cls,
        data: Dict[str, Any],
        field: str,
        error_message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Validate that a text field, when present, is not only whitespace."""
        value = data.get(field)
        if isinstance(value, str) and not value.strip():
            raise ValueError(error_message or f"{field} must not be blank")
        return data


def validate_lease_window(cls, data: Any) -> Any:
    """
    Reusable validator for an inclusive lease window.

    Usage:
        @model_validator(mode="after")
        def check_lease(self) -> "Tenant":
            return validate_lease_window(type(self), self)
    """
    message = "lease_end_date must be on or after lease_start_date"
    if isinstance(data, dict):
        # Dictionary validation (mode="before")
        ValidationMixin.validate_date_ordering(
            data,
            "lease_start_date",
            "lease_end_date",
            allow_equal=True,
            error_message=message,
        )
    else:
        # Model instance validation (mode="after")
        start = getattr(data, "lease_start_date", None)
        end = getattr(data, "lease_end_date", None)
        if start is not None and end is not None and end < start:
            raise ValueError(message)
    return data
