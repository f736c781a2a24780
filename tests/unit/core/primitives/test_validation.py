# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest

from propbot.core.primitives import ValidationMixin, validate_lease_window


def test_date_ordering_allows_equal_by_default():
    data = {"start": date(2024, 1, 1), "end": date(2024, 1, 1)}
    assert ValidationMixin.validate_date_ordering(data, "start", "end") is data


def test_date_ordering_strict():
    data = {"start": date(2024, 1, 1), "end": date(2024, 1, 1)}
    with pytest.raises(ValueError, match="end must be after start"):
        ValidationMixin.validate_date_ordering(data, "start", "end", allow_equal=False)


def test_date_ordering_inverted():
    data = {"start": date(2024, 2, 1), "end": date(2024, 1, 1)}
    with pytest.raises(ValueError, match="end must be on or after start"):
        ValidationMixin.validate_date_ordering(data, "start", "end")


def test_date_ordering_skips_missing_values():
    data = {"start": date(2024, 2, 1)}
    assert ValidationMixin.validate_date_ordering(data, "start", "end") is data


def test_not_blank():
    with pytest.raises(ValueError, match="name must not be blank"):
        ValidationMixin.validate_not_blank({"name": "   "}, "name")
    ValidationMixin.validate_not_blank({"name": "Chanda"}, "name")


def test_validate_lease_window_on_dict():
    with pytest.raises(ValueError, match="lease_end_date must be on or after"):
        validate_lease_window(
            None,
            {"lease_start_date": date(2024, 2, 1), "lease_end_date": date(2024, 1, 1)},
        )
