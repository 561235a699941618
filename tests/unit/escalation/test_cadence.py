# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from indexrent.core.exceptions import InvalidFrequencyError
from indexrent.core.primitives import RentIncreaseFrequencyEnum
from indexrent.escalation import is_adjustment_period


def _points(frequency, months=25):
    return [i for i in range(months) if is_adjustment_period(i, frequency)]


def test_monthly_escalates_every_period():
    assert _points("monthly", 5) == [0, 1, 2, 3, 4]


def test_quarterly_points():
    assert _points("quarterly") == [0, 3, 6, 9, 12, 15, 18, 21, 24]


def test_semi_annual_points():
    assert _points(RentIncreaseFrequencyEnum.SEMI_ANNUALLY) == [0, 6, 12, 18, 24]


def test_annual_points():
    assert _points("annually") == [0, 12, 24]


def test_unknown_frequency_is_rejected():
    with pytest.raises(InvalidFrequencyError, match="Unknown rent increase frequency"):
        is_adjustment_period(3, "bi-weekly")


def test_negative_offset_is_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        is_adjustment_period(-1, "quarterly")
