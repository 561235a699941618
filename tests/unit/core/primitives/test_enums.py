# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from indexrent.core.exceptions import InvalidFrequencyError
from indexrent.core.primitives import RentIncreaseFrequencyEnum


@pytest.mark.parametrize(
    "value, expected, months",
    [
        ("monthly", RentIncreaseFrequencyEnum.MONTHLY, 1),
        ("quarterly", RentIncreaseFrequencyEnum.QUARTERLY, 3),
        ("semi-annually", RentIncreaseFrequencyEnum.SEMI_ANNUALLY, 6),
        ("annually", RentIncreaseFrequencyEnum.ANNUALLY, 12),
        (" Quarterly ", RentIncreaseFrequencyEnum.QUARTERLY, 3),
        (RentIncreaseFrequencyEnum.ANNUALLY, RentIncreaseFrequencyEnum.ANNUALLY, 12),
    ],
)
def test_parse_supported_frequencies(value, expected, months):
    parsed = RentIncreaseFrequencyEnum.parse(value)
    assert parsed is expected
    assert parsed.months == months


@pytest.mark.parametrize("value", ["weekly", "annual", "", None, 3])
def test_parse_rejects_unknown_frequency(value):
    with pytest.raises(InvalidFrequencyError) as excinfo:
        RentIncreaseFrequencyEnum.parse(value)
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)
