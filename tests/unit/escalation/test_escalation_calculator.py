# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import make_index_values
from indexrent.core.exceptions import InvalidFrequencyError
from indexrent.core.primitives import BillingPeriod, PeriodRange, RecalculationSettings
from indexrent.escalation import EscalationCalculator, EscalationState, IndexResolver

START = BillingPeriod(2023, 1)


def _calculator(readings, frequency="quarterly", base_amount="1000", settings=None):
    resolver = IndexResolver.from_values(make_index_values(readings), base_period=START)
    return EscalationCalculator(base_amount, frequency, resolver, settings=settings)


def _year():
    return PeriodRange(start=START, cutoff=BillingPeriod(2023, 12))


def _amounts(computed):
    return [c.amount for c in computed]


def test_quarterly_reference_example():
    calculator = _calculator(
        {(2023, 1): "100", (2023, 4): "110", (2023, 7): "121", (2023, 10): "133.1"}
    )
    computed = calculator.compute(_year())

    assert len(computed) == 12
    assert _amounts(computed) == [Decimal(x) for x in (
        "1000", "1000", "1000",
        "1100.00", "1100.00", "1100.00",
        "1210.00", "1210.00", "1210.00",
        "1331.00", "1331.00", "1331.00",
    )]
    assert [c.period.month for c in computed if c.is_adjusted] == [4, 7, 10]

    july = computed[6]
    assert july.icl_adjustment_factor == Decimal("1.210000")
    assert july.base_icl_value == Decimal("100")
    assert july.adjustment_icl_value == Decimal("121")
    assert (july.adjustment_period_year, july.adjustment_period_month) == (2023, 7)


def test_missing_index_carries_last_escalation_forward():
    calculator = _calculator({(2023, 1): "100", (2023, 4): "110", (2023, 10): "133.1"})
    computed = calculator.compute(_year())

    assert _amounts(computed[6:9]) == [Decimal("1100.00")] * 3
    assert not any(c.is_adjusted for c in computed[6:9])
    assert computed[6].icl_adjustment_factor is None
    assert computed[9].is_adjusted
    assert computed[9].amount == Decimal("1331.00")


def test_missing_base_index_never_escalates():
    calculator = _calculator({(2023, 4): "110", (2023, 7): "121"})
    computed = calculator.compute(_year())
    assert _amounts(computed) == [Decimal("1000")] * 12
    assert not any(c.is_adjusted for c in computed)


def test_first_period_is_never_adjusted():
    calculator = _calculator({(2023, 1): "100"}, frequency="monthly", base_amount="1234.567")
    first = calculator.compute(_year())[0]
    assert first.amount == Decimal("1234.567")
    assert first.is_adjusted is False
    assert first.icl_adjustment_factor is None
    assert first.adjustment_period_month is None


def test_monthly_escalation_is_relative_to_base_not_previous():
    calculator = _calculator(
        {(2023, 1): "100", (2023, 2): "102", (2023, 3): "105"}, frequency="monthly"
    )
    computed = calculator.compute(PeriodRange(start=START, cutoff=BillingPeriod(2023, 4)))
    assert _amounts(computed) == [
        Decimal("1000"),
        Decimal("1020.00"),
        Decimal("1050.00"),
        Decimal("1050.00"),
    ]
    assert [c.is_adjusted for c in computed] == [False, True, True, False]


def test_non_escalation_periods_ignore_available_index():
    calculator = _calculator({(2023, 1): "100", (2023, 2): "150", (2023, 4): "110"})
    computed = calculator.compute(_year())
    assert computed[1].amount == Decimal("1000")
    assert computed[1].is_adjusted is False


def test_computed_amounts_round_half_up():
    calculator = _calculator({(2023, 1): "3", (2023, 4): "4"}, base_amount="1000")
    computed = calculator.compute(PeriodRange(start=START, cutoff=BillingPeriod(2023, 4)))
    # 1000 * 4 / 3 = 1333.333...
    assert computed[3].amount == Decimal("1333.33")
    assert computed[3].icl_adjustment_factor == Decimal("1.333333")


def test_settings_control_amount_precision():
    calculator = _calculator(
        {(2023, 1): "3", (2023, 4): "4"},
        settings=RecalculationSettings(decimal_precision=0),
    )
    computed = calculator.compute(PeriodRange(start=START, cutoff=BillingPeriod(2023, 4)))
    assert computed[3].amount == Decimal("1333")


def test_annual_escalation_over_two_years():
    calculator = _calculator({(2023, 1): "100", (2024, 1): "150"}, frequency="annually")
    computed = calculator.compute(PeriodRange(start=START, cutoff=BillingPeriod(2024, 3)))
    assert len(computed) == 15
    assert _amounts(computed[:12]) == [Decimal("1000")] * 12
    assert _amounts(computed[12:]) == [Decimal("1500.00")] * 3
    assert [c.is_adjusted for c in computed].count(True) == 1


def test_step_is_pure():
    calculator = _calculator({(2023, 1): "100", (2023, 4): "110"})
    state = EscalationState(last_adjusted_amount=Decimal("1000"))
    april = BillingPeriod(2023, 4)

    first = calculator.step(state, 3, april, Decimal("100"))
    second = calculator.step(state, 3, april, Decimal("100"))

    assert first == second
    assert state.last_adjusted_amount == Decimal("1000")
    assert first[0].last_adjusted_amount == Decimal("1100.00")


def test_empty_period_sequence():
    calculator = _calculator({(2023, 1): "100"})
    assert calculator.compute([]) == []


def test_invalid_frequency_is_rejected():
    resolver = IndexResolver({}, base_period=START)
    with pytest.raises(InvalidFrequencyError):
        EscalationCalculator("1000", "fortnightly", resolver)
