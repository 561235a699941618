# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for indexrent testing.

Provides a quarterly reference contract with its index series, and helpers
for building index readings and stored ledger rows without repeating
boilerplate.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Tuple

import pytest

from indexrent import Contract, IndexValue, RentLedgerRow


def make_contract(
    start_date: date = date(2023, 1, 1),
    end_date: date = date(2023, 12, 31),
    initial_rent_amount: str = "1000",
    rent_increase_frequency: str = "quarterly",
    **kwargs,
) -> Contract:
    """Create a contract with sensible defaults for testing."""
    fields = dict(id=1, unit_id=10, tenant_id=100)
    fields.update(kwargs)
    return Contract(
        start_date=start_date,
        end_date=end_date,
        initial_rent_amount=Decimal(initial_rent_amount),
        rent_increase_frequency=rent_increase_frequency,
        **fields,
    )


def make_index_values(readings: Dict[Tuple[int, int], str]) -> List[IndexValue]:
    """Index readings from a {(year, month): value} mapping."""
    return [
        IndexValue(period_year=y, period_month=m, value=Decimal(v))
        for (y, m), v in readings.items()
    ]


def make_row(
    id: int, year: int, month: int, amount_paid: str = "0", contract_id: int = 1, **kwargs
) -> RentLedgerRow:
    """Stored ledger row with only the reconciliation fields set."""
    return RentLedgerRow(
        id=id,
        contract_id=contract_id,
        period_year=year,
        period_month=month,
        amount_paid=Decimal(amount_paid),
        **kwargs,
    )


@pytest.fixture
def quarterly_contract() -> Contract:
    return make_contract()


@pytest.fixture
def quarterly_index_values() -> List[IndexValue]:
    return make_index_values(
        {
            (2023, 1): "100",
            (2023, 4): "110",
            (2023, 7): "121",
            (2023, 10): "133.1",
        }
    )


@pytest.fixture
def evaluation_date() -> date:
    return date(2024, 1, 15)
