#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
ICL Contract Recalculation Example

Rebuilds the rent ledger of a two-year residential lease that escalates
quarterly against the ICL index, with a few months already paid and a gap in
the published index series.

### Scenario

- Lease: March 2023 to February 2025, initial rent 250,000 ARS
- Cadence: quarterly (escalations at offsets 3, 6, 9, ...)
- Index: ICL readings published monthly, except December 2023 (gap)
- Ledger: March to May 2023 already stored and paid in full

### What to look for

1. Paid months are updated in place and keep their payments
2. December 2023 holds the September amount because its reading is missing
3. Running the recalculation again changes nothing
"""

from datetime import date
from decimal import Decimal

from indexrent import (
    Contract,
    IndexValue,
    InMemoryLedgerRepository,
    RecalculationService,
    RentLedgerRow,
)
from indexrent.reporting import adjustment_history, ledger_to_dataframe

ICL_READINGS = {
    (2023, 3): "3.4412",
    (2023, 4): "3.5820",
    (2023, 5): "3.7281",
    (2023, 6): "3.8954",
    (2023, 7): "4.0610",
    (2023, 8): "4.2675",
    (2023, 9): "4.6420",
    (2023, 10): "5.0553",
    (2023, 11): "5.4987",
    # 2023-12 not yet published
    (2024, 1): "6.8712",
    (2024, 2): "7.6124",
    (2024, 3): "8.5160",
}


def build_repository() -> InMemoryLedgerRepository:
    contract = Contract(
        id=1,
        unit_id=101,
        tenant_id=501,
        start_date=date(2023, 3, 1),
        end_date=date(2025, 2, 28),
        initial_rent_amount=Decimal("250000"),
        rent_increase_frequency="quarterly",
        currency="ARS",
        index_type="icl",
    )
    index_values = [
        IndexValue(period_year=y, period_month=m, value=Decimal(v), index_type="icl")
        for (y, m), v in ICL_READINGS.items()
    ]
    paid_rows = [
        RentLedgerRow(
            id=i + 1,
            contract_id=1,
            period_year=2023,
            period_month=month,
            amount_paid=Decimal("250000"),
        )
        for i, month in enumerate((3, 4, 5))
    ]
    return InMemoryLedgerRepository(
        contracts=[contract], index_values=index_values, rows=paid_rows
    )


def main():
    """Recalculate the example contract as of March 2024 and print the ledger."""
    repository = build_repository()
    service = RecalculationService(repository, clock=lambda: date(2024, 3, 10))

    plan = service.plan(1)
    print(f"Plan: {len(plan.inserts)} inserts, {len(plan.updates)} updates")
    print()
    print("ESCALATIONS:")
    print(adjustment_history(plan).to_string())

    rows = service.recalculate_contract(1)
    print()
    print("STORED LEDGER:")
    print(ledger_to_dataframe(rows)[["amount", "amount_paid", "balance", "is_adjusted"]].to_string())

    again = service.plan(1)
    assert again.inserts == [], "second run must not insert rows"
    print()
    print("Second run: no inserts, ledger unchanged")
    return rows


if __name__ == "__main__":
    main()
