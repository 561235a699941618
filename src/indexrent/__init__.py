# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
indexrent - Index-linked rent escalation and ledger reconciliation

Rebuilds the monthly rent ledger of a lease contract whose rent is re-priced
against a published price index (ICL, IPC, ...), and reconciles the freshly
computed rows against a stored ledger that may already hold payments.

Key Entry Points:
- indexrent.recalculate() - Pure computation of an insert/update plan
- indexrent.RecalculationService - Load, compute and apply a plan per contract
- indexrent.reporting - pandas views of plans and stored ledgers

Example Usage:
    ```python
    from datetime import date
    from indexrent import Contract, IndexValue, recalculate

    contract = Contract(
        id=1, unit_id=10, tenant_id=20,
        start_date=date(2023, 1, 1), end_date=date(2023, 12, 31),
        initial_rent_amount=1000, rent_increase_frequency="quarterly",
    )
    index_values = [
        IndexValue(period_year=2023, period_month=1, value=100),
        IndexValue(period_year=2023, period_month=4, value=110),
    ]
    plan = recalculate(contract, index_values, existing_rows=[], now=date(2024, 1, 1))
    print(len(plan.inserts), "rows to insert")
    ```
"""

import logging

# Library logging: applications configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .analysis import (  # noqa: E402
    InMemoryLedgerRepository,
    LedgerRepository,
    RecalculationService,
    recalculate,
)
from .core.exceptions import (  # noqa: E402
    ContractNotFoundError,
    DuplicateIndexValueError,
    IndexRentError,
    InvalidFrequencyError,
    LedgerIntegrityError,
    LedgerPersistenceError,
)
from .core.primitives import (  # noqa: E402
    BillingPeriod,
    PeriodRange,
    RecalculationSettings,
    RentIncreaseFrequencyEnum,
)
from .escalation import (  # noqa: E402
    EscalationCalculator,
    IndexResolver,
    IndexValue,
    is_adjustment_period,
)
from .ledger import (  # noqa: E402
    ComputedPeriod,
    Contract,
    Insert,
    RecalculationPlan,
    RentLedgerRow,
    Update,
    reconcile,
)

__all__ = [
    # Entry points
    "recalculate",
    "RecalculationService",
    "LedgerRepository",
    "InMemoryLedgerRepository",
    # Models
    "Contract",
    "IndexValue",
    "RentLedgerRow",
    "ComputedPeriod",
    "RecalculationPlan",
    "Insert",
    "Update",
    # Building blocks
    "BillingPeriod",
    "PeriodRange",
    "RentIncreaseFrequencyEnum",
    "RecalculationSettings",
    "EscalationCalculator",
    "IndexResolver",
    "is_adjustment_period",
    "reconcile",
    # Errors
    "IndexRentError",
    "InvalidFrequencyError",
    "DuplicateIndexValueError",
    "LedgerIntegrityError",
    "ContractNotFoundError",
    "LedgerPersistenceError",
]
