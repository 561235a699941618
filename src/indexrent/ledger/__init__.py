# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent ledger records and reconciliation of computed periods against a stored
ledger.
"""

from .reconciler import (
    Insert,
    LedgerEntry,
    RecalculationPlan,
    Update,
    index_ledger_rows,
    merge_periods,
    reconcile,
)
from .records import ComputedPeriod, Contract, RentLedgerRow

__all__ = [
    "ComputedPeriod",
    "Contract",
    "Insert",
    "LedgerEntry",
    "RecalculationPlan",
    "RentLedgerRow",
    "Update",
    "index_ledger_rows",
    "merge_periods",
    "reconcile",
]
