# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .ledger_report import (
    LEDGER_COLUMNS,
    adjustment_history,
    ledger_to_dataframe,
    plan_to_dataframe,
)

__all__ = [
    "LEDGER_COLUMNS",
    "adjustment_history",
    "ledger_to_dataframe",
    "plan_to_dataframe",
]
