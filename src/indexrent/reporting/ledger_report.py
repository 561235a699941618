# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pandas views of recalculation plans and stored ledgers.

Frames are indexed by a monthly ``PeriodIndex`` named ``period`` and use the
ledger's external column names. Money columns are converted to float for
display; use the plan objects themselves for exact Decimal values.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..ledger import RecalculationPlan, RentLedgerRow, Update

LEDGER_COLUMNS = [
    "amount",
    "amount_paid",
    "balance",
    "base_amount",
    "icl_adjustment_factor",
    "base_icl_value",
    "adjustment_icl_value",
    "is_adjusted",
    "adjustment_period_month",
    "adjustment_period_year",
]

_DECIMAL_COLUMNS = {
    "amount",
    "amount_paid",
    "balance",
    "base_amount",
    "icl_adjustment_factor",
    "base_icl_value",
    "adjustment_icl_value",
}


def _to_float(value: Optional[Decimal]) -> float:
    return float("nan") if value is None else float(value)


def _frame(records: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    index = pd.PeriodIndex(
        [pd.Period(year=r["period_year"], month=r["period_month"], freq="M") for r in records],
        freq="M",
        name="period",
    )
    rows = [
        {c: (_to_float(r.get(c)) if c in _DECIMAL_COLUMNS else r.get(c)) for c in columns}
        for r in records
    ]
    return pd.DataFrame(rows, index=index, columns=columns)


def plan_to_dataframe(plan: RecalculationPlan) -> pd.DataFrame:
    """
    One row per planned period with its ``action`` (insert/update) and ``row_id``.

    Example:
        ```python
        df = plan_to_dataframe(plan)
        df.loc[df["is_adjusted"], ["amount", "icl_adjustment_factor"]]
        ```
    """
    records = []
    for entry in plan.entries:
        record = entry.period.to_record()
        record["balance"] = entry.period.balance
        record["action"] = entry.action.value
        record["row_id"] = entry.id if isinstance(entry, Update) else None
        records.append(record)
    return _frame(records, ["action", "row_id"] + LEDGER_COLUMNS)


def ledger_to_dataframe(rows: Iterable[RentLedgerRow]) -> pd.DataFrame:
    """Stored ledger rows sorted by period, indexed by period."""
    records = []
    for row in sorted(rows, key=lambda r: (r.period_year, r.period_month)):
        record = row.model_dump()
        record["balance"] = row.balance
        records.append(record)
    return _frame(records, ["id"] + LEDGER_COLUMNS)


def adjustment_history(plan: RecalculationPlan) -> pd.DataFrame:
    """Escalation points of a plan: period, index readings, factor and new amount."""
    df = plan_to_dataframe(plan)
    adjusted = df[df["is_adjusted"].astype(bool)]
    return adjusted[["base_icl_value", "adjustment_icl_value", "icl_adjustment_factor", "amount"]]
