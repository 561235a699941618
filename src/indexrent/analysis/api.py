# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recalculation API

Pure entry point rebuilding a contract's rent ledger. Given the same contract,
index readings, stored ledger snapshot and ``now``, it always returns the same
plan; it performs no I/O. Persisting the plan, and serializing recalculations
of one contract, is the caller's job (see ``RecalculationService``).
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from ..core.primitives import Model, RecalculationSettings
from ..escalation import EscalationCalculator, IndexResolver, IndexValue
from ..ledger import Contract, RecalculationPlan, RentLedgerRow, reconcile

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)


def _coerce(item: Union[M, Mapping[str, Any]], model: Type[M]) -> M:
    if isinstance(item, model):
        return item
    return model.model_validate(item)


def recalculate(
    contract: Union[Contract, Mapping[str, Any]],
    index_values: Iterable[Union[IndexValue, Mapping[str, Any]]],
    existing_rows: Iterable[Union[RentLedgerRow, Mapping[str, Any]]],
    now: date,
    settings: Optional[RecalculationSettings] = None,
) -> RecalculationPlan:
    """
    Recompute a contract's monthly rent rows and reconcile them with storage.

    Workflow:
      1) Enumerate periods from the start period to min(end, now)
      2) Resolve the index series anchored at the start period
      3) Fold the escalation rules over the periods
      4) Merge with the stored rows, preserving recorded payments

    Args:
        contract: Contract to recalculate (model or mapping of its fields).
        index_values: Index readings covering the contract's years.
        existing_rows: Stored ledger rows for the contract.
        now: Reference date; only its year and month matter.
        settings: Rounding and reporting settings.

    Returns:
        RecalculationPlan with inserts, updates and orphaned rows. An empty
        period range yields a plan with no entries.

    Raises:
        InvalidFrequencyError / pydantic.ValidationError: malformed contract input
        DuplicateIndexValueError: conflicting readings for one period
        LedgerIntegrityError: duplicate or foreign stored rows
    """
    settings = settings or RecalculationSettings()
    contract = _coerce(contract, Contract)
    rows: List[RentLedgerRow] = [_coerce(r, RentLedgerRow) for r in existing_rows]

    periods = contract.period_range(now)
    if not len(periods):
        logger.info(
            f"Contract {contract.id}: no billable periods up to {periods.cutoff}"
        )

    resolver = IndexResolver.from_values(
        (_coerce(v, IndexValue) for v in index_values),
        base_period=periods.start,
        index_type=contract.index_type,
    )
    calculator = EscalationCalculator(
        base_amount=contract.initial_rent_amount,
        frequency=contract.rent_increase_frequency,
        resolver=resolver,
        settings=settings,
    )
    computed = calculator.compute(periods)
    plan = reconcile(contract.id, computed, rows, settings=settings)

    logger.info(
        f"Contract {contract.id}: {len(periods)} periods, "
        f"{len(plan.inserts)} inserts, {len(plan.updates)} updates"
    )
    return plan
