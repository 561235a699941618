# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ledger reconciliation: merge computed periods into a stored ledger.

The merge is a pure function of two maps keyed by (year, month). Each
computed period becomes exactly one tagged entry: ``Insert`` when no row is
stored for its key, ``Update`` (carrying the stored row id) otherwise. The
stored ``amount_paid`` is copied verbatim into updates, new rows start at 0.
Stored rows outside the computed range are never touched; they are reported
on the plan as orphaned rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.exceptions import LedgerIntegrityError
from ..core.primitives import LedgerActionEnum, RecalculationSettings
from .records import ZERO, ComputedPeriod, ContractId, LedgerRowId, RentLedgerRow

logger = logging.getLogger(__name__)

PeriodKey = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Insert:
    """A computed period with no stored row: create it."""

    action: ClassVar[LedgerActionEnum] = LedgerActionEnum.INSERT

    period: ComputedPeriod


@dataclass(frozen=True, slots=True)
class Update:
    """A computed period with a stored row: overwrite row ``id`` in place."""

    action: ClassVar[LedgerActionEnum] = LedgerActionEnum.UPDATE

    id: LedgerRowId
    period: ComputedPeriod


LedgerEntry = Union[Insert, Update]


@dataclass(frozen=True)
class RecalculationPlan:
    """
    Insert/update instructions for one contract, in period order.

    Attributes:
        contract_id: Contract the plan belongs to
        entries: One tagged entry per computed period
        orphaned_rows: Stored rows outside the computed range (left untouched)
    """

    contract_id: ContractId
    entries: Tuple[LedgerEntry, ...] = ()
    orphaned_rows: Tuple[RentLedgerRow, ...] = ()

    @property
    def inserts(self) -> List[ComputedPeriod]:
        return [e.period for e in self.entries if isinstance(e, Insert)]

    @property
    def updates(self) -> List[Update]:
        return [e for e in self.entries if isinstance(e, Update)]

    @property
    def periods(self) -> List[ComputedPeriod]:
        """Merged ledger for display, inserts and updates together."""
        return [e.period for e in self.entries]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def to_records(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Plan as plain dicts ready for a storage client.

        Every record carries ``contract_id``; update records also carry ``id``.
        """
        inserts = []
        updates = []
        for entry in self.entries:
            record = {"contract_id": self.contract_id, **entry.period.to_record()}
            if isinstance(entry, Update):
                updates.append({"id": entry.id, **record})
            else:
                inserts.append(record)
        return {"inserts": inserts, "updates": updates}


def index_ledger_rows(
    rows: Iterable[RentLedgerRow], contract_id: Optional[ContractId] = None
) -> Dict[PeriodKey, RentLedgerRow]:
    """
    Key stored rows by (year, month).

    Raises:
        LedgerIntegrityError: If two rows share a period, or a row belongs to
            a contract other than ``contract_id``
    """
    indexed: Dict[PeriodKey, RentLedgerRow] = {}
    for row in rows:
        if contract_id is not None and row.contract_id != contract_id:
            raise LedgerIntegrityError(
                f"Ledger row {row.id} belongs to contract {row.contract_id}, "
                f"not {contract_id}"
            )
        key = row.period.key
        if key in indexed:
            raise LedgerIntegrityError(
                f"Duplicate ledger rows {indexed[key].id} and {row.id} for period {row.period}"
            )
        indexed[key] = row
    return indexed


def merge_periods(
    computed: Mapping[PeriodKey, ComputedPeriod],
    existing: Mapping[PeriodKey, RentLedgerRow],
) -> List[LedgerEntry]:
    """Classify each computed period as an insert or an update, in period order."""
    entries: List[LedgerEntry] = []
    for key in sorted(computed):
        period = computed[key]
        row = existing.get(key)
        if row is None:
            entries.append(Insert(period.with_amount_paid(ZERO)))
        else:
            entries.append(Update(row.id, period.with_amount_paid(row.amount_paid)))
    return entries


def reconcile(
    contract_id: ContractId,
    computed: Sequence[ComputedPeriod],
    existing_rows: Iterable[RentLedgerRow],
    settings: Optional[RecalculationSettings] = None,
) -> RecalculationPlan:
    """
    Build the recalculation plan for a contract.

    Args:
        contract_id: Contract being recalculated
        computed: Escalation output, one record per period
        existing_rows: Stored ledger rows for the contract
        settings: Controls orphaned-row warnings

    Returns:
        RecalculationPlan with one entry per computed period
    """
    settings = settings or RecalculationSettings()
    existing = index_ledger_rows(existing_rows, contract_id=contract_id)
    computed_by_key = {c.period.key: c for c in computed}
    if len(computed_by_key) != len(computed):
        raise LedgerIntegrityError("Computed periods contain a repeated (year, month)")

    entries = merge_periods(computed_by_key, existing)
    orphaned = tuple(
        existing[key] for key in sorted(existing) if key not in computed_by_key
    )
    if orphaned and settings.warn_on_orphaned_rows:
        logger.warning(
            f"Contract {contract_id}: {len(orphaned)} stored rent rows outside the "
            f"recalculated range left untouched "
            f"({', '.join(str(r.period) for r in orphaned[:5])}"
            f"{', ...' if len(orphaned) > 5 else ''})"
        )

    return RecalculationPlan(
        contract_id=contract_id, entries=tuple(entries), orphaned_rows=orphaned
    )
