# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Data-access collaborator used by ``RecalculationService``.

``LedgerRepository`` is the interface a storage backend implements.
``InMemoryLedgerRepository`` keeps everything in dictionaries; it backs the
tests and examples and documents the expected semantics of ``apply_plan``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import count
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.exceptions import LedgerPersistenceError
from ..escalation import IndexValue
from ..ledger import Contract, RecalculationPlan, RentLedgerRow, Update
from ..ledger.records import ContractId, LedgerRowId


class LedgerRepository(ABC):
    """Storage interface for contracts, index series and rent ledger rows."""

    @abstractmethod
    def load_contract(self, contract_id: ContractId) -> Optional[Contract]:
        """Contract by id, or None when it does not exist."""

    @abstractmethod
    def load_index_values(self, index_type: str, years: range) -> List[IndexValue]:
        """Readings of the ``index_type`` series whose year falls in ``years``."""

    @abstractmethod
    def load_existing_ledger_rows(self, contract_id: ContractId) -> List[RentLedgerRow]:
        """Stored ledger rows of a contract."""

    @abstractmethod
    def apply_plan(self, contract_id: ContractId, plan: RecalculationPlan) -> None:
        """Persist the plan's inserts and updates."""


class InMemoryLedgerRepository(LedgerRepository):
    """
    Dictionary-backed repository.

    Rows are unique per (contract_id, year, month); inserted rows receive
    sequential integer ids.
    """

    def __init__(
        self,
        contracts: Iterable[Contract] = (),
        index_values: Iterable[IndexValue] = (),
        rows: Iterable[RentLedgerRow] = (),
    ):
        self.contracts: Dict[ContractId, Contract] = {c.id: c for c in contracts}
        self.index_values: List[IndexValue] = list(index_values)
        self.rows: Dict[LedgerRowId, RentLedgerRow] = {}
        for row in rows:
            self._store(row)
        next_id = max((r.id for r in self.rows.values() if isinstance(r.id, int)), default=0) + 1
        self._ids = count(next_id)

    def _key(self, row: RentLedgerRow) -> Tuple[ContractId, int, int]:
        return (row.contract_id, row.period_year, row.period_month)

    def _store(self, row: RentLedgerRow) -> None:
        for other in self.rows.values():
            if other.id != row.id and self._key(other) == self._key(row):
                raise LedgerPersistenceError(
                    f"Row for period {row.period} already exists (id {other.id})",
                    contract_id=row.contract_id,
                )
        self.rows[row.id] = row

    def load_contract(self, contract_id: ContractId) -> Optional[Contract]:
        return self.contracts.get(contract_id)

    def load_index_values(self, index_type: str, years: range) -> List[IndexValue]:
        return [
            v
            for v in self.index_values
            if v.period_year in years and v.index_type in (None, index_type)
        ]

    def load_existing_ledger_rows(self, contract_id: ContractId) -> List[RentLedgerRow]:
        rows = [r for r in self.rows.values() if r.contract_id == contract_id]
        return sorted(rows, key=lambda r: (r.period_year, r.period_month))

    def apply_plan(self, contract_id: ContractId, plan: RecalculationPlan) -> None:
        for entry in plan.entries:
            if isinstance(entry, Update):
                if entry.id not in self.rows:
                    raise LedgerPersistenceError(
                        f"Cannot update missing ledger row {entry.id}",
                        contract_id=contract_id,
                    )
                row_id = entry.id
            else:
                row_id = next(self._ids)
            self._store(RentLedgerRow.from_computed(row_id, contract_id, entry.period))
