# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recalculation service: load, compute and apply a plan for one contract.

Two overlapping recalculations of the same contract would each read a stale
ledger snapshot and could overwrite each other's payment data. The service
holds a per-contract lock across read, compute and write; different contracts
proceed independently.
"""

from __future__ import annotations

import logging
import threading
import weakref
from datetime import date
from typing import Any, Callable, List, Optional

from ..core.exceptions import ContractNotFoundError, IndexRentError, LedgerPersistenceError
from ..core.primitives import RecalculationSettings
from ..ledger import RecalculationPlan, RentLedgerRow
from ..ledger.records import ContractId
from .api import recalculate
from .repository import LedgerRepository

logger = logging.getLogger(__name__)


class RecalculationService:
    """
    Runs recalculations against a ``LedgerRepository``.

    Args:
        repository: Storage collaborator
        settings: Rounding and reporting settings passed to ``recalculate``
        clock: Returns today's date; injectable for tests
    """

    def __init__(
        self,
        repository: LedgerRepository,
        settings: Optional[RecalculationSettings] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self.settings = settings or RecalculationSettings()
        self.clock = clock
        # Entries live only while some caller holds (or waits on) the lock
        self._locks: "weakref.WeakValueDictionary[ContractId, threading.Lock]" = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    def lock_for(self, contract_id: ContractId) -> threading.Lock:
        """Lock serializing recalculations of ``contract_id``."""
        with self._locks_guard:
            lock = self._locks.get(contract_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[contract_id] = lock
            return lock

    def _call(self, contract_id: ContractId, operation: str, func: Callable[..., Any], *args):
        try:
            return func(*args)
        except IndexRentError:
            raise
        except Exception as e:
            raise LedgerPersistenceError(
                f"{operation} failed: {e}", contract_id=contract_id
            ) from e

    def plan(self, contract_id: ContractId, now: Optional[date] = None) -> RecalculationPlan:
        """
        Compute the plan for a contract without writing it.

        Raises:
            ContractNotFoundError: If the repository has no such contract
            LedgerPersistenceError: If a repository read fails
        """
        now = now or self.clock()
        contract = self._call(
            contract_id, "load_contract", self.repository.load_contract, contract_id
        )
        if contract is None:
            raise ContractNotFoundError(contract_id)

        years = contract.period_range(now).years
        index_values = self._call(
            contract_id,
            "load_index_values",
            self.repository.load_index_values,
            contract.index_type,
            years,
        )
        existing_rows = self._call(
            contract_id,
            "load_existing_ledger_rows",
            self.repository.load_existing_ledger_rows,
            contract_id,
        )
        return recalculate(
            contract, index_values, existing_rows, now=now, settings=self.settings
        )

    def recalculate_contract(
        self, contract_id: ContractId, now: Optional[date] = None
    ) -> List[RentLedgerRow]:
        """
        Recalculate, persist and return the contract's stored ledger in period order.

        Raises:
            ContractNotFoundError: If the repository has no such contract
            LedgerPersistenceError: If a repository read or write fails
        """
        with self.lock_for(contract_id):
            plan = self.plan(contract_id, now=now)
            if not plan.is_empty:
                self._call(
                    contract_id, "apply_plan", self.repository.apply_plan, contract_id, plan
                )
                logger.info(
                    f"Contract {contract_id}: applied {len(plan.inserts)} inserts "
                    f"and {len(plan.updates)} updates"
                )
            rows = self._call(
                contract_id,
                "load_existing_ledger_rows",
                self.repository.load_existing_ledger_rows,
                contract_id,
            )
        return sorted(rows, key=lambda r: (r.period_year, r.period_month))
