# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exception classes for indexrent.

Data gaps in the index series are not errors: the escalation layer carries
the last adjusted rent forward instead of raising. The classes below cover
caller input mistakes, inconsistent ledger snapshots and collaborator
failures, each as a distinct kind so that callers can tell a rejected input
apart from a failed write.
"""

from __future__ import annotations

from typing import Any, Optional


class IndexRentError(Exception):
    """Base class for all indexrent errors."""


class InvalidFrequencyError(IndexRentError, ValueError):
    """
    Raised for a rent increase frequency outside the supported set.

    Unknown values are rejected rather than defaulted so that a misconfigured
    contract does not silently escalate on the wrong cadence.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Unknown rent increase frequency {value!r}; expected one of "
            "'monthly', 'quarterly', 'semi-annually', 'annually'"
        )


class DuplicateIndexValueError(IndexRentError, ValueError):
    """Raised when an index series holds two different readings for one period."""

    def __init__(self, year: int, month: int, first: Any, second: Any):
        self.year = year
        self.month = month
        super().__init__(
            f"Conflicting index values for {year}-{month:02d}: {first} and {second}"
        )


class LedgerIntegrityError(IndexRentError):
    """
    Raised when an existing ledger snapshot cannot be reconciled safely.

    Examples: two stored rows for the same (year, month), or a row that
    belongs to a different contract.
    """


class ContractNotFoundError(IndexRentError, LookupError):
    """Raised by the service layer when the repository has no such contract."""

    def __init__(self, contract_id: Any):
        self.contract_id = contract_id
        super().__init__(f"Contract {contract_id!r} not found")


class LedgerPersistenceError(IndexRentError):
    """
    Raised when a repository read or write fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, contract_id: Optional[Any] = None):
        self.contract_id = contract_id
        prefix = f"[Contract {contract_id}] " if contract_id is not None else ""
        super().__init__(f"{prefix}{message}")
