# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any

from ..exceptions import InvalidFrequencyError


class RentIncreaseFrequencyEnum(str, Enum):
    """
    Cadence on which a contract's rent is re-priced against its index.

    Options:
        MONTHLY: every period after the first
        QUARTERLY: every 3rd period offset
        SEMI_ANNUALLY: every 6th period offset
        ANNUALLY: every 12th period offset
    """

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    ANNUALLY = "annually"

    @property
    def months(self) -> int:
        """Number of months between two adjustment points."""
        return _CADENCE_MONTHS[self]

    @classmethod
    def parse(cls, value: Any) -> "RentIncreaseFrequencyEnum":
        """
        Convert a stored frequency value to the enum.

        Raises:
            InvalidFrequencyError: for anything outside the four supported values
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidFrequencyError(value)


_CADENCE_MONTHS = {
    RentIncreaseFrequencyEnum.MONTHLY: 1,
    RentIncreaseFrequencyEnum.QUARTERLY: 3,
    RentIncreaseFrequencyEnum.SEMI_ANNUALLY: 6,
    RentIncreaseFrequencyEnum.ANNUALLY: 12,
}


class ContractStatusEnum(str, Enum):
    """Lifecycle status of a lease contract (informational for recalculation)."""

    ACTIVE = "active"
    EXPIRED = "expired"
    RENEWED = "renewed"


class LedgerActionEnum(str, Enum):
    """What the caller must do with a reconciled ledger entry."""

    INSERT = "insert"
    UPDATE = "update"
