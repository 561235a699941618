# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
indexrent Core Primitives

Building blocks shared by the escalation and ledger layers: the immutable
model base, enums, billing periods and recalculation settings.
"""

from .enums import ContractStatusEnum, LedgerActionEnum, RentIncreaseFrequencyEnum
from .model import Model, StoredModel
from .period import BillingPeriod, PeriodRange
from .settings import RecalculationSettings, RoundingMode

__all__ = [
    # Core models
    "Model",
    "StoredModel",
    "BillingPeriod",
    "PeriodRange",
    # Settings
    "RecalculationSettings",
    "RoundingMode",
    # Enums
    "ContractStatusEnum",
    "LedgerActionEnum",
    "RentIncreaseFrequencyEnum",
]
