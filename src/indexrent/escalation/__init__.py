# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent escalation: adjustment cadence, index lookup and the per-period
escalation fold.
"""

from .cadence import is_adjustment_period
from .calculator import EscalationCalculator, EscalationState
from .index import IndexResolver, IndexValue

__all__ = [
    "EscalationCalculator",
    "EscalationState",
    "IndexResolver",
    "IndexValue",
    "is_adjustment_period",
]
