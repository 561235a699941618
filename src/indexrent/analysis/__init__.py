# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recalculation entry points: the pure ``recalculate`` function and the
repository-backed ``RecalculationService``.
"""

from .api import recalculate
from .repository import InMemoryLedgerRepository, LedgerRepository
from .service import RecalculationService

__all__ = [
    "InMemoryLedgerRepository",
    "LedgerRepository",
    "RecalculationService",
    "recalculate",
]
