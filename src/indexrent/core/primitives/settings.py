# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Configuration settings for rent recalculation.

Defaults reproduce the ledger's storage conventions: amounts in two decimal
places rounded half-up, adjustment factors kept to six decimal places.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from pydantic import Field

from .model import Model

RoundingMode = Literal[
    "ROUND_HALF_UP",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_DOWN",
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_05UP",
]


class RecalculationSettings(Model):
    """
    Settings controlling how computed rent amounts are rounded and reported.

    Usage Examples:
        # Storage defaults (2 dp, half-up)
        settings = RecalculationSettings()

        # Whole-currency ledgers
        settings = RecalculationSettings(decimal_precision=0)
    """

    decimal_precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Number of decimal places for computed rent amounts.",
    )
    factor_precision: int = Field(
        default=6,
        ge=0,
        le=12,
        description="Number of decimal places kept on the stored adjustment factor.",
    )
    rounding: RoundingMode = Field(
        default=ROUND_HALF_UP,
        description="decimal rounding mode applied to computed amounts and factors.",
    )
    warn_on_orphaned_rows: bool = Field(
        default=True,
        description=(
            "Log a warning when the stored ledger holds rows outside the "
            "recalculated period range. Such rows are never modified."
        ),
    )

    def round_amount(self, value: Decimal) -> Decimal:
        """Round a computed rent amount to ``decimal_precision`` places."""
        return value.quantize(Decimal(1).scaleb(-self.decimal_precision), rounding=self.rounding)

    def round_factor(self, value: Decimal) -> Decimal:
        """Round an adjustment factor to ``factor_precision`` places."""
        return value.quantize(Decimal(1).scaleb(-self.factor_precision), rounding=self.rounding)
