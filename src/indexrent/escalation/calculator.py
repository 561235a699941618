# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Index-linked rent escalation.

Rent for each period is computed in a single left-to-right pass. The only
state carried between periods is the last adjusted amount, held in an
immutable ``EscalationState``; ``EscalationCalculator.step`` is a pure
function of (state, offset, period) and ``compute`` folds it over a period
sequence.

Rules per offset:
    0           initial rent, never adjusted
    escalation  base_amount * current_index / base_index, rounded; becomes
                the new carried amount
    otherwise   carried amount (also when either index reading is missing)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple, Union

from ..core.primitives import (
    BillingPeriod,
    RecalculationSettings,
    RentIncreaseFrequencyEnum,
)
from ..ledger.records import ZERO, ComputedPeriod
from .cadence import is_adjustment_period
from .index import IndexResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EscalationState:
    """Running state of the escalation fold."""

    last_adjusted_amount: Decimal


class EscalationCalculator:
    """
    Computes the rent due for each period of a contract.

    Args:
        base_amount: Contract initial rent (rent of offset 0)
        frequency: Escalation cadence
        resolver: Index series anchored at the contract start period
        settings: Rounding settings (defaults to 2 dp half-up)

    Raises:
        InvalidFrequencyError: If ``frequency`` is not a supported value
    """

    def __init__(
        self,
        base_amount: Union[Decimal, int, str],
        frequency: Union[RentIncreaseFrequencyEnum, str],
        resolver: IndexResolver,
        settings: Optional[RecalculationSettings] = None,
    ):
        self.base_amount = Decimal(str(base_amount))
        self.frequency = RentIncreaseFrequencyEnum.parse(frequency)
        self.resolver = resolver
        self.settings = settings or RecalculationSettings()

    def initial_state(self) -> EscalationState:
        return EscalationState(last_adjusted_amount=self.base_amount)

    def step(
        self,
        state: EscalationState,
        offset: int,
        period: BillingPeriod,
        base_index: Optional[Decimal],
    ) -> Tuple[EscalationState, ComputedPeriod]:
        """Compute one period from the previous state; returns the next state."""
        if offset == 0:
            return state, self._unadjusted(period, self.base_amount)

        if base_index is None or not is_adjustment_period(offset, self.frequency):
            return state, self._unadjusted(period, state.last_adjusted_amount)

        current_index = self.resolver.lookup(period.year, period.month)
        if current_index is None:
            logger.debug(
                f"No index value for {period}; carrying {state.last_adjusted_amount}"
            )
            return state, self._unadjusted(period, state.last_adjusted_amount)

        factor = current_index / base_index
        amount = self.settings.round_amount(self.base_amount * factor)
        logger.debug(
            f"Escalation at {period}: {current_index}/{base_index} -> {amount}"
        )
        computed = ComputedPeriod(
            period_year=period.year,
            period_month=period.month,
            amount=amount,
            amount_paid=ZERO,
            base_amount=self.base_amount,
            icl_adjustment_factor=self.settings.round_factor(factor),
            base_icl_value=base_index,
            adjustment_icl_value=current_index,
            is_adjusted=True,
            adjustment_period_month=period.month,
            adjustment_period_year=period.year,
        )
        return EscalationState(last_adjusted_amount=amount), computed

    def compute(self, periods: Iterable[BillingPeriod]) -> List[ComputedPeriod]:
        """Fold ``step`` over ``periods`` (offset 0 = first period) in order."""
        base_index = self.resolver.base_value()
        if base_index is None:
            logger.debug(
                f"No base index value for {self.resolver.base_period}; rent will not escalate"
            )

        state = self.initial_state()
        computed: List[ComputedPeriod] = []
        for offset, period in enumerate(periods):
            state, row = self.step(state, offset, period, base_index)
            computed.append(row)
        return computed

    def _unadjusted(self, period: BillingPeriod, amount: Decimal) -> ComputedPeriod:
        return ComputedPeriod(
            period_year=period.year,
            period_month=period.month,
            amount=amount,
            amount_paid=ZERO,
            base_amount=self.base_amount,
        )
