# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Index series lookup.

An index series (ICL, IPC, ...) is sparse: publication lags and data gaps
leave periods without a reading. The resolver reports such periods as
``None`` and never interpolates or fabricates a value.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, Optional

from pydantic import AliasChoices, Field

from ..core.exceptions import DuplicateIndexValueError
from ..core.primitives import BillingPeriod, StoredModel

logger = logging.getLogger(__name__)


class IndexValue(StoredModel):
    """
    Published index reading for one calendar month.

    Attributes:
        period_year: Calendar year of the reading
        period_month: Calendar month of the reading (1-12)
        value: Index reading, strictly positive
        index_type: Series the reading belongs to; untagged readings match any series
    """

    period_year: int = Field(ge=1)
    period_month: int = Field(ge=1, le=12)
    value: Decimal = Field(
        gt=0, validation_alias=AliasChoices("value", "icl_value", "ipc_value")
    )
    index_type: Optional[str] = None

    @property
    def period(self) -> BillingPeriod:
        return BillingPeriod(self.period_year, self.period_month)


class IndexResolver:
    """
    Period-keyed view over an index series, anchored at a contract's start period.

    Example:
        ```python
        resolver = IndexResolver.from_values(values, base_period=BillingPeriod(2023, 1))
        resolver.base_value()      # reading for 2023-01, or None
        resolver.lookup(2023, 4)   # reading for 2023-04, or None
        ```
    """

    def __init__(
        self,
        values: Dict[BillingPeriod, Decimal],
        base_period: BillingPeriod,
        index_type: Optional[str] = None,
    ):
        self._values = dict(values)
        self.base_period = base_period
        self.index_type = index_type

    @classmethod
    def from_values(
        cls,
        values: Iterable[IndexValue],
        base_period: BillingPeriod,
        index_type: Optional[str] = None,
    ) -> "IndexResolver":
        """
        Build a resolver from index readings.

        Readings tagged with another series than ``index_type`` are skipped.
        Repeated identical readings are tolerated.

        Raises:
            DuplicateIndexValueError: If one period has two different readings
        """
        series: Dict[BillingPeriod, Decimal] = {}
        skipped = 0
        for item in values:
            if index_type is not None and item.index_type not in (None, index_type):
                skipped += 1
                continue
            existing = series.get(item.period)
            if existing is not None and existing != item.value:
                raise DuplicateIndexValueError(
                    item.period_year, item.period_month, existing, item.value
                )
            series[item.period] = item.value

        if skipped:
            logger.debug(f"Skipped {skipped} index values not in series '{index_type}'")
        return cls(series, base_period=base_period, index_type=index_type)

    def lookup(self, year: int, month: int) -> Optional[Decimal]:
        """Index reading for (year, month), or None when the series has a gap."""
        return self._values.get(BillingPeriod(year, month))

    def base_value(self) -> Optional[Decimal]:
        """Index reading at the base (contract start) period, or None."""
        return self._values.get(self.base_period)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, period: BillingPeriod) -> bool:
        return period in self._values
