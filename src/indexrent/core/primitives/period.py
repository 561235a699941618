# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Billing periods and contract period ranges.

A billing period is a calendar (year, month); the day of any date is ignored.
``PeriodRange`` enumerates the contiguous months from a contract's start
period through its cutoff, the earlier of the end period and the "now" period.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Tuple

import pandas as pd


@dataclass(frozen=True, slots=True, order=True)
class BillingPeriod:
    """One billing month of a contract."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "BillingPeriod":
        """Period containing ``value`` (accepts date, datetime and pd.Timestamp)."""
        return cls(value.year, value.month)

    @property
    def key(self) -> Tuple[int, int]:
        return (self.year, self.month)

    def shift(self, months: int) -> "BillingPeriod":
        """Period ``months`` calendar months later (earlier when negative)."""
        index = self.year * 12 + (self.month - 1) + months
        return BillingPeriod(index // 12, index % 12 + 1)

    def months_until(self, other: "BillingPeriod") -> int:
        """Signed number of calendar months from this period to ``other``."""
        return (other.year - self.year) * 12 + (other.month - self.month)

    def to_period(self) -> pd.Period:
        return pd.Period(year=self.year, month=self.month, freq="M")

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


@dataclass(frozen=True, slots=True)
class PeriodRange:
    """
    Ordered, restartable sequence of billing periods from ``start`` to ``cutoff``.

    Iteration walks forward one calendar month at a time; iterating twice
    yields the same periods. When the cutoff precedes the start the range is
    empty, which is a valid outcome (nothing billable yet), not an error.

    Examples:
        >>> from datetime import date
        >>> periods = PeriodRange.for_contract(
        ...     date(2023, 11, 1), date(2024, 12, 31), now=date(2024, 2, 10)
        ... )
        >>> [str(p) for p in periods]
        ['2023-11', '2023-12', '2024-01', '2024-02']
    """

    start: BillingPeriod
    cutoff: BillingPeriod

    @classmethod
    def for_contract(
        cls, start_date: date, end_date: date, now: date
    ) -> "PeriodRange":
        """Range for a contract evaluated at ``now`` (cutoff = min(end, now))."""
        end_period = BillingPeriod.from_date(end_date)
        now_period = BillingPeriod.from_date(now)
        return cls(
            start=BillingPeriod.from_date(start_date),
            cutoff=min(end_period, now_period),
        )

    @property
    def total_months(self) -> int:
        """Number of periods in the range, zero when the cutoff precedes the start."""
        return max(self.start.months_until(self.cutoff) + 1, 0)

    @property
    def years(self) -> range:
        """Calendar years touched by the range (empty for an empty range)."""
        if not self.total_months:
            return range(0)
        return range(self.start.year, self.cutoff.year + 1)

    def __len__(self) -> int:
        return self.total_months

    def __iter__(self) -> Iterator[BillingPeriod]:
        period = self.start
        for _ in range(self.total_months):
            yield period
            period = period.shift(1)

    def to_period_index(self) -> pd.PeriodIndex:
        """Monthly ``pd.PeriodIndex`` covering the range."""
        if not self.total_months:
            return pd.PeriodIndex([], freq="M")
        return pd.period_range(
            start=self.start.to_period(), periods=self.total_months, freq="M"
        )
