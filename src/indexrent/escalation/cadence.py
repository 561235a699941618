# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Adjustment cadence: which period offsets are escalation points.

Offsets count months from the contract's start period (offset 0). Offset 0
satisfies every cadence here; the escalation calculator excludes it because
the start period always bills the initial rent.
"""

from __future__ import annotations

from typing import Union

from ..core.primitives import RentIncreaseFrequencyEnum


def is_adjustment_period(
    offset: int, frequency: Union[RentIncreaseFrequencyEnum, str]
) -> bool:
    """
    Whether the period at ``offset`` is an escalation point for ``frequency``.

    Args:
        offset: Zero-based month offset from the contract start period
        frequency: Contract rent increase frequency (enum or stored string)

    Returns:
        True every month for monthly contracts, otherwise when the offset is a
        multiple of 3 (quarterly), 6 (semi-annually) or 12 (annually).

    Raises:
        InvalidFrequencyError: If ``frequency`` is not a supported value
        ValueError: If ``offset`` is negative
    """
    if offset < 0:
        raise ValueError(f"Period offset must be non-negative, got {offset}")
    cadence = RentIncreaseFrequencyEnum.parse(frequency)
    return offset % cadence.months == 0
