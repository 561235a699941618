# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from indexrent.core.primitives import RecalculationSettings


def test_default_settings_round_half_up_to_cents():
    settings = RecalculationSettings()
    assert settings.decimal_precision == 2
    assert settings.round_amount(Decimal("1234.565")) == Decimal("1234.57")
    assert settings.round_amount(Decimal("1234.564")) == Decimal("1234.56")
    assert settings.round_amount(Decimal("0.005")) == Decimal("0.01")


def test_factor_rounding_uses_factor_precision():
    settings = RecalculationSettings()
    assert settings.round_factor(Decimal("1.1234565")) == Decimal("1.123457")


def test_custom_precision_and_rounding_mode():
    settings = RecalculationSettings(decimal_precision=0, rounding="ROUND_HALF_EVEN")
    assert settings.round_amount(Decimal("1002.5")) == Decimal("1002")
    assert settings.round_amount(Decimal("1003.5")) == Decimal("1004")


def test_settings_are_validated_and_frozen():
    with pytest.raises(ValidationError):
        RecalculationSettings(rounding="ROUND_SOMETIMES")
    with pytest.raises(ValidationError):
        RecalculationSettings(decimal_precision=-1)
    with pytest.raises(ValidationError):
        RecalculationSettings(unknown_field=True)

    settings = RecalculationSettings()
    with pytest.raises(ValidationError):
        settings.decimal_precision = 4
