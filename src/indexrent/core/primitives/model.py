# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: a contract, an index reading or a stored ledger row never
    changes during a recalculation.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )


class StoredModel(Model):
    """Model for records read back from storage.

    Storage columns the engine does not use (``created_at``, ``updated_at``,
    the computed ``balance``) are dropped on validation.
    """

    model_config = ConfigDict(extra="ignore")
