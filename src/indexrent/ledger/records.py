# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Data models for contracts and rent ledger rows.

Inputs (``Contract``, ``RentLedgerRow``) are validated Pydantic models owned
by the persistence layer. ``ComputedPeriod`` is the engine's output unit and
follows the frozen-dataclass record pattern used for ledger records.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from ..core.primitives import (
    BillingPeriod,
    ContractStatusEnum,
    PeriodRange,
    RentIncreaseFrequencyEnum,
    StoredModel,
)

ContractId = Union[int, str]
LedgerRowId = Union[int, str]

ZERO = Decimal("0")


class Contract(StoredModel):
    """
    Lease contract whose rent escalates against a price index.

    Attributes:
        id: Contract identifier
        unit_id: Rented unit
        tenant_id: Resident holding the lease
        start_date: First billable date (only year and month are significant)
        end_date: Last billable date (only year and month are significant)
        initial_rent_amount: Rent for the start period, base of every escalation
        rent_increase_frequency: Escalation cadence; absent values default to quarterly
        currency: Currency code of all amounts
        index_type: Index series used for escalation (e.g. "icl", "ipc")
        status: Lifecycle status, informational
    """

    id: ContractId
    unit_id: ContractId
    tenant_id: ContractId
    start_date: date
    end_date: date
    initial_rent_amount: Decimal = Field(ge=0)
    rent_increase_frequency: RentIncreaseFrequencyEnum = RentIncreaseFrequencyEnum.QUARTERLY
    currency: str = "ARS"
    index_type: str = Field(
        default="icl", validation_alias=AliasChoices("index_type", "icl_index_type")
    )
    status: ContractStatusEnum = ContractStatusEnum.ACTIVE

    @field_validator("rent_increase_frequency", mode="before")
    @classmethod
    def parse_frequency(cls, v: Any) -> RentIncreaseFrequencyEnum:
        if v is None:
            return RentIncreaseFrequencyEnum.QUARTERLY
        return RentIncreaseFrequencyEnum.parse(v)

    @property
    def start_period(self) -> BillingPeriod:
        return BillingPeriod.from_date(self.start_date)

    @property
    def end_period(self) -> BillingPeriod:
        return BillingPeriod.from_date(self.end_date)

    def period_range(self, now: date) -> PeriodRange:
        """Billable periods from the start period through min(end, now)."""
        return PeriodRange.for_contract(self.start_date, self.end_date, now)


class RentLedgerRow(StoredModel):
    """
    A stored rent ledger row for one contract period.

    Only ``id``, the period key and ``amount_paid`` are needed to reconcile;
    the remaining fields mirror what a previous recalculation stored.
    """

    id: LedgerRowId
    contract_id: ContractId
    period_year: int = Field(ge=1)
    period_month: int = Field(ge=1, le=12)
    amount_paid: Decimal = Field(default=ZERO, ge=0)

    amount: Optional[Decimal] = None
    base_amount: Optional[Decimal] = None
    icl_adjustment_factor: Optional[Decimal] = None
    base_icl_value: Optional[Decimal] = None
    adjustment_icl_value: Optional[Decimal] = None
    is_adjusted: bool = False
    adjustment_period_month: Optional[int] = None
    adjustment_period_year: Optional[int] = None

    @field_validator("amount_paid", mode="before")
    @classmethod
    def default_unpaid(cls, v: Any) -> Any:
        # NULL in storage means nothing has been paid yet
        return ZERO if v is None else v

    @property
    def period(self) -> BillingPeriod:
        return BillingPeriod(self.period_year, self.period_month)

    @property
    def balance(self) -> Optional[Decimal]:
        if self.amount is None:
            return None
        return self.amount - self.amount_paid

    @classmethod
    def from_computed(
        cls, id: LedgerRowId, contract_id: ContractId, computed: "ComputedPeriod"
    ) -> "RentLedgerRow":
        """Row as it is stored after applying ``computed``."""
        return cls(id=id, contract_id=contract_id, **computed.to_record())


@dataclass(frozen=True, slots=True)
class ComputedPeriod:
    """
    Freshly computed rent for one contract period.

    Attributes:
        period_year: Calendar year of the period
        period_month: Calendar month of the period (1-12)
        amount: Rent due for the period
        amount_paid: Payments carried over from the stored row (0 for new rows)
        base_amount: Contract's initial rent, constant across periods
        icl_adjustment_factor: current / base index ratio, set only on an escalation
        base_icl_value: Index reading at the contract start, set only on an escalation
        adjustment_icl_value: Index reading at this period, set only on an escalation
        is_adjusted: True only when an escalation was applied in this period
        adjustment_period_month: Echo of period_month on an escalation
        adjustment_period_year: Echo of period_year on an escalation
    """

    period_year: int
    period_month: int
    amount: Decimal
    amount_paid: Decimal
    base_amount: Decimal
    icl_adjustment_factor: Optional[Decimal] = None
    base_icl_value: Optional[Decimal] = None
    adjustment_icl_value: Optional[Decimal] = None
    is_adjusted: bool = False
    adjustment_period_month: Optional[int] = None
    adjustment_period_year: Optional[int] = None

    @property
    def period(self) -> BillingPeriod:
        return BillingPeriod(self.period_year, self.period_month)

    @property
    def balance(self) -> Decimal:
        """Outstanding amount for the period."""
        return self.amount - self.amount_paid

    def with_amount_paid(self, amount_paid: Decimal) -> "ComputedPeriod":
        return replace(self, amount_paid=amount_paid)

    def to_record(self) -> Dict[str, Any]:
        """Field mapping using the ledger's external column names."""
        return asdict(self)
