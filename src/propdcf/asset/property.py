# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property-level inputs for a DCF run.

``PropertyInputs`` is the complete, pre-validated input contract: the rent
roll, capital schedule, expense buckets, growth and loss assumptions, and
valuation parameters. It is immutable; every analysis run derives its own
state from it.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from ..core.primitives import (
    AnalysisSettings,
    FloatBetween0And1,
    Model,
    PositiveFloat,
)
from .absorption import MarketLeasingAssumptions
from .capital import CapitalItem
from .expense import ExpenseBucket, ManagementFee
from .lease import Lease
from .losses import Losses
from .misc_income import OtherIncomeItem


class PropertyInputs(Model):
    """
    Everything the DCF engine needs for one valuation.

    Attributes:
        name: Property name for reporting
        effective_date: Valuation date; projection year 1 starts here
        rentable_area: Total rentable area (pro-rata denominator)
        projection_years: Horizon in years; values <= 0 yield no result
        leases: In-place rent roll
        capital_items: Scheduled capital expenditures
        expenses: Operating expense buckets (excluding management fee)
        management_fee: Management fee as a percentage of EGI
        other_income: Non-rental income items
        market_leasing: Lease-up assumptions for vacant space (optional)
        losses: General vacancy and credit loss rates
        market_rent_growth_rate: Annual market rent growth
        expense_inflation_rate: Default annual expense inflation
        cpi_rate: Global CPI rate for CPI escalations without their own rate
        discount_rate: Annual discount rate
        exit_cap_rate: Cap rate applied to year N+1 NOI at reversion
        sale_cost_rate: Costs of sale as a decimal of gross reversion
        terminal_noi_growth_rate: Growth from year N to N+1 NOI; None uses
            market rent growth
        settings: Engine behaviour settings
    """

    name: str = "Subject Property"
    effective_date: date
    rentable_area: PositiveFloat
    projection_years: int = 10

    leases: List[Lease] = Field(default_factory=list)
    capital_items: List[CapitalItem] = Field(default_factory=list)
    expenses: List[ExpenseBucket] = Field(default_factory=list)
    management_fee: Optional[ManagementFee] = None
    other_income: List[OtherIncomeItem] = Field(default_factory=list)
    market_leasing: Optional[MarketLeasingAssumptions] = None
    losses: Losses = Field(default_factory=Losses)

    market_rent_growth_rate: float = Field(default=0.0, ge=-1.0)
    expense_inflation_rate: float = Field(default=0.0, ge=-1.0)
    cpi_rate: Optional[float] = Field(default=None, ge=-1.0)

    discount_rate: PositiveFloat
    exit_cap_rate: PositiveFloat
    sale_cost_rate: FloatBetween0And1 = 0.0
    terminal_noi_growth_rate: Optional[float] = Field(default=None, ge=-1.0)

    settings: AnalysisSettings = Field(default_factory=AnalysisSettings)

    @property
    def resolved_terminal_growth_rate(self) -> float:
        if self.terminal_noi_growth_rate is not None:
            return self.terminal_noi_growth_rate
        return self.market_rent_growth_rate

    @property
    def leased_area(self) -> float:
        return sum((lease.area for lease in self.leases), 0.0)

    @property
    def initial_vacant_area(self) -> float:
        """Rentable area not covered by any lease on the roll."""
        return max(0.0, self.rentable_area - self.leased_area)
