# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Speculative market leasing of vacant space.

Space that is vacant at the effective date, plus space vacated by leases
that do not renew, accumulates in a vacancy pool. With market leasing
assumptions configured, the whole pool is leased at market in the year it
becomes available (no partial absorption); previously leased market space
keeps paying full-year market rent in later years. Without assumptions the
pool is carried forward unleased.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat
from .recovery import AnyReimbursement, GrossReimbursement

logger = logging.getLogger(__name__)


class MarketLeasingAssumptions(Model):
    """
    Lease-up terms for speculative leases.

    Attributes:
        market_rent_per_area: Market rent per area as of the effective date
        months_to_lease: Downtime before a new lease starts paying
        ti_per_area: Tenant improvement allowance per area for new leases
        lc_rate: Leasing commission as a decimal of first-year market rent
        reimbursement: Reimbursement structure for new market leases
    """

    market_rent_per_area: PositiveFloat
    months_to_lease: PositiveFloat = 0.0
    ti_per_area: PositiveFloat = 0.0
    lc_rate: FloatBetween0And1 = 0.0
    reimbursement: AnyReimbursement = Field(default_factory=GrossReimbursement)

    @property
    def downtime_factor(self) -> float:
        return max(0.0, (12.0 - self.months_to_lease) / 12.0)


@dataclass(frozen=True)
class MarketLeasingOutcome:
    """Speculative leasing results for one projection year."""

    rent: float = 0.0
    ti_cost: float = 0.0
    lc_cost: float = 0.0
    newly_leased_area: float = 0.0
    vacant_area: float = 0.0
    leased_area: float = 0.0


class MarketLeasingEngine:
    """Leases pooled vacant area at market for each projection year."""

    def __init__(
        self,
        assumptions: Optional[MarketLeasingAssumptions],
        market_rent_growth_rate: float,
    ):
        self.assumptions = assumptions
        self.market_rent_growth_rate = market_rent_growth_rate

    def inflated_market_rent(self, year_index: int) -> float:
        if self.assumptions is None:
            return 0.0
        return self.assumptions.market_rent_per_area * (
            1.0 + self.market_rent_growth_rate
        ) ** year_index

    def lease_up(
        self, vacant_area: float, leased_area: float, year_index: int
    ) -> MarketLeasingOutcome:
        """
        Lease the available pool for a year.

        Args:
            vacant_area: Pooled vacant area available this year
            leased_area: Area already leased at market in prior years
            year_index: 0-based projection year

        Returns:
            MarketLeasingOutcome with this year's rent/TI/LC and updated areas
        """
        if self.assumptions is None:
            return MarketLeasingOutcome(vacant_area=vacant_area, leased_area=leased_area)

        rent_per_area = self.inflated_market_rent(year_index)
        new_lease_rent = vacant_area * rent_per_area
        outcome = MarketLeasingOutcome(
            rent=new_lease_rent * self.assumptions.downtime_factor
            + leased_area * rent_per_area,
            ti_cost=vacant_area * self.assumptions.ti_per_area,
            lc_cost=new_lease_rent * self.assumptions.lc_rate,
            newly_leased_area=vacant_area,
            vacant_area=0.0,
            leased_area=leased_area + vacant_area,
        )
        if vacant_area > 0:
            logger.debug(
                "Year %d: leased %.0f area at market %.2f/area",
                year_index + 1,
                vacant_area,
                rent_per_area,
            )
        return outcome
