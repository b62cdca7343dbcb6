# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease renewal assumptions and the policy that resolves them.

At expiry each lease either renews on its renewal terms or goes dark and
hands its area to market leasing. ``RenewalPolicy`` turns the lease's
renewal probability into that binary outcome:

- threshold (default): renew iff probability >= threshold. Deterministic.
- stochastic: one uniform draw per lease from a generator seeded with
  ``[seed, lease_index]``, so outcomes are reproducible for a given seed and
  independent of how many other leases are drawn.
"""

from __future__ import annotations

import logging

import numpy as np
from pydantic import Field

from ..core.primitives import (
    FloatBetween0And1,
    Model,
    PositiveFloat,
    PositiveInt,
    RenewalModeEnum,
    RenewalSettings,
)

logger = logging.getLogger(__name__)


class RenewalTerms(Model):
    """
    Renewal assumptions for a single lease.

    Attributes:
        probability: Likelihood the tenant renews (decimal)
        term_years: Length of the renewal term
        rent_bump_rate: Increase over the last escalated contract rent; when
            zero the renewal market rent applies instead
        downtime_months: Months dark before the renewal term begins paying
        free_rent_months: Months of free rent granted on renewal
        ti_per_area: Tenant improvement allowance per area
        lc_rate: Leasing commission as a decimal of first-year renewal rent
        market_rent_per_area: Renewal market rent per area as of the
            effective date
    """

    probability: FloatBetween0And1 = 0.0
    term_years: PositiveInt = 5
    rent_bump_rate: float = Field(default=0.0, ge=-1.0)
    downtime_months: PositiveFloat = 0.0
    free_rent_months: PositiveFloat = 0.0
    ti_per_area: PositiveFloat = 0.0
    lc_rate: FloatBetween0And1 = 0.0
    market_rent_per_area: PositiveFloat = 0.0

    @property
    def first_year_factor(self) -> float:
        """Share of the first renewal year that pays rent."""
        return max(0.0, (12.0 - self.downtime_months - self.free_rent_months) / 12.0)


class RenewalPolicy:
    """Resolves renewal probabilities into renew / vacate outcomes."""

    def __init__(self, settings: RenewalSettings):
        self.settings = settings

    def will_renew(self, lease_index: int, probability: float) -> bool:
        if self.settings.mode == RenewalModeEnum.STOCHASTIC:
            rng = np.random.default_rng([self.settings.seed, lease_index])
            draw = float(rng.random())
            renews = draw < probability
            logger.debug(
                "Lease %d stochastic renewal: draw=%.4f probability=%.4f renews=%s",
                lease_index,
                draw,
                probability,
                renews,
            )
            return renews
        return probability >= self.settings.threshold
