# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reversion (terminal) value at the end of the projection horizon.

The final projected year's NOI is grown one year forward and capitalized at
the exit cap rate; costs of sale are deducted to get the net reversion,
which is added to the final year's net cash flow only.
"""

from __future__ import annotations

import logging

from pydantic import Field

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat

logger = logging.getLogger(__name__)


class ReversionValue(Model):
    """Computed reversion figures."""

    year_n_plus_one_noi: float = 0.0
    gross_reversion: float = 0.0
    net_reversion: float = 0.0

    @property
    def transaction_costs(self) -> float:
        return self.gross_reversion - self.net_reversion


class ReversionValuation(Model):
    """
    Exit valuation by direct capitalization of forward NOI.

    Attributes:
        cap_rate: Exit cap rate (decimal); zero disables the reversion
        transaction_costs_rate: Costs of sale as a decimal of gross value
        noi_growth_rate: Growth from final-year NOI to year N+1 NOI

    Example:
        >>> reversion = ReversionValuation(cap_rate=0.08, transaction_costs_rate=0.03)
        >>> round(reversion.calculate(100_000.0).net_reversion, 2)
        1212500.0
    """

    cap_rate: PositiveFloat
    transaction_costs_rate: FloatBetween0And1 = 0.0
    noi_growth_rate: float = Field(default=0.0, ge=-1.0)

    @property
    def net_sale_proceeds_rate(self) -> float:
        return 1.0 - self.transaction_costs_rate

    def calculate(self, final_year_noi: float) -> ReversionValue:
        if self.cap_rate == 0:
            logger.warning("Exit cap rate is zero; reversion value set to zero")
            return ReversionValue()

        forward_noi = final_year_noi * (1.0 + self.noi_growth_rate)
        gross = forward_noi / self.cap_rate
        return ReversionValue(
            year_n_plus_one_noi=forward_noi,
            gross_reversion=gross,
            net_reversion=gross * self.net_sale_proceeds_rate,
        )
