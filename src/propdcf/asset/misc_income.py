# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.primitives import Model, PositiveFloat


class OtherIncomeItem(Model):
    """
    Non-rental income (parking, antenna, storage, ...).

    Added to potential gross revenue; not subject to vacancy or credit loss.
    """

    description: str
    amount: PositiveFloat
    growth_rate: Optional[float] = Field(
        default=None, ge=-1.0, description="Item growth rate; None uses market rent growth"
    )

    def amount_for_year(self, year_index: int, global_growth_rate: float) -> float:
        rate = self.growth_rate if self.growth_rate is not None else global_growth_rate
        return self.amount * (1.0 + rate) ** year_index
