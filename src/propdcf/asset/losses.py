# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
General vacancy and credit loss allowances.

Both apply to potential rental income (scheduled plus market rent). Credit
loss is taken on what remains after the vacancy allowance.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from ..core.primitives import FloatBetween0And1, Model


@dataclass(frozen=True)
class LossAmounts:
    vacancy_loss: float
    credit_loss: float

    @property
    def total(self) -> float:
        return self.vacancy_loss + self.credit_loss


class Losses(Model):
    """Container for property-level loss assumptions."""

    general_vacancy_rate: FloatBetween0And1 = Field(
        default=0.0, description="Vacancy rate as decimal (e.g., 0.05 for 5%)"
    )
    credit_loss_rate: FloatBetween0And1 = Field(
        default=0.0, description="Credit/collection loss rate as decimal"
    )

    def apply(self, potential_rental_income: float) -> LossAmounts:
        vacancy_loss = potential_rental_income * self.general_vacancy_rate
        credit_loss = (potential_rental_income - vacancy_loss) * self.credit_loss_rate
        return LossAmounts(vacancy_loss=vacancy_loss, credit_loss=credit_loss)
