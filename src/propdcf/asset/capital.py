# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scheduled capital expenditures.

Each item applies only in its designated projection year (1-based). The
amount is expressed by one of four variants resolved against that year's
figures.
"""

from __future__ import annotations

from typing import List, Literal, Union

from pydantic import Field
from typing_extensions import Annotated

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat


class FixedAmount(Model):
    kind: Literal["fixed"] = "fixed"
    amount: PositiveFloat

    def resolve(self, pgr: float, egi: float, rentable_area: float) -> float:
        return self.amount


class PercentOfPGI(Model):
    kind: Literal["percent_of_pgi"] = "percent_of_pgi"
    rate: FloatBetween0And1

    def resolve(self, pgr: float, egi: float, rentable_area: float) -> float:
        return pgr * self.rate


class PercentOfEGI(Model):
    kind: Literal["percent_of_egi"] = "percent_of_egi"
    rate: FloatBetween0And1

    def resolve(self, pgr: float, egi: float, rentable_area: float) -> float:
        return egi * self.rate


class PerArea(Model):
    kind: Literal["per_area"] = "per_area"
    amount_per_area: PositiveFloat

    def resolve(self, pgr: float, egi: float, rentable_area: float) -> float:
        return self.amount_per_area * rentable_area


AnyCapitalAmount = Annotated[
    Union[FixedAmount, PercentOfPGI, PercentOfEGI, PerArea],
    Field(discriminator="kind"),
]


class CapitalItem(Model):
    """A capital expenditure scheduled for one projection year."""

    year: int = Field(..., ge=1, description="1-based projection year")
    description: str
    amount: AnyCapitalAmount


def capital_outflow(
    items: List[CapitalItem],
    year_number: int,
    pgr: float,
    egi: float,
    rentable_area: float,
) -> float:
    """Total capital outflow for a 1-based projection year."""
    total = 0.0
    for item in items:
        if item.year == year_number:
            total += item.amount.resolve(pgr, egi, rentable_area)
    return total
