# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent escalation structures.

Each lease carries exactly one escalation variant, selected by the ``kind``
discriminator. Every variant answers the same question: given the base
contract rent per area and the number of full lease years elapsed, what is
the rent per area now?
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional, Tuple, Union

from pydantic import Field, field_validator
from typing_extensions import Annotated

from ..core.primitives import Model, PositiveFloat

logger = logging.getLogger(__name__)


class FixedPercentEscalation(Model):
    """
    Compounding annual escalation on each lease anniversary.

    Example:
        >>> esc = FixedPercentEscalation(rate=0.025)
        >>> esc.rent_per_area(15.0, years_into_lease=4)[0]  # doctest: +ELLIPSIS
        16.5571...
    """

    kind: Literal["fixed_percent"] = "fixed_percent"
    rate: float = Field(
        default=0.0, ge=-1.0, description="Annual escalation as a decimal (0.03 for 3%)"
    )

    def rent_per_area(
        self,
        base_rent_per_area: float,
        years_into_lease: int,
        cpi_fallback_rate: Optional[float] = None,
    ) -> Tuple[float, Optional[str]]:
        return base_rent_per_area * (1.0 + self.rate) ** years_into_lease, None


class StepUpEntry(Model):
    """A scheduled rent per area that takes effect in a given lease year (1-indexed)."""

    year_in_term: int = Field(..., ge=1)
    rent_per_area: PositiveFloat


class StepUpEscalation(Model):
    """
    Explicit rent schedule keyed by lease year.

    The rent for a lease year is the latest entry whose ``year_in_term`` is at
    or before it; before the first entry the contract rent applies.
    """

    kind: Literal["step_up"] = "step_up"
    schedule: List[StepUpEntry] = Field(default_factory=list)

    @field_validator("schedule")
    @classmethod
    def sort_schedule(cls, v: List[StepUpEntry]) -> List[StepUpEntry]:
        return sorted(v, key=lambda entry: entry.year_in_term)

    def rent_per_area(
        self,
        base_rent_per_area: float,
        years_into_lease: int,
        cpi_fallback_rate: Optional[float] = None,
    ) -> Tuple[float, Optional[str]]:
        if not self.schedule:
            return base_rent_per_area, "step-up escalation has an empty schedule"

        lease_year = years_into_lease + 1
        rent = base_rent_per_area
        for entry in self.schedule:
            if entry.year_in_term > lease_year:
                break
            rent = entry.rent_per_area
        return rent, None


class CPIEscalation(Model):
    """
    CPI-indexed escalation reviewed every ``review_frequency_years``.

    Rent is flat between reviews and compounds by the CPI rate once per
    elapsed review cycle. When no lease-level rate is given the property's
    global CPI assumption is used.
    """

    kind: Literal["cpi"] = "cpi"
    rate: Optional[float] = Field(
        default=None, ge=-1.0, description="Lease-specific CPI rate; None uses the global rate"
    )
    review_frequency_years: int = Field(default=1, ge=1)

    def rent_per_area(
        self,
        base_rent_per_area: float,
        years_into_lease: int,
        cpi_fallback_rate: Optional[float] = None,
    ) -> Tuple[float, Optional[str]]:
        rate = self.rate if self.rate is not None else cpi_fallback_rate
        if rate is None:
            return base_rent_per_area, "CPI escalation has no lease or global CPI rate"

        cycles = years_into_lease // self.review_frequency_years
        return base_rent_per_area * (1.0 + rate) ** cycles, None


AnyRentEscalation = Annotated[
    Union[FixedPercentEscalation, StepUpEscalation, CPIEscalation],
    Field(discriminator="kind"),
]
