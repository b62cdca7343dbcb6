# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leases and the per-year lease projector.

The projector answers, for one lease and one projection year, how much rent
is scheduled, what TI/LC is spent, and whether the suite went dark after
expiry. It never mutates the lease; renewal outcomes come from the
``RenewalPolicy`` and are stable for a given lease index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from pydantic import Field, model_validator

from ..core.primitives import (
    Model,
    PositiveFloat,
    ProjectionYear,
    StrictlyPositiveFloat,
    add_years,
    expired_within_prior_year,
    full_years_elapsed,
    projection_year,
)
from .recovery import AnyReimbursement, GrossReimbursement
from .rent_escalation import AnyRentEscalation, FixedPercentEscalation
from .rollover import RenewalPolicy, RenewalTerms

logger = logging.getLogger(__name__)


class Lease(Model):
    """
    An in-place lease on the rent roll.

    Attributes:
        suite: Suite identifier
        tenant_name: Optional tenant name for reporting
        area: Leased area (must be positive)
        rent_per_area: Annual contract rent per area at lease start
        start_date: Lease commencement (inclusive)
        end_date: Lease expiration (inclusive, on or after start_date)
        escalation: Rent escalation structure
        reimbursement: Expense reimbursement structure
        renewal: Renewal assumptions applied at expiry
    """

    suite: str
    tenant_name: Optional[str] = None
    area: StrictlyPositiveFloat
    rent_per_area: PositiveFloat
    start_date: date
    end_date: date
    escalation: AnyRentEscalation = Field(default_factory=FixedPercentEscalation)
    reimbursement: AnyReimbursement = Field(default_factory=GrossReimbursement)
    renewal: RenewalTerms = Field(default_factory=RenewalTerms)

    @model_validator(mode="after")
    def validate_dates(self) -> "Lease":
        if self.end_date < self.start_date:
            raise ValueError(
                f"Lease {self.suite}: end_date {self.end_date} is before start_date {self.start_date}"
            )
        return self

    @property
    def base_annual_rent(self) -> float:
        return self.area * self.rent_per_area

    @property
    def label(self) -> str:
        return f"{self.suite} ({self.tenant_name})" if self.tenant_name else self.suite


@dataclass(frozen=True)
class LeaseYearProjection:
    """One lease's contribution to one projection year."""

    scheduled_rent: float = 0.0
    ti_cost: float = 0.0
    lc_cost: float = 0.0
    vacant_after_expiry: bool = False
    occupied: bool = False
    renewed: bool = False
    escalation_fallback: Optional[str] = None


class LeaseProjector:
    """
    Projects individual leases across the analysis horizon.

    Args:
        effective_date: Property effective date anchoring projection years
        market_rent_growth_rate: Annual growth applied to renewal rents
        renewal_policy: Resolves renewal probabilities at expiry
        cpi_rate: Global CPI rate for CPI escalations without their own rate
    """

    def __init__(
        self,
        effective_date: date,
        market_rent_growth_rate: float,
        renewal_policy: RenewalPolicy,
        cpi_rate: Optional[float] = None,
    ):
        self.effective_date = effective_date
        self.market_rent_growth_rate = market_rent_growth_rate
        self.renewal_policy = renewal_policy
        self.cpi_rate = cpi_rate

    def project(self, lease: Lease, year_index: int, lease_index: int = 0) -> LeaseYearProjection:
        year = projection_year(self.effective_date, year_index)

        if year.overlaps(lease.start_date, lease.end_date):
            return self._project_in_term(lease, year)

        if lease.end_date < year.start:
            return self._project_after_expiry(lease, year, lease_index)

        # Lease has not commenced yet
        return LeaseYearProjection()

    def _project_in_term(self, lease: Lease, year: ProjectionYear) -> LeaseYearProjection:
        years_into_lease = full_years_elapsed(lease.start_date, year.start)
        rent_per_area, fallback = lease.escalation.rent_per_area(
            lease.rent_per_area, years_into_lease, self.cpi_rate
        )
        if fallback:
            logger.warning(
                "Lease %s year %d: %s; using flat base rent",
                lease.label,
                year.number,
                fallback,
            )
        return LeaseYearProjection(
            scheduled_rent=lease.area * rent_per_area,
            occupied=True,
            escalation_fallback=fallback,
        )

    def _project_after_expiry(
        self, lease: Lease, year: ProjectionYear, lease_index: int
    ) -> LeaseYearProjection:
        renews = self.renewal_policy.will_renew(lease_index, lease.renewal.probability)
        expiry = self.renewal_anchor(lease)
        renewal_end = add_years(expiry, max(1, lease.renewal.term_years))

        if expired_within_prior_year(expiry, year.start):
            if not renews:
                logger.debug("Lease %s does not renew; vacant from year %d", lease.label, year.number)
                return LeaseYearProjection(vacant_after_expiry=True)

            rent_per_area = self.renewal_rent_per_area(lease, year)
            full_year_rent = lease.area * rent_per_area
            return LeaseYearProjection(
                scheduled_rent=full_year_rent * lease.renewal.first_year_factor,
                ti_cost=lease.area * lease.renewal.ti_per_area,
                lc_cost=full_year_rent * lease.renewal.lc_rate,
                occupied=True,
                renewed=True,
            )

        if not renews:
            return LeaseYearProjection()

        if year.start <= renewal_end:
            return LeaseYearProjection(
                scheduled_rent=lease.area * self.renewal_rent_per_area(lease, year),
                occupied=True,
                renewed=True,
            )

        if expired_within_prior_year(renewal_end, year.start):
            return LeaseYearProjection(vacant_after_expiry=True)

        return LeaseYearProjection()

    def renewal_anchor(self, lease: Lease) -> date:
        """
        Date from which a lease's expiry is resolved.

        Leases that expired more than a year before the effective date are
        resolved in projection year 1, as if they expired the day before it.
        """
        if lease.end_date < add_years(self.effective_date, -1):
            return self.effective_date - timedelta(days=1)
        return lease.end_date

    def last_escalated_rent_per_area(self, lease: Lease) -> float:
        """Contract rent per area in force on the expiration date."""
        years = full_years_elapsed(lease.start_date, lease.end_date)
        rent, _ = lease.escalation.rent_per_area(lease.rent_per_area, years, self.cpi_rate)
        return rent

    def renewal_rent_per_area(self, lease: Lease, year: ProjectionYear) -> float:
        """
        Renewal rent per area for a projection year.

        The renewal market rent applies unless a rent bump is set, in which
        case the bump is taken over the last escalated contract rent. Either
        base is grown by market rent growth from the effective date.
        """
        terms = lease.renewal
        base = terms.market_rent_per_area
        if terms.rent_bump_rate != 0:
            base = self.last_escalated_rent_per_area(lease) * (1.0 + terms.rent_bump_rate)
        return base * (1.0 + self.market_rent_growth_rate) ** max(0, year.index)
