# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Annual cash flow aggregation.

The projection is a fold over years: ``step`` takes the carried
``ProjectionState`` (pooled vacant area and area already leased at market)
and a year index, and returns that year's ``OperatingYear`` together with
the next state. Nothing is mutated in place.

Per-year order of operations:

1. Project every lease (rent, TI/LC, vacancy after expiry)
2. Lease the vacancy pool at market
3. Apply general vacancy and credit loss to potential rental income
4. Grow other income
5. Project expenses on rental-only EGI, allocate reimbursements, then
   reconcile the management fee on the final EGI
6. NOI = EGI - operating expenses
7. Capital items; net cash flow = NOI - TI/LC - capital
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..asset.absorption import MarketLeasingEngine
from ..asset.capital import capital_outflow
from ..asset.expense import ExpenseProjector
from ..asset.lease import LeaseProjector
from ..asset.property import PropertyInputs
from ..asset.recovery import calculate_reimbursements
from ..asset.rollover import RenewalPolicy
from .results import OperatingYear

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionState:
    """State carried from one projection year to the next."""

    vacant_area: float = 0.0
    market_leased_area: float = 0.0


class CashFlowAggregator:
    """Builds the annual operating statements for a property."""

    def __init__(self, inputs: PropertyInputs):
        self.inputs = inputs
        self.lease_projector = LeaseProjector(
            effective_date=inputs.effective_date,
            market_rent_growth_rate=inputs.market_rent_growth_rate,
            renewal_policy=RenewalPolicy(inputs.settings.renewal),
            cpi_rate=inputs.cpi_rate,
        )
        self.market_engine = MarketLeasingEngine(
            inputs.market_leasing, inputs.market_rent_growth_rate
        )
        self.expense_projector = ExpenseProjector(
            inputs.expenses, inputs.management_fee, inputs.expense_inflation_rate
        )

    def initial_state(self) -> ProjectionState:
        return ProjectionState(vacant_area=self.inputs.initial_vacant_area)

    def step(
        self, state: ProjectionState, year_index: int
    ) -> Tuple[OperatingYear, ProjectionState, List[str]]:
        inputs = self.inputs
        year_number = year_index + 1
        warnings: List[str] = []

        # 1. Leases
        scheduled_rent = 0.0
        lease_ti = 0.0
        lease_lc = 0.0
        newly_vacant = 0.0
        tenants = []
        for lease_index, lease in enumerate(inputs.leases):
            projection = self.lease_projector.project(lease, year_index, lease_index)
            scheduled_rent += projection.scheduled_rent
            lease_ti += projection.ti_cost
            lease_lc += projection.lc_cost
            if projection.vacant_after_expiry:
                newly_vacant += lease.area
            if projection.occupied:
                tenants.append((lease.area, lease.reimbursement))
            if projection.escalation_fallback:
                warnings.append(
                    f"Year {year_number}, lease {lease.label}: {projection.escalation_fallback}"
                )

        # 2. Market leasing of the vacancy pool
        market = self.market_engine.lease_up(
            state.vacant_area + newly_vacant, state.market_leased_area, year_index
        )
        if inputs.market_leasing is not None and market.leased_area > 0:
            tenants.append((market.leased_area, inputs.market_leasing.reimbursement))

        # 3. Vacancy and credit loss on rental income
        potential_rental_income = scheduled_rent + market.rent
        losses = inputs.losses.apply(potential_rental_income)
        rental_egi = potential_rental_income - losses.vacancy_loss - losses.credit_loss

        # 4. Other income
        other_income = 0.0
        for item in inputs.other_income:
            other_income += item.amount_for_year(year_index, inputs.market_rent_growth_rate)

        # 5. Expenses, reimbursements, management fee reconciliation
        provisional = self.expense_projector.project(year_index, rental_egi)
        reimbursements = calculate_reimbursements(
            tenants, provisional.recoverable_total, inputs.rentable_area
        )
        if reimbursements.skipped and tenants:
            warnings.append(f"Year {year_number}: rentable area is zero; reimbursements skipped")

        potential_gross_revenue = potential_rental_income + reimbursements.total + other_income
        effective_gross_income = (
            potential_gross_revenue - losses.vacancy_loss - losses.credit_loss
        )
        expenses = self.expense_projector.reconcile(
            provisional, year_index, effective_gross_income
        )

        # 6. NOI
        operating_expenses = expenses.total_opex
        net_operating_income = effective_gross_income - operating_expenses

        # 7. Capital and net cash flow
        capital = capital_outflow(
            inputs.capital_items,
            year_number,
            potential_gross_revenue,
            effective_gross_income,
            inputs.rentable_area,
        )
        tenant_improvements = lease_ti + market.ti_cost
        leasing_commissions = lease_lc + market.lc_cost
        net_cash_flow = (
            net_operating_income - (tenant_improvements + leasing_commissions) - capital
        )

        operating_year = OperatingYear(
            year=year_number,
            scheduled_base_rent=scheduled_rent,
            market_rent=market.rent,
            potential_rental_income=potential_rental_income,
            expense_reimbursements=reimbursements.total,
            other_income=other_income,
            potential_gross_revenue=potential_gross_revenue,
            general_vacancy_loss=losses.vacancy_loss,
            credit_loss=losses.credit_loss,
            effective_gross_income=effective_gross_income,
            recoverable_expenses=expenses.recoverable_total,
            management_fee=expenses.management_fee,
            operating_expenses=operating_expenses,
            net_operating_income=net_operating_income,
            tenant_improvements=tenant_improvements,
            leasing_commissions=leasing_commissions,
            capital_expenditures=capital,
            net_cash_flow=net_cash_flow,
            vacant_area=market.vacant_area,
            market_leased_area=market.leased_area,
        )
        logger.debug(
            "Year %d: PGR=%.2f EGI=%.2f OpEx=%.2f NOI=%.2f NCF=%.2f",
            year_number,
            potential_gross_revenue,
            effective_gross_income,
            operating_expenses,
            net_operating_income,
            net_cash_flow,
        )

        next_state = ProjectionState(
            vacant_area=market.vacant_area, market_leased_area=market.leased_area
        )
        return operating_year, next_state, warnings

    def project(self) -> Tuple[List[OperatingYear], List[str]]:
        """Fold ``step`` across the horizon."""
        state = self.initial_state()
        years: List[OperatingYear] = []
        warnings: List[str] = []
        for year_index in range(self.inputs.projection_years):
            operating_year, state, year_warnings = self.step(state, year_index)
            years.append(operating_year)
            warnings.extend(year_warnings)
        return years, warnings
