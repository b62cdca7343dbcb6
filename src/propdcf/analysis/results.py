# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Result models for a DCF run.

``OperatingYear`` is the fully computed operating statement for one year as
produced by the projection fold. Once the reversion and discounting are
known it is finalized into an immutable ``AnnualCashFlowRecord``; records
cannot be built with fields missing or with broken EGI/NOI identities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd
from pydantic import Field, model_validator

from ..core.primitives import CashFlowLineKey, Model
from ..valuation.reversion import ReversionValue


def _same(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-12, abs_tol=1e-9)


@dataclass(frozen=True)
class OperatingYear:
    """Operating figures for one projection year, before reversion and discounting."""

    year: int
    scheduled_base_rent: float
    market_rent: float
    potential_rental_income: float
    expense_reimbursements: float
    other_income: float
    potential_gross_revenue: float
    general_vacancy_loss: float
    credit_loss: float
    effective_gross_income: float
    recoverable_expenses: float
    management_fee: float
    operating_expenses: float
    net_operating_income: float
    tenant_improvements: float
    leasing_commissions: float
    capital_expenditures: float
    net_cash_flow: float
    vacant_area: float
    market_leased_area: float

    def finalize(
        self, reversion_proceeds: float, present_value_factor: float
    ) -> "AnnualCashFlowRecord":
        with_reversion = self.net_cash_flow + reversion_proceeds
        return AnnualCashFlowRecord(
            **{name: getattr(self, name) for name in self.__dataclass_fields__},
            net_cash_flow_with_reversion=with_reversion,
            present_value_factor=present_value_factor,
            present_value=with_reversion * present_value_factor,
        )


class AnnualCashFlowRecord(Model):
    """One projection year of the DCF."""

    year: int = Field(..., ge=1)

    # Revenue
    scheduled_base_rent: float
    market_rent: float
    potential_rental_income: float
    expense_reimbursements: float
    other_income: float
    potential_gross_revenue: float
    general_vacancy_loss: float
    credit_loss: float
    effective_gross_income: float

    # Expenses
    recoverable_expenses: float
    management_fee: float
    operating_expenses: float
    net_operating_income: float

    # Below NOI
    tenant_improvements: float
    leasing_commissions: float
    capital_expenditures: float
    net_cash_flow: float

    # Space
    vacant_area: float
    market_leased_area: float

    # Valuation
    net_cash_flow_with_reversion: float
    present_value_factor: float
    present_value: float

    @property
    def tenant_improvements_and_commissions(self) -> float:
        return self.tenant_improvements + self.leasing_commissions

    @model_validator(mode="after")
    def check_identities(self) -> "AnnualCashFlowRecord":
        expected_egi = self.potential_gross_revenue - self.general_vacancy_loss - self.credit_loss
        if not _same(self.effective_gross_income, expected_egi):
            raise ValueError(
                f"Year {self.year}: EGI {self.effective_gross_income} != PGR - vacancy - credit ({expected_egi})"
            )
        expected_noi = self.effective_gross_income - self.operating_expenses
        if not _same(self.net_operating_income, expected_noi):
            raise ValueError(
                f"Year {self.year}: NOI {self.net_operating_income} != EGI - OpEx ({expected_noi})"
            )
        expected_ncf = (
            self.net_operating_income
            - self.tenant_improvements_and_commissions
            - self.capital_expenditures
        )
        if not _same(self.net_cash_flow, expected_ncf):
            raise ValueError(
                f"Year {self.year}: net cash flow {self.net_cash_flow} != NOI - TI/LC - CapEx ({expected_ncf})"
            )
        return self


# Column order for tabular output
_LINE_FIELDS = [
    (CashFlowLineKey.SCHEDULED_BASE_RENT, "scheduled_base_rent"),
    (CashFlowLineKey.MARKET_RENT, "market_rent"),
    (CashFlowLineKey.POTENTIAL_RENTAL_INCOME, "potential_rental_income"),
    (CashFlowLineKey.EXPENSE_REIMBURSEMENTS, "expense_reimbursements"),
    (CashFlowLineKey.OTHER_INCOME, "other_income"),
    (CashFlowLineKey.POTENTIAL_GROSS_REVENUE, "potential_gross_revenue"),
    (CashFlowLineKey.GENERAL_VACANCY_LOSS, "general_vacancy_loss"),
    (CashFlowLineKey.CREDIT_LOSS, "credit_loss"),
    (CashFlowLineKey.EFFECTIVE_GROSS_INCOME, "effective_gross_income"),
    (CashFlowLineKey.RECOVERABLE_EXPENSES, "recoverable_expenses"),
    (CashFlowLineKey.MANAGEMENT_FEE, "management_fee"),
    (CashFlowLineKey.TOTAL_OPERATING_EXPENSES, "operating_expenses"),
    (CashFlowLineKey.NET_OPERATING_INCOME, "net_operating_income"),
    (CashFlowLineKey.TOTAL_TENANT_IMPROVEMENTS, "tenant_improvements"),
    (CashFlowLineKey.TOTAL_LEASING_COMMISSIONS, "leasing_commissions"),
    (CashFlowLineKey.TOTAL_CAPITAL_EXPENDITURES, "capital_expenditures"),
    (CashFlowLineKey.NET_CASH_FLOW, "net_cash_flow"),
    (CashFlowLineKey.NET_CASH_FLOW_WITH_REVERSION, "net_cash_flow_with_reversion"),
    (CashFlowLineKey.PRESENT_VALUE_FACTOR, "present_value_factor"),
    (CashFlowLineKey.PRESENT_VALUE, "present_value"),
]


class DCFResult(Model):
    """
    Whole-run DCF output.

    Attributes:
        annual_cash_flows: One record per projection year, in order
        total_present_value: Sum of discounted net cash flows (the DCF value)
        going_in_cap_rate: Year-1 NOI / total present value (decimal)
        irr: Internal rate of return (decimal), nan when unsolvable
        reversion: Terminal value figures
        warnings: Flagged fallbacks encountered during the run
    """

    annual_cash_flows: List[AnnualCashFlowRecord]
    total_present_value: float
    going_in_cap_rate: float = Field(
        ..., description="Year-1 NOI / total present value as a decimal (0.07 for 7%)"
    )
    irr: float = Field(
        ..., description="Internal rate of return as a decimal (0.085 for 8.5%); nan when unsolvable"
    )
    reversion: ReversionValue
    warnings: List[str] = Field(default_factory=list)

    @property
    def horizon(self) -> int:
        return len(self.annual_cash_flows)

    @property
    def terminal_value_gross(self) -> float:
        return self.reversion.gross_reversion

    @property
    def terminal_value_net(self) -> float:
        return self.reversion.net_reversion

    @property
    def year_n_plus_one_noi(self) -> float:
        return self.reversion.year_n_plus_one_noi

    @property
    def year_one(self) -> Optional[AnnualCashFlowRecord]:
        """Year-1 record, for direct-capitalization consumers."""
        return self.annual_cash_flows[0] if self.annual_cash_flows else None

    @property
    def irr_cash_flows(self) -> List[float]:
        """The signed series the IRR is solved on: -value, then years 1..N."""
        return [-self.total_present_value] + [
            record.net_cash_flow_with_reversion for record in self.annual_cash_flows
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Annual cash flows as a DataFrame indexed by projection year."""
        data = {
            key.value: [getattr(record, name) for record in self.annual_cash_flows]
            for key, name in _LINE_FIELDS
        }
        index = pd.Index([record.year for record in self.annual_cash_flows], name="Year")
        return pd.DataFrame(data, index=index)
