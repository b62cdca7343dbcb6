# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ExpenseCategoryEnum(str, Enum):
    """
    Operating expense buckets carried on the property.

    Taxes, insurance and repairs & maintenance are recoverable from tenants
    unless the bucket says otherwise; every other category defaults to
    non-recoverable.
    """

    TAXES = "Taxes"
    INSURANCE = "Insurance"
    REPAIRS_MAINTENANCE = "Repairs & Maintenance"
    UTILITIES = "Utilities"
    RESERVES = "Reserves"
    OTHER = "Other"

    @property
    def recoverable_by_default(self) -> bool:
        return self in (
            ExpenseCategoryEnum.TAXES,
            ExpenseCategoryEnum.INSURANCE,
            ExpenseCategoryEnum.REPAIRS_MAINTENANCE,
        )


class RenewalModeEnum(str, Enum):
    """How an expiring lease's renewal probability becomes a yes/no outcome."""

    THRESHOLD = "threshold"  # Renew iff probability >= threshold
    STOCHASTIC = "stochastic"  # Seeded random draw per lease


class CashFlowLineKey(str, Enum):
    """
    Annual cash flow line items, in presentation order.

    Values double as column labels for tabular output.
    """

    # --- Revenue Side ---
    SCHEDULED_BASE_RENT = "Scheduled Base Rent"
    MARKET_RENT = "Market Leasing Rent"
    POTENTIAL_RENTAL_INCOME = "Potential Rental Income"
    EXPENSE_REIMBURSEMENTS = "Expense Reimbursements"
    OTHER_INCOME = "Other Income"
    POTENTIAL_GROSS_REVENUE = "Potential Gross Revenue"
    GENERAL_VACANCY_LOSS = "General Vacancy Loss"
    CREDIT_LOSS = "Credit Loss"
    EFFECTIVE_GROSS_INCOME = "Effective Gross Income"

    # --- Expense Side ---
    RECOVERABLE_EXPENSES = "Recoverable Expenses"
    MANAGEMENT_FEE = "Management Fee"
    TOTAL_OPERATING_EXPENSES = "Total Operating Expenses"

    # --- Profitability ---
    NET_OPERATING_INCOME = "Net Operating Income"

    # --- Capital & Leasing Costs ---
    TOTAL_TENANT_IMPROVEMENTS = "Total Tenant Improvements"
    TOTAL_LEASING_COMMISSIONS = "Total Leasing Commissions"
    TOTAL_CAPITAL_EXPENDITURES = "Total Capital Expenditures"

    # --- Cash Flow ---
    NET_CASH_FLOW = "Net Cash Flow"
    NET_CASH_FLOW_WITH_REVERSION = "Net Cash Flow incl. Reversion"
    PRESENT_VALUE_FACTOR = "Present Value Factor"
    PRESENT_VALUE = "Present Value"
