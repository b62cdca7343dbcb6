# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Asset inputs and per-year projectors: leases, escalation, recovery,
renewal, market leasing, expenses, other income, losses and capital items.
"""

from .absorption import MarketLeasingAssumptions, MarketLeasingEngine, MarketLeasingOutcome
from .capital import (
    AnyCapitalAmount,
    CapitalItem,
    FixedAmount,
    PerArea,
    PercentOfEGI,
    PercentOfPGI,
    capital_outflow,
)
from .expense import ExpenseBucket, ExpenseProjection, ExpenseProjector, ManagementFee
from .lease import Lease, LeaseProjector, LeaseYearProjection
from .losses import LossAmounts, Losses
from .misc_income import OtherIncomeItem
from .property import PropertyInputs
from .recovery import (
    AnyReimbursement,
    GrossReimbursement,
    ModifiedGrossReimbursement,
    NNNReimbursement,
    ReimbursementSummary,
    calculate_reimbursements,
)
from .rent_escalation import (
    AnyRentEscalation,
    CPIEscalation,
    FixedPercentEscalation,
    StepUpEntry,
    StepUpEscalation,
)
from .rollover import RenewalPolicy, RenewalTerms

__all__ = [
    # Leases
    "Lease",
    "LeaseProjector",
    "LeaseYearProjection",
    "RenewalPolicy",
    "RenewalTerms",
    # Escalation
    "AnyRentEscalation",
    "CPIEscalation",
    "FixedPercentEscalation",
    "StepUpEntry",
    "StepUpEscalation",
    # Recovery
    "AnyReimbursement",
    "GrossReimbursement",
    "ModifiedGrossReimbursement",
    "NNNReimbursement",
    "ReimbursementSummary",
    "calculate_reimbursements",
    # Market leasing
    "MarketLeasingAssumptions",
    "MarketLeasingEngine",
    "MarketLeasingOutcome",
    # Expenses and income
    "ExpenseBucket",
    "ExpenseProjection",
    "ExpenseProjector",
    "ManagementFee",
    "OtherIncomeItem",
    "LossAmounts",
    "Losses",
    # Capital
    "AnyCapitalAmount",
    "CapitalItem",
    "FixedAmount",
    "PerArea",
    "PercentOfEGI",
    "PercentOfPGI",
    "capital_outflow",
    # Property
    "PropertyInputs",
]
