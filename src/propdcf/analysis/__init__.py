# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdcf Analysis - the annual projection fold and DCF entry points.
"""

from .cash_flow import CashFlowAggregator, ProjectionState
from .orchestrator import run, run_monte_carlo, run_sensitivity
from .results import AnnualCashFlowRecord, DCFResult, OperatingYear

__all__ = [
    "AnnualCashFlowRecord",
    "CashFlowAggregator",
    "DCFResult",
    "OperatingYear",
    "ProjectionState",
    "run",
    "run_monte_carlo",
    "run_sensitivity",
]
