# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdcf Valuation - reversion, discounting and return metrics.
"""

from .dcf import (
    DiscountedCashFlows,
    calculate_sensitivity_analysis,
    discount_cash_flows,
    going_in_cap_rate,
    present_value_factor,
)
from .metrics import PropertyMetrics, net_present_value, solve_irr
from .reversion import ReversionValuation, ReversionValue

__all__ = [
    "DiscountedCashFlows",
    "PropertyMetrics",
    "ReversionValuation",
    "ReversionValue",
    "calculate_sensitivity_analysis",
    "discount_cash_flows",
    "going_in_cap_rate",
    "net_present_value",
    "present_value_factor",
    "solve_irr",
]
