# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Discounting of annual net cash flows to present value.

Year ``t`` (1-based) is discounted by ``1 / (1 + r) ** t``. The final year's
cash flow is expected to already include the net reversion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence

import pandas as pd

from .reversion import ReversionValuation

if TYPE_CHECKING:
    from ..analysis.results import DCFResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscountedCashFlows:
    """Per-year discount factors and present values, plus their sum."""

    factors: List[float]
    present_values: List[float]
    total_present_value: float


def present_value_factor(discount_rate: float, year_number: int) -> float:
    """Discount factor for a 1-based year. Zero when the denominator vanishes."""
    denominator = (1.0 + discount_rate) ** year_number
    if denominator == 0:
        return 0.0
    return 1.0 / denominator


def discount_cash_flows(cash_flows: Sequence[float], discount_rate: float) -> DiscountedCashFlows:
    """
    Discount a series of annual cash flows for years 1..N.

    Args:
        cash_flows: Net cash flows for years 1..N (final year incl. reversion)
        discount_rate: Annual discount rate as a decimal

    Returns:
        DiscountedCashFlows with factors, present values and their total
    """
    factors = [present_value_factor(discount_rate, t) for t in range(1, len(cash_flows) + 1)]
    present_values = [cf * factor for cf, factor in zip(cash_flows, factors)]
    total = 0.0
    for pv in present_values:
        total += pv
    return DiscountedCashFlows(
        factors=factors, present_values=present_values, total_present_value=total
    )


def going_in_cap_rate(year_one_noi: float, total_present_value: float) -> float:
    """Year-1 NOI over the DCF value; zero when the value is zero."""
    if total_present_value == 0:
        return 0.0
    return year_one_noi / total_present_value


def calculate_sensitivity_analysis(
    result: "DCFResult",
    discount_rate: float,
    exit_cap_rate: float,
    sale_cost_rate: float,
    noi_growth_rate: float,
    discount_rate_range: tuple[float, float] = (-0.01, 0.01),
    cap_rate_range: tuple[float, float] = (-0.005, 0.005),
    steps: int = 5,
) -> pd.DataFrame:
    """
    Total present value over a grid of discount and exit cap rates.

    Operating cash flows are taken from ``result``; only the reversion and
    the discounting are recomputed for each grid point.

    Args:
        result: A completed DCF result
        discount_rate: Base discount rate
        exit_cap_rate: Base exit cap rate
        sale_cost_rate: Costs of sale rate
        noi_growth_rate: Year N to N+1 NOI growth
        discount_rate_range: (min, max) delta applied to the discount rate
        cap_rate_range: (min, max) delta applied to the exit cap rate
        steps: Grid points along each axis (>= 2)

    Returns:
        DataFrame with one row per (discount rate, cap rate) combination
    """
    if steps < 2:
        raise ValueError("steps must be at least 2")

    def grid(base: float, bounds: tuple[float, float]) -> List[float]:
        low, high = bounds
        return [base + low + i * (high - low) / (steps - 1) for i in range(steps)]

    operating = [record.net_cash_flow for record in result.annual_cash_flows]
    final_noi = result.annual_cash_flows[-1].net_operating_income

    rows = []
    for disc_rate in grid(discount_rate, discount_rate_range):
        for cap_rate in grid(exit_cap_rate, cap_rate_range):
            reversion = ReversionValuation(
                cap_rate=max(0.0, cap_rate),
                transaction_costs_rate=sale_cost_rate,
                noi_growth_rate=noi_growth_rate,
            ).calculate(final_noi)
            flows = operating[:-1] + [operating[-1] + reversion.net_reversion]
            discounted = discount_cash_flows(flows, disc_rate)
            rows.append({
                "discount_rate": disc_rate,
                "exit_cap_rate": cap_rate,
                "present_value": discounted.total_present_value,
                "discount_rate_delta": disc_rate - discount_rate,
                "cap_rate_delta": cap_rate - exit_cap_rate,
            })

    return pd.DataFrame(rows)
