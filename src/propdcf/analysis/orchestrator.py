# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DCF analysis entry points.

``run`` is a pure function of its inputs: it projects the operating years,
computes the reversion on the final year, discounts the series and solves
for IRR. ``run_monte_carlo`` layers seeded stochastic renewal trials on top
of the same engine.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..asset.property import PropertyInputs
from ..core.primitives import RenewalModeEnum, RenewalSettings
from ..valuation.dcf import (
    calculate_sensitivity_analysis,
    discount_cash_flows,
    going_in_cap_rate,
)
from ..valuation.metrics import solve_irr
from ..valuation.reversion import ReversionValuation
from .cash_flow import CashFlowAggregator
from .results import DCFResult

logger = logging.getLogger(__name__)

MONTE_CARLO_COLUMNS = [
    "trial",
    "seed",
    "total_present_value",
    "irr",
    "net_reversion",
    "year_one_noi",
]


def run(inputs: PropertyInputs) -> Optional[DCFResult]:
    """
    Run the full DCF for a property.

    Args:
        inputs: Validated property inputs

    Returns:
        DCFResult, or None when the projection horizon is not positive
    """
    if inputs.projection_years <= 0:
        logger.info("Projection horizon is %d years; no result", inputs.projection_years)
        return None

    operating_years, warnings = CashFlowAggregator(inputs).project()

    reversion = ReversionValuation(
        cap_rate=inputs.exit_cap_rate,
        transaction_costs_rate=inputs.sale_cost_rate,
        noi_growth_rate=inputs.resolved_terminal_growth_rate,
    ).calculate(operating_years[-1].net_operating_income)

    cash_flows = [year.net_cash_flow for year in operating_years]
    cash_flows[-1] += reversion.net_reversion
    discounted = discount_cash_flows(cash_flows, inputs.discount_rate)

    last = len(operating_years) - 1
    records = [
        year.finalize(
            reversion_proceeds=reversion.net_reversion if i == last else 0.0,
            present_value_factor=discounted.factors[i],
        )
        for i, year in enumerate(operating_years)
    ]

    total_present_value = discounted.total_present_value
    irr = solve_irr(
        [-total_present_value] + cash_flows,
        settings=inputs.settings.irr,
    )

    result = DCFResult(
        annual_cash_flows=records,
        total_present_value=total_present_value,
        going_in_cap_rate=going_in_cap_rate(
            records[0].net_operating_income, total_present_value
        ),
        irr=irr,
        reversion=reversion,
        warnings=warnings,
    )
    logger.info(
        "%s: value=%.2f going-in cap=%.4f IRR=%.4f over %d years",
        inputs.name,
        result.total_present_value,
        result.going_in_cap_rate,
        result.irr,
        result.horizon,
    )
    return result


def run_monte_carlo(inputs: PropertyInputs, trials: int, seed: int) -> pd.DataFrame:
    """
    Re-run the DCF with seeded stochastic renewals.

    Each trial gets its own seed drawn from a generator seeded with ``seed``,
    so the whole table is reproducible.

    Args:
        inputs: Property inputs (their renewal settings are overridden)
        trials: Number of trials
        seed: Master seed

    Returns:
        DataFrame with one row per trial
    """
    if trials <= 0:
        raise ValueError("trials must be positive")

    trial_seeds = np.random.default_rng(seed).integers(0, 2**32, size=trials)
    rows = []
    for trial, trial_seed in enumerate(trial_seeds):
        renewal = RenewalSettings(mode=RenewalModeEnum.STOCHASTIC, seed=int(trial_seed))
        settings = inputs.settings.model_copy(update={"renewal": renewal})
        result = run(inputs.model_copy(update={"settings": settings}))
        if result is None:
            return pd.DataFrame(columns=MONTE_CARLO_COLUMNS)
        rows.append({
            "trial": trial,
            "seed": int(trial_seed),
            "total_present_value": result.total_present_value,
            "irr": result.irr,
            "net_reversion": result.terminal_value_net,
            "year_one_noi": result.annual_cash_flows[0].net_operating_income,
        })

    return pd.DataFrame(rows, columns=MONTE_CARLO_COLUMNS)


def run_sensitivity(
    inputs: PropertyInputs,
    discount_rate_range: tuple[float, float] = (-0.01, 0.01),
    cap_rate_range: tuple[float, float] = (-0.005, 0.005),
    steps: int = 5,
) -> Optional[pd.DataFrame]:
    """Present value grid over discount and exit cap rate deltas."""
    result = run(inputs)
    if result is None:
        return None
    return calculate_sensitivity_analysis(
        result,
        discount_rate=inputs.discount_rate,
        exit_cap_rate=inputs.exit_cap_rate,
        sale_cost_rate=inputs.sale_cost_rate,
        noi_growth_rate=inputs.resolved_terminal_growth_rate,
        discount_rate_range=discount_rate_range,
        cap_rate_range=cap_rate_range,
        steps=steps,
    )
