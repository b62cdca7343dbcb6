# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Return metrics: internal rate of return and dated IRR.

``solve_irr`` is a plain Newton-Raphson solver over annual periods.
Undefined outcomes come back as ``nan`` rather than raising so callers can
render them as "N/A".
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional, Sequence

from pyxirr import xirr

from ..core.primitives import IRRSettings, add_years

logger = logging.getLogger(__name__)


def net_present_value(cash_flows: Sequence[float], rate: float) -> float:
    """NPV with the first cash flow at t=0."""
    return sum(cf / (1.0 + rate) ** t for t, cf in enumerate(cash_flows))


def solve_irr(cash_flows: Sequence[float], settings: Optional[IRRSettings] = None) -> float:
    """
    Internal rate of return by Newton-Raphson.

    Args:
        cash_flows: Annual cash flows, t=0 first (typically negative)
        settings: Solver settings (initial guess, tolerance, iteration cap)

    Returns:
        IRR as a decimal; 0.0 for an empty series; nan when the derivative
        vanishes, the rate reaches -100%, or the iteration cap is exhausted.
    """
    if not cash_flows:
        return 0.0

    settings = settings or IRRSettings()
    rate = settings.initial_guess
    for iteration in range(settings.max_iterations):
        base = 1.0 + rate
        if base == 0:
            logger.warning("IRR iteration reached a rate of -100%%; no solution")
            return math.nan

        npv = 0.0
        d_npv = 0.0
        try:
            for t, cf in enumerate(cash_flows):
                npv += cf / base**t
                if t > 0:
                    d_npv -= t * cf / base ** (t + 1)
        except (OverflowError, ZeroDivisionError):
            logger.warning("IRR iteration diverged at rate %.3e; no solution", rate)
            return math.nan

        if abs(npv) < settings.tolerance:
            logger.debug("IRR converged to %.6f after %d iterations", rate, iteration)
            return rate

        if d_npv == 0:
            logger.warning("IRR derivative is zero at rate %.6f; no solution", rate)
            return math.nan

        rate -= npv / d_npv

    logger.warning("IRR did not converge within %d iterations", settings.max_iterations)
    return math.nan


class PropertyMetrics:
    """Supplementary return metrics over a projected series."""

    @staticmethod
    def calculate_dated_irr(cash_flows: Sequence[float], effective_date: date) -> float:
        """
        XIRR of an annual series placed on effective-date anniversaries.

        Args:
            cash_flows: Cash flows for t=0..N
            effective_date: Date of the t=0 cash flow

        Returns:
            Annualized IRR as a decimal, or nan when no rate exists
        """
        if not cash_flows:
            return 0.0
        dates = [add_years(effective_date, t) for t in range(len(cash_flows))]
        rate = xirr(dates, list(cash_flows), silent=True)
        return math.nan if rate is None else float(rate)

