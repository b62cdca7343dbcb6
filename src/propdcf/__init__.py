# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdcf - Lease-by-Lease Discounted Cash Flow Valuation

Values a commercial property by projecting annual cash flows from an
itemized rent roll and discounting them to present value.

Key Entry Points:
- propdcf.analysis.run() - Full DCF projection, reversion, PV and IRR
- propdcf.analysis.run_monte_carlo() - Seeded stochastic renewal trials
- propdcf.asset.* - Leases, expenses, capital items and property inputs
- propdcf.valuation.* - Reversion, discounting and IRR

Example Usage:
    ```python
    from datetime import date

    from propdcf.analysis import run
    from propdcf.asset import FixedPercentEscalation, Lease, PropertyInputs

    inputs = PropertyInputs(
        effective_date=date(2025, 1, 1),
        rentable_area=1000.0,
        projection_years=10,
        leases=[
            Lease(
                suite="100",
                area=1000.0,
                rent_per_area=15.0,
                start_date=date(2025, 1, 1),
                end_date=date(2040, 12, 31),
                escalation=FixedPercentEscalation(rate=0.025),
            )
        ],
        discount_rate=0.085,
        exit_cap_rate=0.0775,
        sale_cost_rate=0.03,
    )
    result = run(inputs)
    print(f"Value: {result.total_present_value:,.0f}  IRR: {result.irr:.2%}")
    ```
"""

import logging

# Add a NullHandler so importing propdcf never triggers "no handler" warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "analysis",
    "asset",
    "core",
    "valuation",
]
