# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures and builders for propdcf tests.

Builders take keyword overrides so each test states only what it cares
about.
"""

from __future__ import annotations

from datetime import date

import pytest

from propdcf.asset import (
    FixedPercentEscalation,
    Lease,
    PropertyInputs,
    RenewalTerms,
)

EFFECTIVE_DATE = date(2025, 1, 1)


def make_lease(**overrides) -> Lease:
    """Single-suite lease running well past a 10-year horizon."""
    fields = dict(
        suite="100",
        area=1000.0,
        rent_per_area=15.0,
        start_date=EFFECTIVE_DATE,
        end_date=date(2040, 12, 31),
        escalation=FixedPercentEscalation(rate=0.025),
    )
    fields.update(overrides)
    return Lease(**fields)


def make_inputs(**overrides) -> PropertyInputs:
    """Reference scenario: one 1,000 area suite, no expenses or capital."""
    fields = dict(
        effective_date=EFFECTIVE_DATE,
        rentable_area=1000.0,
        projection_years=10,
        leases=[make_lease()],
        discount_rate=0.085,
        exit_cap_rate=0.0775,
        sale_cost_rate=0.03,
    )
    fields.update(overrides)
    return PropertyInputs(**fields)


@pytest.fixture
def effective_date() -> date:
    return EFFECTIVE_DATE


@pytest.fixture
def reference_inputs() -> PropertyInputs:
    return make_inputs()


@pytest.fixture
def expiring_lease() -> Lease:
    """Lease expiring at the end of projection year 3 with renewal terms."""
    return make_lease(
        start_date=date(2023, 1, 1),
        end_date=date(2027, 12, 31),
        renewal=RenewalTerms(
            probability=0.75,
            term_years=3,
            downtime_months=3,
            ti_per_area=10.0,
            lc_rate=0.06,
            market_rent_per_area=20.0,
        ),
    )
