# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Expense reimbursement (recovery) structures and the per-year calculator.

A tenant's pro-rata share is its leased area over the property's total
rentable area; recoverable operating expenses are allocated on that share
and then adjusted for the lease's reimbursement structure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Tuple, Union

from pydantic import Field
from typing_extensions import Annotated

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat

logger = logging.getLogger(__name__)


class NNNReimbursement(Model):
    """Tenant pays its full pro-rata share of recoverable expenses (plus admin fee)."""

    kind: Literal["nnn"] = "nnn"
    admin_fee_rate: Optional[FloatBetween0And1] = Field(
        default=None, description="Admin fee as a decimal of the recovered amount"
    )

    def reimbursement(self, prorated_recoverable: float, area: float) -> float:
        return prorated_recoverable * (1.0 + (self.admin_fee_rate or 0.0))


class ModifiedGrossReimbursement(Model):
    """
    Tenant pays its pro-rata share above an expense stop.

    Without a stop amount the lease behaves as gross.
    """

    kind: Literal["modified_gross"] = "modified_gross"
    expense_stop_per_area: Optional[PositiveFloat] = None
    admin_fee_rate: Optional[FloatBetween0And1] = None

    def reimbursement(self, prorated_recoverable: float, area: float) -> float:
        if self.expense_stop_per_area is None:
            return 0.0
        excess = max(0.0, prorated_recoverable - self.expense_stop_per_area * area)
        return excess * (1.0 + (self.admin_fee_rate or 0.0))


class GrossReimbursement(Model):
    """Landlord absorbs all operating expenses."""

    kind: Literal["gross"] = "gross"

    def reimbursement(self, prorated_recoverable: float, area: float) -> float:
        return 0.0


AnyReimbursement = Annotated[
    Union[NNNReimbursement, ModifiedGrossReimbursement, GrossReimbursement],
    Field(discriminator="kind"),
]


@dataclass
class ReimbursementSummary:
    """Reimbursement income for one projection year."""

    total: float = 0.0
    by_tenant: List[float] = field(default_factory=list)
    skipped: bool = False


def calculate_reimbursements(
    tenants: Sequence[Tuple[float, AnyReimbursement]],
    recoverable_total: float,
    total_rentable_area: float,
) -> ReimbursementSummary:
    """
    Allocate a year's recoverable expense pool across occupying tenants.

    Args:
        tenants: (occupied area, reimbursement structure) for every tenant
            occupying space this year
        recoverable_total: Recoverable operating expenses for the year
        total_rentable_area: Property rentable area (pro-rata denominator)

    Returns:
        ReimbursementSummary with the per-tenant and total amounts. When the
        rentable area is zero nothing is allocated and ``skipped`` is set.
    """
    if total_rentable_area <= 0:
        logger.warning(
            "Rentable area is zero; skipping reimbursements for %d tenants",
            len(tenants),
        )
        return ReimbursementSummary(by_tenant=[0.0] * len(tenants), skipped=True)

    summary = ReimbursementSummary()
    for area, structure in tenants:
        prorated = recoverable_total * (area / total_rentable_area)
        amount = structure.reimbursement(prorated, area)
        summary.by_tenant.append(amount)
        summary.total += amount
    return summary
