# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Operating expense buckets and their annual projection.

Management fee is modelled separately as a percentage of EGI. Because EGI
depends on reimbursements, which depend on recoverable expenses, the
aggregator first projects expenses on a rental-only EGI and then calls
``reconcile`` once the final EGI is known.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from pydantic import Field

from ..core.primitives import ExpenseCategoryEnum, FloatBetween0And1, Model, PositiveFloat

logger = logging.getLogger(__name__)


class ExpenseBucket(Model):
    """
    An operating expense line.

    Attributes:
        name: Display name
        category: Expense category (drives the recoverability default)
        base_amount: Year-1 annual amount
        inflation_rate: Bucket-specific inflation; None uses the global rate
        recoverable: Recoverability override; None uses the category default
    """

    name: str
    category: ExpenseCategoryEnum = ExpenseCategoryEnum.OTHER
    base_amount: PositiveFloat
    inflation_rate: Optional[float] = Field(default=None, ge=-1.0)
    recoverable: Optional[bool] = None

    @property
    def is_recoverable(self) -> bool:
        if self.recoverable is not None:
            return self.recoverable
        return ExpenseCategoryEnum(self.category).recoverable_by_default

    def amount(self, year_index: int, global_inflation_rate: float) -> float:
        rate = self.inflation_rate if self.inflation_rate is not None else global_inflation_rate
        return self.base_amount * (1.0 + rate) ** year_index


class ManagementFee(Model):
    """Management fee charged as a percentage of EGI. Never recoverable."""

    rate: FloatBetween0And1 = 0.0
    inflation_rate: Optional[float] = Field(
        default=None, ge=-1.0, description="Optional annual growth of the fee percentage itself"
    )

    def rate_for_year(self, year_index: int) -> float:
        if self.inflation_rate is None:
            return self.rate
        return self.rate * (1.0 + self.inflation_rate) ** year_index


@dataclass(frozen=True)
class ExpenseProjection:
    """Operating expenses for one projection year."""

    bucket_total: float
    recoverable_total: float
    management_fee: float
    by_bucket: Dict[str, float] = field(default_factory=dict)

    @property
    def total_opex(self) -> float:
        return self.bucket_total + self.management_fee


class ExpenseProjector:
    """Inflates expense buckets and computes the management fee."""

    def __init__(
        self,
        buckets: List[ExpenseBucket],
        management_fee: Optional[ManagementFee],
        global_inflation_rate: float,
    ):
        self.buckets = buckets
        self.management_fee = management_fee or ManagementFee()
        self.global_inflation_rate = global_inflation_rate

    def management_fee_for(self, year_index: int, egi: float) -> float:
        return egi * self.management_fee.rate_for_year(year_index)

    def project(self, year_index: int, egi_for_management_fee: float) -> ExpenseProjection:
        by_bucket: Dict[str, float] = {}
        bucket_total = 0.0
        recoverable_total = 0.0
        for bucket in self.buckets:
            amount = bucket.amount(year_index, self.global_inflation_rate)
            by_bucket[bucket.name] = by_bucket.get(bucket.name, 0.0) + amount
            bucket_total += amount
            if bucket.is_recoverable:
                recoverable_total += amount

        return ExpenseProjection(
            bucket_total=bucket_total,
            recoverable_total=recoverable_total,
            management_fee=self.management_fee_for(year_index, egi_for_management_fee),
            by_bucket=by_bucket,
        )

    def reconcile(
        self, provisional: ExpenseProjection, year_index: int, final_egi: float
    ) -> ExpenseProjection:
        """Recompute the management fee on the final EGI, keeping bucket amounts."""
        final_fee = self.management_fee_for(year_index, final_egi)
        if final_fee != provisional.management_fee:
            logger.debug(
                "Year %d management fee reconciled %.2f -> %.2f",
                year_index + 1,
                provisional.management_fee,
                final_fee,
            )
        return replace(provisional, management_fee=final_fee)
