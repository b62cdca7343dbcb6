# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for operating expenses and the management fee."""

import unittest

import pytest

from propdcf.asset import ExpenseBucket, ExpenseProjector, ManagementFee
from propdcf.core.primitives import ExpenseCategoryEnum


class TestExpenseBucket:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (ExpenseCategoryEnum.TAXES, True),
            (ExpenseCategoryEnum.INSURANCE, True),
            (ExpenseCategoryEnum.REPAIRS_MAINTENANCE, True),
            (ExpenseCategoryEnum.UTILITIES, False),
            (ExpenseCategoryEnum.RESERVES, False),
            (ExpenseCategoryEnum.OTHER, False),
        ],
    )
    def test_recoverable_by_category(self, category, expected):
        bucket = ExpenseBucket(name="x", category=category, base_amount=1.0)
        assert bucket.is_recoverable is expected

    def test_recoverable_override(self):
        bucket = ExpenseBucket(
            name="Utilities", category=ExpenseCategoryEnum.UTILITIES, base_amount=1.0, recoverable=True
        )
        assert bucket.is_recoverable

    def test_inflation_falls_back_to_global(self):
        bucket = ExpenseBucket(name="Taxes", base_amount=1000.0)
        assert bucket.amount(2, 0.03) == pytest.approx(1000.0 * 1.03**2)

    def test_bucket_inflation_takes_precedence(self):
        bucket = ExpenseBucket(name="Taxes", base_amount=1000.0, inflation_rate=0.05)
        assert bucket.amount(2, 0.03) == pytest.approx(1000.0 * 1.05**2)


class TestExpenseProjector(unittest.TestCase):
    def setUp(self):
        self.projector = ExpenseProjector(
            buckets=[
                ExpenseBucket(name="Taxes", category=ExpenseCategoryEnum.TAXES, base_amount=10000.0),
                ExpenseBucket(
                    name="Insurance",
                    category=ExpenseCategoryEnum.INSURANCE,
                    base_amount=2000.0,
                    inflation_rate=0.05,
                ),
                ExpenseBucket(
                    name="Utilities", category=ExpenseCategoryEnum.UTILITIES, base_amount=3000.0
                ),
            ],
            management_fee=ManagementFee(rate=0.03),
            global_inflation_rate=0.02,
        )

    def test_project_year_two(self):
        projection = self.projector.project(1, egi_for_management_fee=100000.0)
        self.assertAlmostEqual(projection.by_bucket["Taxes"], 10200.0)
        self.assertAlmostEqual(projection.by_bucket["Insurance"], 2100.0)
        self.assertAlmostEqual(projection.by_bucket["Utilities"], 3060.0)
        self.assertAlmostEqual(projection.bucket_total, 15360.0)
        self.assertAlmostEqual(projection.recoverable_total, 12300.0)
        self.assertAlmostEqual(projection.management_fee, 3000.0)
        self.assertAlmostEqual(projection.total_opex, 18360.0)

    def test_reconcile_replaces_only_the_fee(self):
        provisional = self.projector.project(0, egi_for_management_fee=80000.0)
        final = self.projector.reconcile(provisional, 0, final_egi=100000.0)
        self.assertAlmostEqual(final.management_fee, 3000.0)
        self.assertEqual(final.bucket_total, provisional.bucket_total)
        self.assertEqual(final.recoverable_total, provisional.recoverable_total)
        self.assertAlmostEqual(provisional.management_fee, 2400.0)

    def test_no_management_fee(self):
        projector = ExpenseProjector([], None, 0.0)
        projection = projector.project(0, 100000.0)
        self.assertEqual(projection.management_fee, 0.0)
        self.assertEqual(projection.total_opex, 0.0)


def test_management_fee_rate_inflation():
    fee = ManagementFee(rate=0.03, inflation_rate=0.1)
    assert fee.rate_for_year(0) == pytest.approx(0.03)
    assert fee.rate_for_year(2) == pytest.approx(0.03 * 1.1**2)
    assert ManagementFee(rate=0.03).rate_for_year(5) == 0.03
