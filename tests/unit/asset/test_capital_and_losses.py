# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for capital items, losses and other income."""

import pytest
from pydantic import ValidationError

from propdcf.asset import (
    CapitalItem,
    FixedAmount,
    Losses,
    OtherIncomeItem,
    PerArea,
    PercentOfEGI,
    PercentOfPGI,
    capital_outflow,
)


class TestCapitalItems:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (FixedAmount(amount=5000.0), 5000.0),
            (PercentOfPGI(rate=0.02), 2000.0),
            (PercentOfEGI(rate=0.01), 900.0),
            (PerArea(amount_per_area=0.5), 500.0),
        ],
    )
    def test_resolve(self, amount, expected):
        assert amount.resolve(pgr=100000.0, egi=90000.0, rentable_area=1000.0) == pytest.approx(
            expected
        )

    def test_applies_only_in_scheduled_year(self):
        items = [
            CapitalItem(year=2, description="Roof", amount=FixedAmount(amount=5000.0)),
            CapitalItem(year=2, description="Reserve", amount=PerArea(amount_per_area=0.5)),
            CapitalItem(year=3, description="Lobby", amount=FixedAmount(amount=9000.0)),
        ]
        assert capital_outflow(items, 1, 100000.0, 90000.0, 1000.0) == 0.0
        assert capital_outflow(items, 2, 100000.0, 90000.0, 1000.0) == pytest.approx(5500.0)
        assert capital_outflow(items, 3, 100000.0, 90000.0, 1000.0) == pytest.approx(9000.0)

    def test_year_is_one_based(self):
        with pytest.raises(ValidationError):
            CapitalItem(year=0, description="Roof", amount=FixedAmount(amount=1.0))

    def test_kind_dispatch_from_dict(self):
        item = CapitalItem.model_validate(
            {"year": 1, "description": "Reserve", "amount": {"kind": "percent_of_egi", "rate": 0.02}}
        )
        assert isinstance(item.amount, PercentOfEGI)


class TestLosses:
    def test_credit_loss_after_vacancy(self):
        amounts = Losses(general_vacancy_rate=0.05, credit_loss_rate=0.02).apply(100000.0)
        assert amounts.vacancy_loss == pytest.approx(5000.0)
        assert amounts.credit_loss == pytest.approx(1900.0)
        assert amounts.total == pytest.approx(6900.0)

    def test_defaults_are_zero(self):
        assert Losses().apply(100000.0).total == 0.0

    def test_rates_bounded(self):
        with pytest.raises(ValidationError):
            Losses(general_vacancy_rate=1.5)


class TestOtherIncome:
    def test_uses_global_growth_by_default(self):
        item = OtherIncomeItem(description="Parking", amount=1200.0)
        assert item.amount_for_year(2, 0.03) == pytest.approx(1200.0 * 1.03**2)

    def test_item_growth_rate(self):
        item = OtherIncomeItem(description="Antenna", amount=1200.0, growth_rate=0.0)
        assert item.amount_for_year(5, 0.03) == 1200.0
