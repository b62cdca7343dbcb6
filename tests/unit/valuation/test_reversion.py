# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for reversion value calculation."""

import logging

import pytest

from propdcf.valuation import ReversionValuation


class TestReversionValuation:
    def test_direct_capitalization(self):
        value = ReversionValuation(cap_rate=0.08, transaction_costs_rate=0.03).calculate(100000.0)
        assert value.year_n_plus_one_noi == pytest.approx(100000.0)
        assert value.gross_reversion == pytest.approx(1250000.0)
        assert value.net_reversion == pytest.approx(1212500.0)
        assert value.transaction_costs == pytest.approx(37500.0)

    def test_forward_noi_growth(self):
        value = ReversionValuation(cap_rate=0.08, noi_growth_rate=0.02).calculate(100000.0)
        assert value.year_n_plus_one_noi == pytest.approx(102000.0)
        assert value.gross_reversion == pytest.approx(102000.0 / 0.08)
        assert value.net_reversion == value.gross_reversion

    def test_zero_cap_rate_yields_zero(self, caplog):
        with caplog.at_level(logging.WARNING):
            value = ReversionValuation(cap_rate=0.0, transaction_costs_rate=0.03).calculate(100000.0)
        assert value.gross_reversion == 0.0
        assert value.net_reversion == 0.0
        assert value.year_n_plus_one_noi == 0.0
        assert "cap rate is zero" in caplog.text

    def test_negative_noi_flows_through(self):
        value = ReversionValuation(cap_rate=0.1).calculate(-5000.0)
        assert value.net_reversion == pytest.approx(-50000.0)
