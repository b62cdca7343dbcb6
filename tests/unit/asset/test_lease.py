# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tests for leases and the per-year lease projector."""

from datetime import date

import pytest
from pydantic import ValidationError

from propdcf.asset import CPIEscalation, LeaseProjector, RenewalPolicy, RenewalTerms
from propdcf.core.primitives import RenewalSettings

from ...conftest import EFFECTIVE_DATE, make_lease


@pytest.fixture
def projector():
    return LeaseProjector(
        effective_date=EFFECTIVE_DATE,
        market_rent_growth_rate=0.0,
        renewal_policy=RenewalPolicy(RenewalSettings()),
    )


class TestLeaseModel:
    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            make_lease(start_date=date(2025, 1, 1), end_date=date(2024, 12, 31))

    def test_area_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_lease(area=0.0)

    def test_base_annual_rent(self):
        assert make_lease().base_annual_rent == 15000.0

    def test_label_includes_tenant(self):
        assert make_lease(tenant_name="Acme").label == "100 (Acme)"
        assert make_lease().label == "100"


class TestInTermProjection:
    def test_year_one_rent(self, projector):
        projection = projector.project(make_lease(), 0)
        assert projection.scheduled_rent == pytest.approx(15000.0)
        assert projection.occupied
        assert projection.ti_cost == 0.0

    def test_escalation_by_full_years_since_start(self, projector):
        projection = projector.project(make_lease(), 4)
        assert projection.scheduled_rent == pytest.approx(15000.0 * 1.025**4)

    def test_lease_started_before_effective_date(self, projector, expiring_lease):
        # Two anniversaries passed by the effective date
        projection = projector.project(expiring_lease, 0)
        assert projection.scheduled_rent == pytest.approx(15000.0 * 1.025**2)

    def test_not_yet_commenced(self, projector):
        lease = make_lease(start_date=date(2027, 1, 1))
        projection = projector.project(lease, 0)
        assert projection.scheduled_rent == 0.0
        assert not projection.occupied
        assert not projection.vacant_after_expiry

    def test_escalation_fallback_reported(self, projector):
        lease = make_lease(escalation=CPIEscalation())
        projection = projector.project(lease, 2)
        assert projection.scheduled_rent == pytest.approx(15000.0)
        assert projection.escalation_fallback is not None

    def test_global_cpi_used(self):
        projector = LeaseProjector(
            EFFECTIVE_DATE, 0.0, RenewalPolicy(RenewalSettings()), cpi_rate=0.02
        )
        projection = projector.project(make_lease(escalation=CPIEscalation()), 2)
        assert projection.scheduled_rent == pytest.approx(15000.0 * 1.02**2)
        assert projection.escalation_fallback is None


class TestRenewal:
    def test_first_renewal_year(self, projector, expiring_lease):
        projection = projector.project(expiring_lease, 3)
        assert projection.renewed
        assert projection.occupied
        # 3 months downtime: 9/12 of 1000 * 20
        assert projection.scheduled_rent == pytest.approx(15000.0)
        assert projection.ti_cost == pytest.approx(10000.0)
        assert projection.lc_cost == pytest.approx(1200.0)

    def test_later_renewal_years_pay_full_rent_without_costs(self, projector, expiring_lease):
        for year_index in (4, 5):
            projection = projector.project(expiring_lease, year_index)
            assert projection.scheduled_rent == pytest.approx(20000.0)
            assert projection.ti_cost == 0.0
            assert projection.lc_cost == 0.0

    def test_vacant_after_renewal_term(self, projector, expiring_lease):
        projection = projector.project(expiring_lease, 6)
        assert projection.vacant_after_expiry
        assert projection.scheduled_rent == 0.0

        later = projector.project(expiring_lease, 7)
        assert not later.vacant_after_expiry
        assert not later.occupied

    def test_non_renewal_goes_vacant_once(self, projector, expiring_lease):
        lease = expiring_lease.model_copy(
            update={"renewal": expiring_lease.renewal.model_copy(update={"probability": 0.25})}
        )
        projection = projector.project(lease, 3)
        assert projection.vacant_after_expiry
        assert projection.scheduled_rent == 0.0
        assert projection.ti_cost == 0.0

        assert not projector.project(lease, 4).vacant_after_expiry

    def test_rent_bump_over_last_escalated_rent(self, projector, expiring_lease):
        renewal = expiring_lease.renewal.model_copy(
            update={"rent_bump_rate": 0.05, "downtime_months": 0.0}
        )
        lease = expiring_lease.model_copy(update={"renewal": renewal})
        projection = projector.project(lease, 4)
        assert projection.scheduled_rent == pytest.approx(1000 * 15.0 * 1.025**4 * 1.05)

    def test_renewal_rent_grows_with_market(self, expiring_lease):
        projector = LeaseProjector(EFFECTIVE_DATE, 0.03, RenewalPolicy(RenewalSettings()))
        projection = projector.project(expiring_lease, 4)
        assert projection.scheduled_rent == pytest.approx(20000.0 * 1.03**4)

    def test_free_rent_reduces_first_year(self, projector, expiring_lease):
        renewal = expiring_lease.renewal.model_copy(update={"free_rent_months": 3})
        lease = expiring_lease.model_copy(update={"renewal": renewal})
        projection = projector.project(lease, 3)
        assert projection.scheduled_rent == pytest.approx(20000.0 * 0.5)
        # Commission is on the full-year rent
        assert projection.lc_cost == pytest.approx(1200.0)


class TestRenewalTerms:
    def test_first_year_factor_floors_at_zero(self):
        assert RenewalTerms(downtime_months=9, free_rent_months=6).first_year_factor == 0.0

    def test_first_year_factor(self):
        assert RenewalTerms(downtime_months=3).first_year_factor == pytest.approx(0.75)


class TestLeaseExpiredBeforeAnalysis:
    """Leases that lapsed more than a year before the effective date."""

    @pytest.fixture
    def stale_lease(self):
        return make_lease(
            start_date=date(2018, 1, 1),
            end_date=date(2022, 12, 31),
            renewal=RenewalTerms(
                probability=0.0, term_years=2, ti_per_area=10.0, market_rent_per_area=20.0
            ),
        )

    def test_resolved_in_first_year(self, projector, stale_lease):
        assert projector.renewal_anchor(stale_lease) == date(2024, 12, 31)
        projection = projector.project(stale_lease, 0)
        assert projection.vacant_after_expiry
        assert not projector.project(stale_lease, 1).vacant_after_expiry

    def test_recent_expiry_keeps_its_own_date(self, projector):
        lease = make_lease(start_date=date(2020, 1, 1), end_date=date(2024, 6, 30))
        assert projector.renewal_anchor(lease) == date(2024, 6, 30)

    def test_renewal_event_recorded(self, projector, stale_lease):
        renewal = stale_lease.renewal.model_copy(update={"probability": 0.9})
        lease = stale_lease.model_copy(update={"renewal": renewal})
        first = projector.project(lease, 0)
        assert first.renewed
        assert first.scheduled_rent == pytest.approx(20000.0)
        assert first.ti_cost == pytest.approx(10000.0)
        # Two-year renewal term from the effective date
        assert projector.project(lease, 1).renewed
        assert projector.project(lease, 2).vacant_after_expiry
