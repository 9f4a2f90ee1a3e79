"""
Tests for the runway length assessment.
"""

import math

import pytest

from climbcheck.performance.koch import KochMode
from climbcheck.performance.runway import assess_runway


class TestAssessRunway:

    def test_sea_level_standard(self):
        result = assess_runway(3000, 1200, 0, KochMode.ROT)
        assert result.has_inputs
        assert result.multiplier == 1
        assert result.required_ft == pytest.approx(1200)
        assert result.margin_ft == pytest.approx(1800)
        assert result.ok
        assert result.pct_used == pytest.approx(40)
        assert result.over_by_ft == 0
        assert result.isa_equivalent_ft == pytest.approx(3000)

    def test_short_runway(self):
        result = assess_runway(1800, 1200, 4275.2, KochMode.ROT)
        assert result.required_ft == pytest.approx(1969.536)
        assert not result.ok
        assert result.margin_ft == pytest.approx(-169.536)
        assert result.over_by_ft == pytest.approx(169.536)
        assert result.pct_used == 100

    def test_isa_equivalent_runway(self):
        result = assess_runway(5000, 1000, 4000, KochMode.ROT)
        assert result.multiplier == pytest.approx(1.6)
        assert result.isa_equivalent_ft == pytest.approx(3125)

    def test_legacy_multiplier(self):
        result = assess_runway(5000, 1000, 4000, "legacy")
        assert result.required_ft == pytest.approx(1500)

    def test_exact_fit_is_ok(self):
        result = assess_runway(1250, 1000, 2000, KochMode.LEGACY)
        assert result.margin_ft == 0
        assert result.ok

    @pytest.mark.parametrize("runway,baseline", [(0, 1200), (3000, 0), (0, 0)])
    def test_missing_inputs(self, runway, baseline):
        result = assess_runway(runway, baseline, 4275.2, KochMode.ROT)
        assert not result.has_inputs
        assert result.ok
        assert result.required_ft == 0
        assert result.margin_ft == 0
        assert result.pct_used == 0
        assert result.over_by_ft == 0

    def test_isa_equivalent_without_baseline(self):
        result = assess_runway(3000, 0, 0, KochMode.ROT)
        assert result.isa_equivalent_ft == pytest.approx(3000)

    def test_unknown_density_altitude_counts_as_zero(self):
        result = assess_runway(3000, 1200, math.nan, KochMode.ROT)
        assert result.multiplier == 1
        assert result.required_ft == pytest.approx(1200)

    def test_non_finite_lengths_count_as_zero(self):
        result = assess_runway(math.nan, math.inf, 0, KochMode.ROT)
        assert result.runway_ft == 0
        assert result.baseline_ft == 0
        assert not result.has_inputs

    def test_to_dict(self):
        data = assess_runway(3000, 1200, 0, KochMode.ROT).to_dict()
        assert data['ok'] is True
        assert data['required_ft'] == pytest.approx(1200)
        assert set(data) == {
            'runway_ft', 'baseline_ft', 'multiplier', 'required_ft', 'margin_ft',
            'ok', 'isa_equivalent_ft', 'pct_used', 'over_by_ft', 'has_inputs',
        }
