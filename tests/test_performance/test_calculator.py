"""
Tests for PerformanceCalculator.
"""

import math

import pytest

from climbcheck import config
from climbcheck.performance.calculator import (
    PerformanceCalculator,
    PerformanceInputs,
    compute,
)
from climbcheck.performance.koch import KochMode
from climbcheck.weather.parser import MetarDecoder


@pytest.fixture
def hot_day_inputs():
    return PerformanceInputs(
        field_elevation_ft=2000,
        temperature_c=30,
        altimeter_in_hg=29.92,
        mode=KochMode.ROT,
    )


class TestInputs:

    def test_string_mode_is_coerced(self):
        inputs = PerformanceInputs(field_elevation_ft=0, temperature_c=15, altimeter_in_hg=29.92, mode="legacy")
        assert inputs.mode is KochMode.LEGACY

    def test_default_mode_from_config(self, monkeypatch):
        monkeypatch.setattr(config, 'DEFAULT_KOCH_MODE', 'rot')
        inputs = PerformanceInputs(field_elevation_ft=0, temperature_c=15, altimeter_in_hg=29.92)
        assert inputs.mode is KochMode.ROT

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            PerformanceInputs(field_elevation_ft=0, temperature_c=15, mode="turbo")

    def test_none_required_values_become_nan(self):
        inputs = PerformanceInputs(field_elevation_ft=None, temperature_c=None, altimeter_in_hg=29.92)
        assert math.isnan(inputs.field_elevation_ft)
        assert math.isnan(inputs.temperature_c)


class TestValidate:

    def test_valid(self, hot_day_inputs):
        result = hot_day_inputs.validate()
        assert result.is_valid
        assert not result.warnings
        assert str(result) == "Valid"

    def test_missing_values(self):
        inputs = PerformanceInputs(field_elevation_ft=None, temperature_c=math.nan, mode="rot")
        result = inputs.validate()
        assert not result.is_valid
        assert result.fields_in_error() == ['field_elevation_ft', 'temperature_c', 'altimeter_in_hg']

    def test_pressure_altitude_override_replaces_altimeter(self):
        inputs = PerformanceInputs(field_elevation_ft=0, temperature_c=15, pressure_altitude_ft=1500, mode="rot")
        assert inputs.validate().is_valid

    def test_non_finite_values(self):
        inputs = PerformanceInputs(
            field_elevation_ft=0,
            temperature_c=15,
            dewpoint_c=math.inf,
            altimeter_in_hg=math.nan,
            mode="rot",
        )
        result = inputs.validate()
        assert result.fields_in_error() == ['dewpoint_c', 'altimeter_in_hg']
        assert "dewpoint_c: Dewpoint must be a finite number (got inf)" in result.messages("error")

    def test_dewpoint_above_temperature_warns(self):
        inputs = PerformanceInputs(
            field_elevation_ft=0, temperature_c=10, dewpoint_c=12, altimeter_in_hg=29.92, mode="rot",
        )
        result = inputs.validate()
        assert result.is_valid
        assert result.warnings[0].field == 'dewpoint_c'
        assert str(result) == "0 errors, 1 warnings"


class TestCompute:

    def test_rule_of_thumb_example(self, hot_day_inputs):
        result = PerformanceCalculator.compute(hot_day_inputs)
        assert result.pressure_altitude_ft == pytest.approx(2000)
        assert result.density_altitude_rot_ft == pytest.approx(4275.2)
        assert result.koch_density_altitude_ft == pytest.approx(4275.2)
        assert result.takeoff_pct == pytest.approx(64.128)
        assert result.secondary_label == "ROC"

    def test_precise_mode_uses_precise_density_altitude(self):
        result = compute(field_elevation_ft=5000, temperature_c=30, altimeter_in_hg=29.92, mode="precise")
        assert result.koch_density_altitude_ft == result.density_altitude_precise_ft
        assert 7500 < result.koch_density_altitude_ft < 8100

    def test_legacy_mode(self):
        result = compute(field_elevation_ft=2000, temperature_c=30, altimeter_in_hg=29.92, mode=KochMode.LEGACY)
        assert result.koch_density_altitude_ft == pytest.approx(4275.2)
        assert result.takeoff_pct == pytest.approx(0.125 * 4.2752 * 100)
        assert result.secondary_pct == pytest.approx(0.096 * 4.2752 * 100)
        assert result.secondary_label == "Engine Power"

    def test_pressure_altitude_override_wins(self):
        result = compute(field_elevation_ft=2000, temperature_c=15, altimeter_in_hg=28.92,
                         pressure_altitude_ft=1500, mode="rot")
        assert result.pressure_altitude_ft == 1500

    def test_no_altimeter_gives_nan(self):
        result = compute(field_elevation_ft=2000, temperature_c=15, mode="precise")
        assert math.isnan(result.pressure_altitude_ft)
        assert math.isnan(result.density_altitude_rot_ft)
        assert math.isnan(result.density_altitude_precise_ft)
        assert math.isnan(result.takeoff_pct)
        data = result.to_dict()
        assert data['pressure_altitude_ft'] is None
        assert data['takeoff_pct'] is None
        assert data['mode'] == "precise"

    def test_missing_temperature_gives_nan(self):
        result = compute(field_elevation_ft=2000, temperature_c=None, altimeter_in_hg=29.92, mode="rot")
        assert result.pressure_altitude_ft == pytest.approx(2000)
        assert math.isnan(result.density_altitude_rot_ft)
        assert math.isnan(result.secondary_pct)

    def test_negative_density_altitude_display(self):
        result = compute(field_elevation_ft=0, temperature_c=-20, altimeter_in_hg=30.50, mode="rot")
        assert result.takeoff_pct < 0
        assert result.display_takeoff_pct == 0
        assert result.display_secondary_pct == 0

    def test_legacy_negative_power_is_shown(self):
        result = compute(field_elevation_ft=0, temperature_c=-20, altimeter_in_hg=30.50, mode="legacy")
        assert result.display_secondary_pct == result.secondary_pct < 0

    def test_dewpoint_only_affects_precise(self):
        dry = compute(field_elevation_ft=1000, temperature_c=30, altimeter_in_hg=29.92, mode="precise")
        moist = compute(field_elevation_ft=1000, temperature_c=30, dewpoint_c=24,
                        altimeter_in_hg=29.92, mode="precise")
        assert moist.density_altitude_precise_ft > dry.density_altitude_precise_ft
        assert moist.density_altitude_rot_ft == dry.density_altitude_rot_ft


class TestHelpers:

    def test_runway(self, hot_day_inputs):
        result = PerformanceCalculator.compute(hot_day_inputs)
        assessment = PerformanceCalculator.runway(result, runway_ft=1800, baseline_ft=1200)
        assert not assessment.ok
        assert assessment.over_by_ft == pytest.approx(169.536)

    def test_runway_with_unknown_density_altitude(self):
        result = compute(field_elevation_ft=2000, temperature_c=15, mode="rot")
        assessment = PerformanceCalculator.runway(result, runway_ft=3000, baseline_ft=1200)
        assert assessment.required_ft == pytest.approx(1200)

    def test_curve(self, hot_day_inputs):
        curve = PerformanceCalculator.curve(hot_day_inputs, span_c=5)
        assert len(curve) == 11
        assert curve['temp_c'].iloc[0] == 25

    def test_curve_without_pressure_altitude(self):
        inputs = PerformanceInputs(field_elevation_ft=0, temperature_c=15, mode="rot")
        curve = PerformanceCalculator.curve(inputs, span_c=1)
        assert curve['density_altitude_ft'].tolist() == pytest.approx([-120, 0, 120])


class TestMetarToPerformance:

    def test_decode_then_compute(self, ksmo_metar):
        decoded = MetarDecoder.decode(ksmo_metar)
        result = compute(
            field_elevation_ft=177,
            temperature_c=decoded.precise.temp_c,
            dewpoint_c=decoded.precise.dew_c,
            altimeter_in_hg=decoded.precise.alt_in_hg,
            mode="rot",
        )
        assert result.pressure_altitude_ft == pytest.approx(47)
        assert result.density_altitude_rot_ft == pytest.approx(47 + 120 * (22 - (15 - 1.98 * 0.177)))
