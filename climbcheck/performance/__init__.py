"""
Performance module for density altitude and Koch chart calculations.

Provides:
- pressure_altitude, isa_temp: Basic atmosphere helpers
- density_altitude_rule_of_thumb: PA + 120 ft per °C above ISA
- density_altitude_precise: Humidity corrected density altitude
- KochMode: Rule-of-thumb / precise / legacy selector
- koch_takeoff_pct, koch_secondary_pct: Koch percentages
- koch_curve: Koch percentages over a temperature sweep (DataFrame)
- assess_runway / RunwayAssessment: Required distance vs runway length
- PerformanceCalculator: Compute all figures from PerformanceInputs

Example:
    from climbcheck.performance import PerformanceCalculator, PerformanceInputs

    result = PerformanceCalculator.compute(PerformanceInputs(
        field_elevation_ft=5000, temperature_c=25, dewpoint_c=10,
        altimeter_in_hg=30.01, mode="precise",
    ))
    print(result.koch_density_altitude_ft, result.takeoff_pct)
"""

from climbcheck.performance.atmosphere import (
    pressure_altitude,
    isa_temp,
    density_altitude_rule_of_thumb,
    density_altitude_precise,
)
from climbcheck.performance.koch import (
    KochMode,
    takeoff_multiplier,
    koch_takeoff_pct,
    koch_secondary_pct,
    koch_density_altitude,
    koch_curve,
    display_takeoff_pct,
    display_secondary_pct,
)
from climbcheck.performance.runway import RunwayAssessment, assess_runway
from climbcheck.performance.validation import (
    ValidationError,
    ValidationResult,
    validate_performance_inputs,
)
from climbcheck.performance.calculator import (
    PerformanceCalculator,
    PerformanceInputs,
    PerformanceResult,
    compute,
)

__all__ = [
    'pressure_altitude',
    'isa_temp',
    'density_altitude_rule_of_thumb',
    'density_altitude_precise',
    'KochMode',
    'takeoff_multiplier',
    'koch_takeoff_pct',
    'koch_secondary_pct',
    'koch_density_altitude',
    'koch_curve',
    'display_takeoff_pct',
    'display_secondary_pct',
    'RunwayAssessment',
    'assess_runway',
    'ValidationError',
    'ValidationResult',
    'validate_performance_inputs',
    'PerformanceCalculator',
    'PerformanceInputs',
    'PerformanceResult',
    'compute',
]
