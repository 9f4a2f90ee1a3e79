"""Performance calculator: from field conditions to density altitude and Koch percentages."""

import math
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

import pandas as pd

from climbcheck.performance.atmosphere import (
    pressure_altitude,
    density_altitude_rule_of_thumb,
    density_altitude_precise,
)
from climbcheck.performance.koch import (
    KochMode,
    koch_takeoff_pct,
    koch_secondary_pct,
    display_takeoff_pct,
    display_secondary_pct,
    koch_curve,
)
from climbcheck.performance.runway import RunwayAssessment, assess_runway
from climbcheck.performance.validation import ValidationResult, validate_performance_inputs

logger = logging.getLogger(__name__)


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


@dataclass(frozen=True)
class PerformanceInputs:
    """
    Caller supplied conditions.

    Either altimeter_in_hg or pressure_altitude_ft should be given. A
    pressure altitude override takes precedence over the altimeter.

    Attributes:
        field_elevation_ft: Field elevation (may be zero or negative)
        temperature_c: Outside air temperature
        dewpoint_c: Dewpoint, None for dry air
        altimeter_in_hg: Altimeter setting
        pressure_altitude_ft: Pressure altitude override
        mode: Koch mode, defaults to the configured mode
    """

    field_elevation_ft: float
    temperature_c: float
    dewpoint_c: Optional[float] = None
    altimeter_in_hg: Optional[float] = None
    pressure_altitude_ft: Optional[float] = None
    mode: KochMode = field(default_factory=lambda: KochMode.coerce(None))

    def __post_init__(self):
        for name in ('field_elevation_ft', 'temperature_c'):
            if getattr(self, name) is None:
                object.__setattr__(self, name, math.nan)
        object.__setattr__(self, 'mode', KochMode.coerce(self.mode))

    def validate(self) -> ValidationResult:
        """Missing or non-finite values as errors, dewpoint above temperature as a warning."""
        return validate_performance_inputs(self)


@dataclass(frozen=True)
class PerformanceResult:
    """
    Computed performance figures.

    takeoff_pct and secondary_pct are raw; use the display_* properties
    for values floored the way they are shown to the pilot. Any figure
    that cannot be determined is NaN.
    """

    mode: KochMode
    pressure_altitude_ft: float
    density_altitude_rot_ft: float
    density_altitude_precise_ft: float
    koch_density_altitude_ft: float
    takeoff_pct: float
    secondary_pct: float

    @property
    def secondary_label(self) -> str:
        """'ROC' for modern modes, 'Engine Power' for legacy."""
        return self.mode.secondary_label

    @property
    def display_takeoff_pct(self) -> float:
        return display_takeoff_pct(self.takeoff_pct)

    @property
    def display_secondary_pct(self) -> float:
        return display_secondary_pct(self.secondary_pct, self.mode)

    def to_dict(self) -> dict:
        """Serialize to dictionary, NaN figures become None."""
        def clean(value: float) -> Optional[float]:
            return value if math.isfinite(value) else None

        return {
            'mode': self.mode.value,
            'pressure_altitude_ft': clean(self.pressure_altitude_ft),
            'density_altitude_rot_ft': clean(self.density_altitude_rot_ft),
            'density_altitude_precise_ft': clean(self.density_altitude_precise_ft),
            'koch_density_altitude_ft': clean(self.koch_density_altitude_ft),
            'takeoff_pct': clean(self.takeoff_pct),
            'secondary_pct': clean(self.secondary_pct),
            'secondary_label': self.secondary_label,
        }


class PerformanceCalculator:
    """
    Compute pressure altitude, density altitude and Koch percentages.

    All methods are static/classmethod, pure functions with no state.

    Example:
        inputs = PerformanceInputs(field_elevation_ft=2000, temperature_c=30,
                                   altimeter_in_hg=29.92, mode="rot")
        result = PerformanceCalculator.compute(inputs)
        result.density_altitude_rot_ft  # 4275.2
    """

    @staticmethod
    def resolve_pressure_altitude(inputs: PerformanceInputs) -> float:
        """Pressure altitude override, else from the altimeter, else NaN."""
        if inputs.pressure_altitude_ft is not None:
            return float(inputs.pressure_altitude_ft)
        if inputs.altimeter_in_hg is not None:
            return pressure_altitude(inputs.field_elevation_ft, inputs.altimeter_in_hg)
        return math.nan

    @classmethod
    def compute(cls, inputs: PerformanceInputs) -> PerformanceResult:
        """
        Compute all performance figures for the inputs.

        Args:
            inputs: PerformanceInputs

        Returns:
            PerformanceResult; undeterminable figures are NaN
        """
        pa_ft = cls.resolve_pressure_altitude(inputs)
        temp_c = inputs.temperature_c
        da_rot = density_altitude_rule_of_thumb(pa_ft, temp_c, inputs.field_elevation_ft)

        if _is_finite(pa_ft) and _is_finite(temp_c):
            da_precise = density_altitude_precise(pa_ft, temp_c, inputs.dewpoint_c)
        else:
            da_precise = math.nan

        da_koch = da_precise if inputs.mode.uses_precise_da else da_rot
        if not math.isfinite(da_koch):
            logger.debug(f"Density altitude undetermined for {inputs}")

        result = PerformanceResult(
            mode=inputs.mode,
            pressure_altitude_ft=pa_ft,
            density_altitude_rot_ft=da_rot,
            density_altitude_precise_ft=da_precise,
            koch_density_altitude_ft=da_koch,
            takeoff_pct=koch_takeoff_pct(da_koch, inputs.mode),
            secondary_pct=koch_secondary_pct(da_koch, inputs.mode),
        )
        logger.debug(f"Computed {result.to_dict()}")
        return result

    @staticmethod
    def runway(
        result: PerformanceResult,
        runway_ft: float,
        baseline_ft: float,
    ) -> RunwayAssessment:
        """Runway assessment using the result's Koch density altitude and mode."""
        return assess_runway(runway_ft, baseline_ft, result.koch_density_altitude_ft, result.mode)

    @classmethod
    def curve(
        cls,
        inputs: PerformanceInputs,
        span_c: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Koch curve around the input temperature.

        Unknown pressure altitude is taken as zero so the curve can still
        be drawn.
        """
        pa_ft = cls.resolve_pressure_altitude(inputs)
        if not math.isfinite(pa_ft):
            pa_ft = 0.0
        return koch_curve(
            pa_ft,
            inputs.temperature_c,
            inputs.field_elevation_ft,
            inputs.mode,
            inputs.dewpoint_c,
            span_c=span_c,
        )


def compute(
    field_elevation_ft: float,
    temperature_c: float,
    dewpoint_c: Optional[float] = None,
    altimeter_in_hg: Optional[float] = None,
    pressure_altitude_ft: Optional[float] = None,
    mode: Union[KochMode, str, None] = None,
) -> PerformanceResult:
    """Shortcut for PerformanceCalculator.compute(PerformanceInputs(...))."""
    return PerformanceCalculator.compute(PerformanceInputs(
        field_elevation_ft=field_elevation_ft,
        temperature_c=temperature_c,
        dewpoint_c=dewpoint_c,
        altimeter_in_hg=altimeter_in_hg,
        pressure_altitude_ft=pressure_altitude_ft,
        mode=mode,
    ))
