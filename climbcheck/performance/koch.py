"""
Koch chart performance degradation.

Two coefficient sets:
    Modern (rule-of-thumb and precise modes):
        takeoff distance  +15%   per 1000 ft DA
        rate of climb     -7.5%  per 1000 ft DA (factor floored at 0)
    Legacy (classic Koch chart):
        takeoff distance  +12.5% per 1000 ft DA
        engine power      -9.6%  per 1000 ft DA (no floor)

The functions return raw signed percentages. A negative density altitude
gives a negative takeoff percentage; flooring for display is applied by
display_takeoff_pct() / display_secondary_pct().
"""

import math
import logging
from enum import Enum
from typing import Optional, Union

import pandas as pd

from climbcheck import config
from climbcheck.performance.atmosphere import (
    density_altitude_precise,
    density_altitude_rule_of_thumb,
)

logger = logging.getLogger(__name__)

MODERN_TAKEOFF_RATE = 0.15
LEGACY_TAKEOFF_RATE = 0.125
MODERN_ROC_RATE = 0.075
LEGACY_POWER_RATE = 0.096

CURVE_COLUMNS = ['temp_c', 'density_altitude_ft', 'takeoff_pct', 'secondary_pct']


class KochMode(Enum):
    """Which density altitude and coefficient set drive the Koch figures."""

    ROT = "rot"
    PRECISE = "precise"
    LEGACY = "legacy"

    @property
    def is_legacy(self) -> bool:
        return self is KochMode.LEGACY

    @property
    def uses_precise_da(self) -> bool:
        return self is KochMode.PRECISE

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def secondary_label(self) -> str:
        """Name of the secondary percentage for this mode."""
        return "Engine Power" if self.is_legacy else "ROC"

    @classmethod
    def coerce(cls, value: Union['KochMode', str, None]) -> 'KochMode':
        """
        Accept a KochMode or its string value.

        None maps to the configured default mode. Unknown strings raise
        ValueError.
        """
        if isinstance(value, KochMode):
            return value
        if value is None:
            return cls(config.get_default_koch_mode())
        return cls(str(value).strip().lower())


_MODE_LABELS = {
    KochMode.ROT: "Rule-of-thumb",
    KochMode.PRECISE: "Precise",
    KochMode.LEGACY: "Legacy Koch",
}


def takeoff_multiplier(da_ft: float, mode: Union[KochMode, str]) -> float:
    """Takeoff distance multiplier relative to sea-level standard day."""
    mode = KochMode.coerce(mode)
    rate = LEGACY_TAKEOFF_RATE if mode.is_legacy else MODERN_TAKEOFF_RATE
    return 1 + rate * (da_ft / 1000)


def koch_takeoff_pct(da_ft: float, mode: Union[KochMode, str]) -> float:
    """Takeoff distance increase in percent (raw, may be negative)."""
    return (takeoff_multiplier(da_ft, mode) - 1) * 100


def koch_secondary_pct(da_ft: float, mode: Union[KochMode, str]) -> float:
    """
    Secondary Koch percentage.

    Modern modes: rate-of-climb decrease, 100 * (1 - max(0, 1 - 0.075 * DA/1000)).
    The ROC factor is floored at zero, so the decrease never exceeds 100%.

    Legacy mode: engine power decrease, 9.6% per 1000 ft DA, not floored.
    """
    mode = KochMode.coerce(mode)
    if mode.is_legacy:
        return LEGACY_POWER_RATE * (da_ft / 1000) * 100
    if math.isnan(da_ft):
        return math.nan
    roc_factor = max(0.0, 1 - MODERN_ROC_RATE * (da_ft / 1000))
    return (1 - roc_factor) * 100


def display_takeoff_pct(pct: float) -> float:
    """Takeoff increase as shown to the pilot: floored at zero."""
    if math.isnan(pct):
        return pct
    return max(0.0, pct)


def display_secondary_pct(pct: float, mode: Union[KochMode, str]) -> float:
    """ROC decrease is floored at zero for display; legacy power decrease is not."""
    mode = KochMode.coerce(mode)
    if mode.is_legacy or math.isnan(pct):
        return pct
    return max(0.0, pct)


def koch_density_altitude(
    pa_ft: float,
    temp_c: float,
    field_elev_ft: float,
    mode: Union[KochMode, str],
    dew_c: Optional[float] = None,
) -> float:
    """Density altitude the given mode feeds into the Koch formulas."""
    mode = KochMode.coerce(mode)
    if mode.uses_precise_da:
        return density_altitude_precise(pa_ft, temp_c, dew_c)
    return density_altitude_rule_of_thumb(pa_ft, temp_c, field_elev_ft)


def koch_curve(
    pa_ft: float,
    temp_c: float,
    field_elev_ft: float,
    mode: Union[KochMode, str],
    dew_c: Optional[float] = None,
    span_c: Optional[int] = None,
) -> pd.DataFrame:
    """
    Koch percentages over a sweep of temperatures around temp_c.

    Rows cover every whole degree from floor(centre - span) to
    ceil(centre + span), where the centre is temp_c, or 15 °C if temp_c
    is not finite. Pressure altitude, field elevation and dewpoint are
    held constant.

    Args:
        pa_ft: Pressure altitude in feet
        temp_c: Current temperature in °C (curve centre)
        field_elev_ft: Field elevation in feet
        mode: Koch mode
        dew_c: Optional dewpoint in °C (precise mode only)
        span_c: Half-width of the sweep, defaults to configuration

    Returns:
        DataFrame with columns temp_c, density_altitude_ft, takeoff_pct,
        secondary_pct (raw percentages)
    """
    mode = KochMode.coerce(mode)
    if span_c is None:
        span_c = config.get_curve_span_c()
    centre = temp_c if math.isfinite(temp_c) else config.CURVE_CENTER_C
    start = math.floor(centre - span_c)
    end = math.ceil(centre + span_c)

    rows = []
    for t in range(start, end + 1):
        da = koch_density_altitude(pa_ft, t, field_elev_ft, mode, dew_c)
        rows.append({
            'temp_c': t,
            'density_altitude_ft': da,
            'takeoff_pct': koch_takeoff_pct(da, mode),
            'secondary_pct': koch_secondary_pct(da, mode),
        })

    logger.debug(f"Koch curve {mode.value}: {len(rows)} points from {start} to {end} °C")
    return pd.DataFrame(rows, columns=CURVE_COLUMNS)
