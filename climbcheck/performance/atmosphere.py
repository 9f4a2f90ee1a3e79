"""
Atmospheric model: pressure altitude, ISA temperature and density altitude.

All functions are pure and total over floats. Non-finite inputs come back
as NaN (or another non-finite value); callers check with math.isfinite()
before display.
"""

import math
from typing import Optional

from climbcheck.utils.units import ft_to_m, m_to_ft

# ISA and gas constants
P0 = 101325.0          # Pa, sea-level standard pressure
T0 = 288.15            # K, sea-level standard temperature
L = 0.0065             # K/m, standard lapse rate
G = 9.80665            # m/s²
R = 8.314462618        # J/(mol·K), universal gas constant
M = 0.0289644          # kg/mol, molar mass of dry air
N_EXP = G * M / (R * L)  # ~5.25588
RD = 287.05            # J/(kg·K), dry air
RHO0 = 1.225           # kg/m³, sea-level ISA density
EPS = 0.622            # Mw/Md

STANDARD_ALTIMETER_IN_HG = 29.92
ISA_SEA_LEVEL_C = 15.0
ISA_LAPSE_C_PER_1000FT = 1.98
ROT_FT_PER_C = 120.0

MAX_MIXING_RATIO = 0.1  # kg/kg


def _pow(base: float, exponent: float) -> float:
    # Negative bases would give a complex result in Python.
    if math.isnan(base) or base < 0:
        return math.nan
    return base ** exponent


def _clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return value
    return max(low, min(high, value))


def pressure_altitude(field_elev_ft: float, altimeter_in_hg: float) -> float:
    """
    Pressure altitude from field elevation and altimeter setting.

    PA = (29.92 - altimeter) * 1000 + field elevation
    """
    return (STANDARD_ALTIMETER_IN_HG - altimeter_in_hg) * 1000 + field_elev_ft


def isa_temp(elev_ft: float) -> float:
    """Standard temperature in °C at an elevation (1.98 °C per 1000 ft)."""
    return ISA_SEA_LEVEL_C - ISA_LAPSE_C_PER_1000FT * (elev_ft / 1000)


def density_altitude_rule_of_thumb(pa_ft: float, temp_c: float, field_elev_ft: float) -> float:
    """
    Rule-of-thumb density altitude: PA + 120 ft per °C above ISA.

    The ISA deviation is taken at field elevation. Humidity is ignored.
    """
    return pa_ft + ROT_FT_PER_C * (temp_c - isa_temp(field_elev_ft))


def standard_pressure_at_altitude(altitude_m: float) -> float:
    """ISA pressure in Pa at a geopotential altitude in meters (troposphere)."""
    ratio = 1 - (L * altitude_m) / T0
    return P0 * _pow(ratio, N_EXP)


def vapor_pressure_hpa(dew_c: float) -> float:
    """Water vapor pressure in hPa from dewpoint (Magnus approximation)."""
    denominator = dew_c + 243.5
    if denominator == 0:
        return math.nan
    try:
        return 6.112 * math.exp((17.67 * dew_c) / denominator)
    except OverflowError:
        return math.inf


def virtual_temperature(temp_k: float, pressure_pa: float, dew_c: Optional[float]) -> float:
    """
    Virtual temperature in K.

    Without a finite dewpoint the air is treated as dry and the virtual
    temperature equals the actual temperature. The mixing ratio is clamped
    to [0, 0.1] kg/kg.
    """
    if dew_c is None or not math.isfinite(dew_c):
        return temp_k
    e_hpa = vapor_pressure_hpa(dew_c)
    p_hpa = pressure_pa / 100
    mixing_ratio = _clamp(EPS * e_hpa / max(1e-6, p_hpa - e_hpa), 0.0, MAX_MIXING_RATIO)
    return temp_k * (1 + mixing_ratio / EPS) / (1 + mixing_ratio)


def density_altitude_precise(pa_ft: float, temp_c: float, dew_c: Optional[float] = None) -> float:
    """
    Density altitude from air density, corrected for humidity.

    Steps:
        1. Standard pressure at the pressure altitude (barometric formula)
        2. Virtual temperature from temperature and optional dewpoint
        3. Air density rho = p / (Rd * Tv)
        4. Invert the barometric formula against rho0 = 1.225 kg/m³

    Args:
        pa_ft: Pressure altitude in feet
        temp_c: Outside air temperature in °C
        dew_c: Dewpoint in °C, or None for dry air

    Returns:
        Density altitude in feet (NaN for non-physical inputs)
    """
    pressure = standard_pressure_at_altitude(ft_to_m(pa_ft))
    tv = virtual_temperature(temp_c + 273.15, pressure, dew_c)
    if tv == 0:
        return math.nan
    rho = pressure / (RD * tv)
    term = _pow(rho / RHO0, 1 / (N_EXP - 1))
    return m_to_ft((T0 / L) * (1 - term))
