"""
Unit conversion utilities.

Exact linear/affine transforms between the units aviation weather and
performance data are reported in: temperature (°C/°F), pressure
(inHg/hPa) and length (ft/m).
"""

import math
import sys

HPA_PER_IN_HG = 33.8638866667
M_PER_FT = 0.3048


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def f_to_c(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def in_hg_to_hpa(in_hg: float) -> float:
    """Convert inches of mercury to hectopascals."""
    return in_hg * HPA_PER_IN_HG


def hpa_to_in_hg(hpa: float) -> float:
    """Convert hectopascals to inches of mercury."""
    return hpa / HPA_PER_IN_HG


def ft_to_m(feet: float) -> float:
    """Convert feet to meters."""
    return feet * M_PER_FT


def m_to_ft(meters: float) -> float:
    """Convert meters to feet."""
    return meters / M_PER_FT


def round_to(value: float, digits: int = 0) -> float:
    """
    Round half up for display (2.5 -> 3, -2.5 -> -2).

    Args:
        value: Value to round
        digits: Number of decimal places

    Returns:
        Rounded value, or the value unchanged if it is not finite
    """
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor((value + sys.float_info.epsilon) * scale + 0.5) / scale
