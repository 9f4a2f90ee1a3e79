"""
Koch chart performance calculator core.

This package provides tools for decoding METAR weather reports and
computing density altitude and the resulting aircraft performance
degradation.

The main public API includes:
- MetarDecoder: Tokenize and decode raw METAR text
- DecodedMetar: Decoded fields plus flight category
- FlightCategory: VFR/MVFR/IFR/LIFR/UNK enum
- PerformanceCalculator: Pressure/density altitude and Koch percentages
- PerformanceInputs: Caller supplied performance inputs
- KochMode: Rule-of-thumb, precise or legacy Koch model
"""

from climbcheck.weather import MetarDecoder, DecodedMetar, FlightCategory
from climbcheck.performance import (
    PerformanceCalculator,
    PerformanceInputs,
    PerformanceResult,
    KochMode,
)


__version__ = '0.1.0'
__all__ = [
    'MetarDecoder',
    'DecodedMetar',
    'FlightCategory',
    'PerformanceCalculator',
    'PerformanceInputs',
    'PerformanceResult',
    'KochMode',
]
