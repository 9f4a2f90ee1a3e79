"""
Weather module for decoding METAR reports.

Provides:
- MetarDecoder: Decode raw METAR text (parse_basic / parse_precise / parse_full / decode)
- DecodedMetar: Full and precise fields plus flight category
- ParsedMetarBasic, ParsedMetarPrecise, ParsedMetarFull: Parsed records
- FlightCategory: VFR/MVFR/IFR/LIFR/UNK enum with ordering
- WeatherAnalyzer: Visibility, ceiling, flight category, observation time

Example:
    from climbcheck.weather import MetarDecoder

    decoded = MetarDecoder.decode("METAR KJFK 211200Z 18008KT 2SM BR OVC005 12/11 A2990")
    print(decoded.category)  # FlightCategory.IFR
"""

from climbcheck.weather.models import (
    FlightCategory,
    ParsedMetarBasic,
    ParsedMetarPrecise,
    ParsedMetarFull,
    DecodedMetar,
)
from climbcheck.weather.tokens import TokenKind, TokenMatch, tokenize, classify
from climbcheck.weather.analysis import WeatherAnalyzer
from climbcheck.weather.parser import MetarDecoder

__all__ = [
    'FlightCategory',
    'ParsedMetarBasic',
    'ParsedMetarPrecise',
    'ParsedMetarFull',
    'DecodedMetar',
    'TokenKind',
    'TokenMatch',
    'tokenize',
    'classify',
    'WeatherAnalyzer',
    'MetarDecoder',
]
