"""
METAR tokenizer and token matchers.

Each matcher looks at one token and returns a TokenMatch tagged with the
kind of group it recognised, or None. MATCHERS lists them in priority
order; classify() runs every matcher over a token so the parser can fold
the matches into fields with its own per-field policies.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from climbcheck.utils.units import hpa_to_in_hg

WEATHER_CODES = ('RA', 'SN', 'FG', 'BR', 'HZ', 'TS', 'DZ', 'SH', 'SQ', 'FZ', 'PL')
CLOUD_COVERS = ('FEW', 'SCT', 'BKN', 'OVC')

_ALTIMETER_IN_HG_RE = re.compile(r'^A(\d{4})$')
_ALTIMETER_HPA_RE = re.compile(r'^Q(\d{4})$')
_TEMP_DEW_RE = re.compile(r'^(M?)(\d{1,2})/(?:(M?)(\d{1,2}))?$')
_TEMP_PRECISE_RE = re.compile(r'^T(\d)(\d{3})(\d)(\d{3})$')
_WIND_RE = re.compile(r'^(\d{3}|VRB)\d{2,3}(G\d{2,3})?KT$')
_VISIBILITY_RE = re.compile(r'^(\d{1,2}|\d?/\d)SM$')
_CLOUD_RE = re.compile(r'^(FEW|SCT|BKN|OVC)(\d{3})')
_WEATHER_RE = re.compile(r'^(' + '|'.join(WEATHER_CODES) + ')')
_TIME_RE = re.compile(r'\d{6}Z')


class TokenKind(Enum):
    """Kind of METAR group a token was recognised as."""

    ALTIMETER = "altimeter"
    TEMP_DEW = "temp_dew"
    TEMP_PRECISE = "temp_precise"
    WIND = "wind"
    VISIBILITY = "visibility"
    CLOUD = "cloud"
    WEATHER = "weather"
    TIME = "time"


@dataclass(frozen=True)
class TokenMatch:
    """
    A recognised token.

    value depends on kind:
        ALTIMETER: (unit letter 'A' or 'Q', inHg, hPa or None for 'A')
        TEMP_DEW / TEMP_PRECISE: (temperature °C, dewpoint °C or None)
        CLOUD: (cover, base in ft)
        others: the token itself
    """

    kind: TokenKind
    token: str
    value: Any


def tokenize(raw: Optional[str]) -> List[str]:
    """
    Split a raw report into tokens.

    The report terminator '=' is replaced by a space, the text is split on
    whitespace runs and empty tokens are dropped.
    """
    if not raw:
        return []
    return raw.replace('=', ' ', 1).split()


def _signed(negative: str, digits: str) -> float:
    value = float(int(digits))
    return -value if negative else value


def match_altimeter(token: str) -> Optional[TokenMatch]:
    m = _ALTIMETER_IN_HG_RE.match(token)
    if m:
        return TokenMatch(TokenKind.ALTIMETER, token, ('A', int(m.group(1)) / 100, None))
    m = _ALTIMETER_HPA_RE.match(token)
    if m:
        hpa = float(int(m.group(1)))
        return TokenMatch(TokenKind.ALTIMETER, token, ('Q', hpa_to_in_hg(hpa), hpa))
    return None


def match_temp_dew(token: str) -> Optional[TokenMatch]:
    """Whole degree group such as '22/12', 'M05/M10' or '18/'."""
    m = _TEMP_DEW_RE.match(token)
    if not m:
        return None
    temp = _signed(m.group(1), m.group(2))
    dew = _signed(m.group(3), m.group(4)) if m.group(4) is not None else None
    return TokenMatch(TokenKind.TEMP_DEW, token, (temp, dew))


def match_temp_precise(token: str) -> Optional[TokenMatch]:
    """Remark group 'TsTTTsDDD' with tenths of a degree, s=1 for negative, any other digit positive."""
    m = _TEMP_PRECISE_RE.match(token)
    if not m:
        return None
    temp = int(m.group(2)) / 10
    dew = int(m.group(4)) / 10
    if m.group(1) == '1':
        temp = -temp
    if m.group(3) == '1':
        dew = -dew
    return TokenMatch(TokenKind.TEMP_PRECISE, token, (temp, dew))


def match_wind(token: str) -> Optional[TokenMatch]:
    if _WIND_RE.match(token):
        return TokenMatch(TokenKind.WIND, token, token)
    return None


def match_visibility(token: str) -> Optional[TokenMatch]:
    if _VISIBILITY_RE.match(token):
        return TokenMatch(TokenKind.VISIBILITY, token, token)
    return None


def match_cloud(token: str) -> Optional[TokenMatch]:
    m = _CLOUD_RE.match(token)
    if m:
        return TokenMatch(TokenKind.CLOUD, token, (m.group(1), int(m.group(2)) * 100))
    return None


def match_weather(token: str) -> Optional[TokenMatch]:
    if _WEATHER_RE.match(token):
        return TokenMatch(TokenKind.WEATHER, token, token)
    return None


def match_time(token: str) -> Optional[TokenMatch]:
    if _TIME_RE.search(token):
        return TokenMatch(TokenKind.TIME, token, token)
    return None


MATCHERS: List[Callable[[str], Optional[TokenMatch]]] = [
    match_altimeter,
    match_temp_dew,
    match_temp_precise,
    match_wind,
    match_visibility,
    match_cloud,
    match_weather,
    match_time,
]


def classify(token: str) -> List[TokenMatch]:
    """All matches for a token, in matcher priority order."""
    matches = []
    for matcher in MATCHERS:
        match = matcher(token)
        if match is not None:
            matches.append(match)
    return matches
