"""METAR decoder folding token matches into parsed report records."""

import logging
from typing import List, Optional

from climbcheck.utils.units import in_hg_to_hpa
from climbcheck.weather.analysis import WeatherAnalyzer
from climbcheck.weather.models import (
    DecodedMetar,
    ParsedMetarBasic,
    ParsedMetarFull,
    ParsedMetarPrecise,
)
from climbcheck.weather.tokens import TokenKind, TokenMatch, classify, tokenize

logger = logging.getLogger(__name__)


class MetarDecoder:
    """
    Decode raw METAR text into parsed records.

    The decoder never raises on report content: every field it cannot find
    is None (or empty), independently of the others.

    Field policies:
        altimeter: first A#### or Q#### group wins
        temperature/dewpoint: first slash group per field, overridden by a
            T group (tenths of a degree) wherever it appears
        wind, visibility: last matching group wins
        clouds, weather: every matching group, in report order
        type: first token; time: first DDHHMMZ token

    Example:
        decoded = MetarDecoder.decode(
            "KSMO 251853Z 25008KT 10SM FEW250 22/12 A3005"
        )
        decoded.precise.alt_in_hg  # 30.05
    """

    @staticmethod
    def tokenize(raw: Optional[str]) -> List[str]:
        """Split a report into tokens (see climbcheck.weather.tokens.tokenize)."""
        return tokenize(raw)

    @classmethod
    def _matches(cls, tokens: List[str]) -> List[TokenMatch]:
        matches = []
        for token in tokens:
            matches.extend(classify(token))
        return matches

    @staticmethod
    def _first(matches: List[TokenMatch], kind: TokenKind) -> Optional[TokenMatch]:
        for match in matches:
            if match.kind is kind:
                return match
        return None

    @staticmethod
    def _last(matches: List[TokenMatch], kind: TokenKind) -> Optional[TokenMatch]:
        for match in reversed(matches):
            if match.kind is kind:
                return match
        return None

    @classmethod
    def _slash_temperature(cls, matches: List[TokenMatch]):
        """First slash-group temperature and first slash-group dewpoint."""
        temp_c = None
        dew_c = None
        for match in matches:
            if match.kind is not TokenKind.TEMP_DEW:
                continue
            temp, dew = match.value
            if temp_c is None:
                temp_c = temp
            if dew_c is None and dew is not None:
                dew_c = dew
            if temp_c is not None and dew_c is not None:
                break
        return temp_c, dew_c

    @classmethod
    def parse_basic(cls, raw: Optional[str]) -> ParsedMetarBasic:
        """
        Temperature from the slash group and the altimeter in inHg.

        Args:
            raw: Raw METAR text

        Returns:
            ParsedMetarBasic
        """
        matches = cls._matches(tokenize(raw))
        temp_c, _ = cls._slash_temperature(matches)
        altimeter = cls._first(matches, TokenKind.ALTIMETER)
        return ParsedMetarBasic(
            temp_c=temp_c,
            alt_in_hg=altimeter.value[1] if altimeter else None,
        )

    @classmethod
    def parse_precise(cls, raw: Optional[str]) -> ParsedMetarPrecise:
        """
        Temperature and dewpoint at best precision, altimeter in both units.

        Args:
            raw: Raw METAR text

        Returns:
            ParsedMetarPrecise
        """
        matches = cls._matches(tokenize(raw))
        temp_c, dew_c = cls._slash_temperature(matches)

        precise = cls._last(matches, TokenKind.TEMP_PRECISE)
        if precise is not None:
            temp_c, dew_c = precise.value

        alt_in_hg = alt_hpa = alt_unit = None
        altimeter = cls._first(matches, TokenKind.ALTIMETER)
        if altimeter is not None:
            alt_unit, alt_in_hg, alt_hpa = altimeter.value
            if alt_hpa is None:
                alt_hpa = in_hg_to_hpa(alt_in_hg)

        return ParsedMetarPrecise(
            temp_c=temp_c,
            dew_c=dew_c,
            alt_in_hg=alt_in_hg,
            alt_hpa=alt_hpa,
            alt_unit=alt_unit,
        )

    @classmethod
    def parse_full(cls, raw: Optional[str]) -> ParsedMetarFull:
        """
        Every field the decoder knows, as raw tokens.

        Args:
            raw: Raw METAR text

        Returns:
            ParsedMetarFull
        """
        tokens = tokenize(raw)
        matches = cls._matches(tokens)
        basic = cls.parse_basic(raw)

        wind = cls._last(matches, TokenKind.WIND)
        visibility = cls._last(matches, TokenKind.VISIBILITY)
        time = cls._first(matches, TokenKind.TIME)

        return ParsedMetarFull(
            temp_c=basic.temp_c,
            alt_in_hg=basic.alt_in_hg,
            wind=wind.token if wind else None,
            vis_sm=visibility.token if visibility else None,
            clouds=tuple(m.token for m in matches if m.kind is TokenKind.CLOUD),
            wx=tuple(m.token for m in matches if m.kind is TokenKind.WEATHER),
            type=tokens[0] if tokens else "",
            time=time.token if time else "",
        )

    @classmethod
    def decode(cls, raw: Optional[str]) -> DecodedMetar:
        """
        Decode a report: full fields, precise fields and flight category.

        Args:
            raw: Raw METAR text, may be empty or None

        Returns:
            DecodedMetar
        """
        text = raw or ""
        full = cls.parse_full(text)
        precise = cls.parse_precise(text)
        category = WeatherAnalyzer.flight_category(full.vis_sm, full.clouds)

        if text and full.alt_in_hg is None and full.temp_c is None:
            logger.debug(f"No temperature or altimeter group in report: {text[:80]}")

        return DecodedMetar(raw=text, full=full, precise=precise, category=category)
