"""Decoded METAR data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from climbcheck.utils.units import hpa_to_in_hg, in_hg_to_hpa, round_to


class FlightCategory(Enum):
    """
    FAA flight category based on ceiling and visibility.

    Known categories are ordered from worst to best: LIFR < IFR < MVFR < VFR.
    UNK (no usable visibility) is not ordered against the others.

    Thresholds (ceiling OR visibility, whichever is worse):
        LIFR:  visibility < 1 SM  or  ceiling < 500 ft
        IFR:   visibility < 3 SM  or  ceiling < 1000 ft
        MVFR:  visibility <= 5 SM or  ceiling <= 3000 ft
        VFR:   otherwise
    """

    VFR = "VFR"
    MVFR = "MVFR"
    IFR = "IFR"
    LIFR = "LIFR"
    UNK = "UNK"

    @property
    def order(self) -> Optional[int]:
        """Numeric ordering from worst (0) to best (3), None for UNK."""
        return _CATEGORY_ORDER.get(self)

    @property
    def color(self) -> str:
        """Display tier colour."""
        return _CATEGORY_COLORS[self]

    @property
    def is_known(self) -> bool:
        return self is not FlightCategory.UNK

    def _comparable(self, other) -> bool:
        return isinstance(other, FlightCategory) and self.is_known and other.is_known

    def __lt__(self, other: 'FlightCategory') -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'FlightCategory') -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'FlightCategory') -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'FlightCategory') -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.order >= other.order


_CATEGORY_ORDER = {
    FlightCategory.LIFR: 0,
    FlightCategory.IFR: 1,
    FlightCategory.MVFR: 2,
    FlightCategory.VFR: 3,
}

_CATEGORY_COLORS = {
    FlightCategory.LIFR: "purple",
    FlightCategory.IFR: "red",
    FlightCategory.MVFR: "blue",
    FlightCategory.VFR: "emerald",
    FlightCategory.UNK: "slate",
}


@dataclass(frozen=True)
class ParsedMetarBasic:
    """Temperature (slash group) and altimeter setting."""

    temp_c: Optional[float] = None
    alt_in_hg: Optional[float] = None


@dataclass(frozen=True)
class ParsedMetarPrecise:
    """
    Temperature, dewpoint and altimeter with the best available precision.

    Attributes:
        temp_c: Temperature, tenths of a degree when a T group is present
        dew_c: Dewpoint, tenths of a degree when a T group is present
        alt_in_hg: Altimeter setting in inHg
        alt_hpa: Altimeter setting in hPa (converted for A groups)
        alt_unit: 'A' or 'Q', the unit the report used
    """

    temp_c: Optional[float] = None
    dew_c: Optional[float] = None
    alt_in_hg: Optional[float] = None
    alt_hpa: Optional[float] = None
    alt_unit: Optional[str] = None


@dataclass(frozen=True)
class ParsedMetarFull:
    """
    All fields the decoder extracts, as they appear in the report.

    clouds and wx keep the report order and are not deduplicated.
    type is the first token of the report, time the first DDHHMMZ token.
    """

    temp_c: Optional[float] = None
    alt_in_hg: Optional[float] = None
    wind: Optional[str] = None
    vis_sm: Optional[str] = None
    clouds: Tuple[str, ...] = field(default_factory=tuple)
    wx: Tuple[str, ...] = field(default_factory=tuple)
    type: str = ""
    time: str = ""


@dataclass(frozen=True)
class DecodedMetar:
    """
    Result of decoding one report.

    Attributes:
        raw: Report text as given
        full: Parsed fields (slash group temperature)
        precise: Temperature/dewpoint/altimeter at best precision
        category: Flight category from visibility and ceiling
    """

    raw: str
    full: ParsedMetarFull
    precise: ParsedMetarPrecise
    category: FlightCategory = FlightCategory.UNK

    @property
    def altimeter_summary(self) -> Optional[str]:
        """
        Altimeter in both units, in the order the report gave them.

        'QNH 1013 hPa / 29.91 inHg' for Q groups,
        '30.05 inHg / QNH 1018 hPa' for A groups, None if absent.
        """
        if self.precise.alt_unit == 'Q' and self.precise.alt_hpa is not None:
            hpa = self.precise.alt_hpa
            return f"QNH {round_to(hpa):.0f} hPa / {round_to(hpa_to_in_hg(hpa), 2):.2f} inHg"
        in_hg = self.precise.alt_in_hg if self.precise.alt_in_hg is not None else self.full.alt_in_hg
        if in_hg is None:
            return None
        return f"{round_to(in_hg, 2):.2f} inHg / QNH {round_to(in_hg_to_hpa(in_hg)):.0f} hPa"

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'raw': self.raw,
            'type': self.full.type,
            'time': self.full.time,
            'temp_c': self.precise.temp_c,
            'dew_c': self.precise.dew_c,
            'alt_in_hg': self.precise.alt_in_hg,
            'alt_hpa': self.precise.alt_hpa,
            'alt_unit': self.precise.alt_unit,
            'wind': self.full.wind,
            'vis_sm': self.full.vis_sm,
            'clouds': list(self.full.clouds),
            'wx': list(self.full.wx),
            'flight_category': self.category.value,
        }

    def __repr__(self) -> str:
        return f"DecodedMetar({self.full.type} {self.full.time} {self.category.value})"
