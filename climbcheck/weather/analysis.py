"""Weather analysis: visibility, ceiling, flight category and observation time."""

import logging
import re
from datetime import datetime, timezone, timedelta
from typing import Iterable, Optional

from dateutil.relativedelta import relativedelta

from climbcheck.weather.models import FlightCategory

logger = logging.getLogger(__name__)

_CEILING_COVERS = ('BKN', 'OVC')
_CLOUD_BASE_RE = re.compile(r'^(FEW|SCT|BKN|OVC)(\d{3})')
_TIME_GROUP_RE = re.compile(r'(\d{2})(\d{2})(\d{2})Z')


class WeatherAnalyzer:
    """
    Derived weather values.

    All methods are static/classmethod, pure functions with no state.
    """

    @classmethod
    def visibility_sm(cls, vis_token: Optional[str]) -> Optional[float]:
        """
        Visibility in statute miles from a 'SM' token.

        Args:
            vis_token: Token such as '10SM' or '1/2SM'

        Returns:
            Float value or None if absent or unparseable
        """
        if not vis_token or 'SM' not in vis_token:
            return None
        return cls._safe_parse_fraction(vis_token.replace('SM', ''))

    @classmethod
    def _safe_parse_fraction(cls, text: str) -> Optional[float]:
        """
        Safely parse a whole number or simple fraction (no eval()).

        Handles: "10", "3/4", "1 1/2", "0.5"
        """
        text = text.strip()
        if not text:
            return None

        total = 0.0
        for part in text.split():
            if '/' in part:
                num, _, den = part.partition('/')
                try:
                    num_val = float(num)
                    den_val = float(den)
                except ValueError:
                    return None
                if den_val == 0:
                    return None
                total += num_val / den_val
            else:
                try:
                    total += float(part)
                except ValueError:
                    return None
        return total

    @staticmethod
    def ceiling_ft(clouds: Iterable[str]) -> Optional[int]:
        """
        Lowest broken or overcast layer base in feet.

        Args:
            clouds: Cloud tokens such as 'BKN008', 'OVC015CB'

        Returns:
            Ceiling in feet or None if there is no ceiling
        """
        ceiling = None
        for cloud in clouds:
            m = _CLOUD_BASE_RE.match(cloud)
            if not m or m.group(1) not in _CEILING_COVERS:
                continue
            height = int(m.group(2)) * 100
            if ceiling is None or height < ceiling:
                ceiling = height
        return ceiling

    @classmethod
    def flight_category(cls, vis_token: Optional[str], clouds: Iterable[str]) -> FlightCategory:
        """
        Determine flight category from visibility and ceiling.

        Missing or zero visibility gives UNK. Otherwise the first tier whose
        ceiling or visibility threshold is met wins, worst first:
            LIFR:  ceiling < 500 ft   or  visibility < 1 SM
            IFR:   ceiling < 1000 ft  or  visibility < 3 SM
            MVFR:  ceiling <= 3000 ft or  visibility <= 5 SM
            VFR:   otherwise

        Args:
            vis_token: Visibility token from the report, e.g. '10SM'
            clouds: Cloud layer tokens from the report

        Returns:
            FlightCategory
        """
        vis = cls.visibility_sm(vis_token)
        if vis is None or vis == 0:
            return FlightCategory.UNK

        ceiling = cls.ceiling_ft(clouds)
        if ceiling is None:
            ceiling = float('inf')

        if ceiling < 500 or vis < 1:
            return FlightCategory.LIFR
        if ceiling < 1000 or vis < 3:
            return FlightCategory.IFR
        if ceiling <= 3000 or vis <= 5:
            return FlightCategory.MVFR
        return FlightCategory.VFR

    @staticmethod
    def observation_time(
        time_token: Optional[str],
        reference: Optional[datetime] = None,
    ) -> Optional[datetime]:
        """
        Resolve a DDHHMMZ group to a UTC datetime.

        The day is placed in the reference month. A result more than one
        day after the reference belongs to the previous month (a report
        from the 31st read on the 1st).

        Args:
            time_token: Token such as '251853Z'
            reference: Reference instant, defaults to now (UTC)

        Returns:
            Timezone-aware datetime or None if the token is invalid
        """
        if not time_token:
            return None
        m = _TIME_GROUP_RE.search(time_token)
        if not m:
            return None

        day, hour, minute = (int(g) for g in m.groups())
        if reference is None:
            reference = datetime.now(timezone.utc)
        elif reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)

        candidates = [reference, reference - relativedelta(months=1)]
        for base in candidates:
            try:
                obs = base.replace(day=day, hour=hour, minute=minute, second=0, microsecond=0)
            except ValueError:
                continue
            if obs <= reference + timedelta(days=1):
                return obs

        logger.debug(f"Cannot resolve observation time '{time_token}' against {reference.isoformat()}")
        return None
