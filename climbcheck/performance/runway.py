"""Runway length assessment from a baseline takeoff distance and the Koch multiplier."""

import math
from dataclasses import dataclass
from typing import Union

from climbcheck.performance.koch import KochMode, takeoff_multiplier


def _nz(value: float) -> float:
    """Non-finite values count as zero."""
    return value if math.isfinite(value) else 0.0


@dataclass(frozen=True)
class RunwayAssessment:
    """
    Required takeoff distance against available runway.

    All lengths are in feet. When either the runway or the baseline
    distance is missing (zero), the derived figures are zero and the
    assessment reports ok.

    Attributes:
        runway_ft: Available runway length
        baseline_ft: POH takeoff distance at sea level, standard day
        multiplier: Koch takeoff distance multiplier
        required_ft: Estimated takeoff distance in current conditions
        margin_ft: Runway remaining after the estimated takeoff (negative if short)
        ok: True if the estimated distance fits on the runway
        isa_equivalent_ft: ISA sea-level runway length equivalent to this runway today
        pct_used: Share of the runway used, clamped to [0, 100]
        over_by_ft: Distance by which the estimate exceeds the runway
        has_inputs: True if both runway and baseline are positive
    """

    runway_ft: float
    baseline_ft: float
    multiplier: float
    required_ft: float
    margin_ft: float
    ok: bool
    isa_equivalent_ft: float
    pct_used: float
    over_by_ft: float
    has_inputs: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'runway_ft': self.runway_ft,
            'baseline_ft': self.baseline_ft,
            'multiplier': self.multiplier,
            'required_ft': self.required_ft,
            'margin_ft': self.margin_ft,
            'ok': self.ok,
            'isa_equivalent_ft': self.isa_equivalent_ft,
            'pct_used': self.pct_used,
            'over_by_ft': self.over_by_ft,
            'has_inputs': self.has_inputs,
        }


def assess_runway(
    runway_ft: float,
    baseline_ft: float,
    da_ft: float,
    mode: Union[KochMode, str],
) -> RunwayAssessment:
    """
    Estimate takeoff distance required and compare to the runway.

    Args:
        runway_ft: Available runway length in feet
        baseline_ft: Sea-level standard-day takeoff distance in feet
        da_ft: Density altitude used for Koch (non-finite counts as 0)
        mode: Koch mode selecting the takeoff coefficient

    Returns:
        RunwayAssessment
    """
    runway_ft = _nz(runway_ft)
    baseline_ft = _nz(baseline_ft)
    multiplier = takeoff_multiplier(_nz(da_ft), mode)

    has_inputs = runway_ft > 0 and baseline_ft > 0
    has_runway = runway_ft > 0

    required_ft = baseline_ft * multiplier if has_inputs else 0.0
    margin_ft = runway_ft - required_ft if has_inputs else 0.0
    ok = margin_ft >= 0 if has_inputs else True
    isa_equivalent_ft = runway_ft / multiplier if has_runway and multiplier > 0 else 0.0
    pct_used = max(0.0, min(100.0, required_ft / runway_ft * 100)) if has_inputs else 0.0
    over_by_ft = max(0.0, required_ft - runway_ft) if has_inputs else 0.0

    return RunwayAssessment(
        runway_ft=runway_ft,
        baseline_ft=baseline_ft,
        multiplier=multiplier,
        required_ft=required_ft,
        margin_ft=margin_ft,
        ok=ok,
        isa_equivalent_ft=isa_equivalent_ft,
        pct_used=pct_used,
        over_by_ft=over_by_ft,
        has_inputs=has_inputs,
    )
