"""
Runtime configuration for the climbcheck calculator.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Koch model configuration
KOCH_MODES = ("rot", "precise", "legacy")
FALLBACK_KOCH_MODE = "precise"
DEFAULT_KOCH_MODE = os.getenv("CLIMBCHECK_KOCH_MODE", FALLBACK_KOCH_MODE).strip().lower()

# Koch curve sweep
CURVE_CENTER_C = 15.0  # used when the current temperature is unknown
CURVE_SPAN_C = os.getenv("CLIMBCHECK_CURVE_SPAN_C", "25")


def get_default_koch_mode() -> str:
    """Koch mode used when the caller does not choose one."""
    if DEFAULT_KOCH_MODE in KOCH_MODES:
        return DEFAULT_KOCH_MODE
    logger.warning(
        f"Invalid CLIMBCHECK_KOCH_MODE '{DEFAULT_KOCH_MODE}', using '{FALLBACK_KOCH_MODE}'"
    )
    return FALLBACK_KOCH_MODE


def get_curve_span_c() -> int:
    """Half-width in degrees Celsius of the Koch curve temperature sweep."""
    try:
        span = int(CURVE_SPAN_C)
    except (TypeError, ValueError):
        logger.warning(f"Invalid CLIMBCHECK_CURVE_SPAN_C '{CURVE_SPAN_C}', using 25")
        return 25
    if span <= 0:
        logger.warning(f"CLIMBCHECK_CURVE_SPAN_C must be positive, got {span}; using 25")
        return 25
    return span
