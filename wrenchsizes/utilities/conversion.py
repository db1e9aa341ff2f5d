"""
Unit conversion between millimeters and inches.

All functions are pure: no side effects, no state.
"""

from __future__ import annotations

import math

MM_PER_INCH: float = 25.4


def inches_to_mm(inches: float, mm_per_inch: float = MM_PER_INCH) -> float:
    """Convert inches to millimeters."""
    return inches * mm_per_inch


def mm_to_inches(mm: float, mm_per_inch: float = MM_PER_INCH) -> float:
    """Convert millimeters to inches."""
    return mm / mm_per_inch


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves going away from zero.

    Unlike the built-in round(), 2.5 gives 3 and -2.5 gives -3.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for floats, so the comparison is too
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if value >= 0 else -int(whole)
