"""
Shared utilities for the wrenchsizes conversion engine.

Provides the physical constant, millimeter/inch conversion, rounding, and the
grid type used by every other layer.
"""

from .conversion import MM_PER_INCH, inches_to_mm, mm_to_inches, round_half_away
from .types import BaseUnit, GridSpec, is_power_of_two

__all__ = [
    # types
    "BaseUnit",
    "GridSpec",
    "is_power_of_two",
    # conversion
    "MM_PER_INCH",
    "inches_to_mm",
    "mm_to_inches",
    "round_half_away",
]
