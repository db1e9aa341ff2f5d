"""
Grid step arithmetic: real measurement to step count and back.

All functions are pure. A step count is never less than 1: a zero size is
not a meaningful measurement to report, so it becomes one step.
"""

from __future__ import annotations

from wrenchsizes.utilities.conversion import (
    MM_PER_INCH,
    inches_to_mm,
    mm_to_inches,
    round_half_away,
)
from wrenchsizes.utilities.types import BaseUnit, GridSpec

MIN_STEPS: int = 1


def metric_grid(steps_per_mm: float) -> GridSpec:
    """Millimeter grid, e.g. steps_per_mm=10.0 for 0.1 mm units."""
    return GridSpec(steps_per_base=steps_per_mm, unit=BaseUnit.MILLIMETER)


def inch_grid(steps_per_inch: int) -> GridSpec:
    """Fractional inch grid, e.g. steps_per_inch=16 for 1/16 inch units."""
    return GridSpec(steps_per_base=steps_per_inch, unit=BaseUnit.INCH)


def to_steps(value: float, grid: GridSpec, bias: float = 0.0) -> int:
    """
    Round a real value in the grid's base unit to a step count.

    The bias is added before rounding, so a bias of +0.3 rounds up once the
    fractional part reaches 0.2 of a step instead of 0.5.

    Args:
        value: Non-negative size in the grid's base unit.
        grid: Target grid.
        bias: Additive nudge in [-1.0, +1.0], in steps.

    Returns:
        The rounded step count, at least 1.
    """
    return max(round_half_away(value * grid.steps_per_base + bias), MIN_STEPS)


def to_value(steps: int, grid: GridSpec) -> float:
    """Exact size of a step count in the grid's base unit."""
    return steps / grid.steps_per_base


def cross_convert(
    steps: int,
    grid: GridSpec,
    other: GridSpec,
    mm_per_inch: float = MM_PER_INCH,
) -> float:
    """
    Express a step count on ``grid`` as a real value in ``other``'s base unit.

    The result is unrounded and ready for ``to_steps(result, other, bias)``.

    Raises:
        ValueError: If both grids share a base unit.
    """
    if grid.unit is other.unit:
        raise ValueError(f"cannot cross-convert between two {grid.unit.value} grids")
    value = to_value(steps, grid)
    if grid.unit is BaseUnit.MILLIMETER:
        return mm_to_inches(value, mm_per_inch)
    return inches_to_mm(value, mm_per_inch)
