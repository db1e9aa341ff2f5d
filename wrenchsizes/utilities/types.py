"""
Core type definitions for the shared utilities layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BaseUnit(str, Enum):
    """Base unit a grid is divided from."""

    MILLIMETER = "mm"
    INCH = "inch"

    @property
    def other(self) -> BaseUnit:
        return BaseUnit.INCH if self is BaseUnit.MILLIMETER else BaseUnit.MILLIMETER


def is_power_of_two(value: float) -> bool:
    """True for 1, 2, 4, 8, ... given as int or integral float."""
    if value != int(value) or value < 1:
        return False
    n = int(value)
    return n & (n - 1) == 0


@dataclass(frozen=True)
class GridSpec:
    """
    A discrete measurement grid: a base unit divided into equal steps.

    ``steps_per_base`` is the number of steps in one millimeter or one inch,
    e.g. 10.0 for a 0.1 mm grid or 16 for a 1/16 inch grid. Inch grids are
    binary-fraction grids, so their step count must be a power of two.
    """

    steps_per_base: float
    unit: BaseUnit

    def __post_init__(self) -> None:
        if self.steps_per_base <= 0:
            raise ValueError(f"steps_per_base must be positive, got {self.steps_per_base}")
        if self.unit is BaseUnit.INCH and not is_power_of_two(self.steps_per_base):
            raise ValueError(
                f"inch grid steps_per_base must be a power of two, got {self.steps_per_base}"
            )

    @property
    def denominator(self) -> int:
        """Steps per inch as an int, for rendering fractions. Inch grids only."""
        if self.unit is not BaseUnit.INCH:
            raise ValueError("only inch grids have a fractional denominator")
        return int(self.steps_per_base)
