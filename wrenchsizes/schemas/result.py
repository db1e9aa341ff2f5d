"""
ConversionResult: one row of a sweep, plus the enums that label it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wrenchsizes.utilities.types import BaseUnit, GridSpec


class Direction(str, Enum):
    """Which way a sweep converts. The value is the sweep's header line."""

    METRIC_TO_SAE = "Metric/millimeter to fractional/inch/SAE/standard:"
    SAE_TO_METRIC = "Fractional/inch/SAE/standard to metric/millimeter:"

    @classmethod
    def from_source(cls, unit: BaseUnit) -> Direction:
        return cls.METRIC_TO_SAE if unit is BaseUnit.MILLIMETER else cls.SAE_TO_METRIC

    @property
    def header(self) -> str:
        return self.value


class Closeness(str, Enum):
    """How faithfully the rounded step represents the exact size."""

    VERY_GOOD = "very good"
    GOOD = "good"
    NONE = ""

    @property
    def suffix(self) -> str:
        """Text appended to a report line, with its leading space."""
        return f" {self.value}" if self.value else ""


@dataclass(frozen=True)
class ConversionResult:
    """
    One source step mapped onto the opposite grid.

    Attributes:
        direction: Sweep this row belongs to.
        source: Grid being walked.
        target: Grid being rounded onto.
        source_steps: Step count on the source grid.
        exact_source: Size of source_steps, in source base units.
        exact_target: The same size in target base units, unrounded.
        target_steps: Nearest target step count after bias, at least 1.
        rounded_target: Size of target_steps, in target base units.
        ratio: rounded_target / exact_target.
        closeness: Classification of ratio.
    """

    direction: Direction
    source: GridSpec
    target: GridSpec
    source_steps: int
    exact_source: float
    exact_target: float
    target_steps: int
    rounded_target: float
    ratio: float
    closeness: Closeness
