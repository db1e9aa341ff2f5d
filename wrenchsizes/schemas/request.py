"""
ConversionRequest: the validated input bundle for one conversion run.

Built by wrenchsizes.api.request.build_request from user strings, or directly
by code that already holds numbers. The engine trusts a constructed request.
"""

from __future__ import annotations

from dataclasses import dataclass

from wrenchsizes.utilities.types import BaseUnit, GridSpec

METRIC_MAX_MM: float = 250.0
SAE_MAX_INCH: float = 10.0
BIAS_MIN: float = -1.0
BIAS_MAX: float = 1.0


@dataclass(frozen=True)
class ConversionRequest:
    """
    Ranges, grids and bias for both sweeps.

    Attributes:
        metric_grid: Millimeter grid the metric sweep walks.
        sae_grid: Inch grid the SAE sweep walks.
        metric_first: First metric size in mm.
        metric_last: Last metric size in mm.
        sae_first: First SAE size in inches.
        sae_last: Last SAE size in inches.
        bias: Added before rounding onto the opposite grid, in steps.
    """

    metric_grid: GridSpec
    sae_grid: GridSpec
    metric_first: float
    metric_last: float
    sae_first: float
    sae_last: float
    bias: float = 0.0

    def __post_init__(self) -> None:
        if self.metric_grid.unit is not BaseUnit.MILLIMETER:
            raise ValueError(f"metric_grid must be a millimeter grid, got {self.metric_grid.unit}")
        if self.sae_grid.unit is not BaseUnit.INCH:
            raise ValueError(f"sae_grid must be an inch grid, got {self.sae_grid.unit}")
        if not (0.0 <= self.metric_first <= self.metric_last):
            raise ValueError(
                f"metric range must satisfy 0 <= first <= last, "
                f"got [{self.metric_first}, {self.metric_last}]"
            )
        if self.metric_last > METRIC_MAX_MM:
            raise ValueError(
                f"metric_last must be at most {METRIC_MAX_MM} mm, got {self.metric_last}"
            )
        if not (0.0 <= self.sae_first <= self.sae_last):
            raise ValueError(
                f"SAE range must satisfy 0 <= first <= last, "
                f"got [{self.sae_first}, {self.sae_last}]"
            )
        if self.sae_last > SAE_MAX_INCH:
            raise ValueError(
                f"sae_last must be at most {SAE_MAX_INCH} inch, got {self.sae_last}"
            )
        if not (BIAS_MIN <= self.bias <= BIAS_MAX):
            raise ValueError(f"bias must be in [{BIAS_MIN}, {BIAS_MAX}], got {self.bias}")
