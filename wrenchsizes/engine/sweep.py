"""
ConversionEngine: walk a range on one grid and round every step onto the other.

Per sweep:

  1. Range endpoints → source step counts (no bias, at least 1)
  2. For each step, in increasing order:
       exact source size → exact target size (25.4 mm per inch)
       → nearest target step (bias applied, at least 1)
       → ratio of rounded to exact → closeness
  3. The cancellation token is checked before every step; once set, the
     sweep stops and rows already produced stand.

run() streams both sweeps as report lines, metric first. Sweeps are lazy
generators.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from wrenchsizes.formatting.fraction import format_fraction
from wrenchsizes.formatting.numbers import format_fixed, format_trimmed
from wrenchsizes.grid.unit_grid import cross_convert, to_steps, to_value
from wrenchsizes.schemas.request import ConversionRequest
from wrenchsizes.schemas.result import Closeness, ConversionResult, Direction
from wrenchsizes.utilities.types import GridSpec

# Open intervals around a ratio of 1.0
VERY_GOOD_BAND: tuple[float, float] = (0.997, 1.003)
GOOD_BAND: tuple[float, float] = (0.992, 1.008)

_EXACT_PLACES = 3
_RATIO_PLACES = 5


@runtime_checkable
class CancelToken(Protocol):
    """Anything with is_set(), e.g. threading.Event."""

    def is_set(self) -> bool: ...


def _cancelled(cancel: CancelToken | None) -> bool:
    return cancel is not None and cancel.is_set()


def classify_ratio(ratio: float) -> Closeness:
    """Both bands are open: exactly 1.003 is good, not very good."""
    if VERY_GOOD_BAND[0] < ratio < VERY_GOOD_BAND[1]:
        return Closeness.VERY_GOOD
    if GOOD_BAND[0] < ratio < GOOD_BAND[1]:
        return Closeness.GOOD
    return Closeness.NONE


def convert_step(step: int, source: GridSpec, target: GridSpec, bias: float) -> ConversionResult:
    """Round one source step onto the target grid."""
    exact_target = cross_convert(step, source, target)
    target_steps = to_steps(exact_target, target, bias)
    rounded_target = to_value(target_steps, target)
    ratio = rounded_target / exact_target
    return ConversionResult(
        direction=Direction.from_source(source.unit),
        source=source,
        target=target,
        source_steps=step,
        exact_source=to_value(step, source),
        exact_target=exact_target,
        target_steps=target_steps,
        rounded_target=rounded_target,
        ratio=ratio,
        closeness=classify_ratio(ratio),
    )


def sweep(
    source: GridSpec,
    target: GridSpec,
    first: float,
    last: float,
    bias: float = 0.0,
    cancel: CancelToken | None = None,
) -> Iterator[ConversionResult]:
    """
    Yield one ConversionResult per source step from ``first`` to ``last``.

    Parameters
    ----------
    source:
        Grid being walked; ``first`` and ``last`` are in its base unit.
    target:
        Grid each step is rounded onto.
    first, last:
        Range endpoints. Rounded to source steps without bias, so a range of
        [0, 0] still yields the single step 1.
    bias:
        Added before rounding onto the target grid only.
    cancel:
        Optional token checked before each step.
    """
    first_step = to_steps(first, source)
    last_step = to_steps(last, source)
    for step in range(first_step, last_step + 1):
        if _cancelled(cancel):
            return
        yield convert_step(step, source, target, bias)


def format_result(result: ConversionResult) -> str:
    """Render one result as a report line."""
    ratio = format_fixed(result.ratio, _RATIO_PLACES)
    if result.direction is Direction.METRIC_TO_SAE:
        denominator = result.target.denominator
        return (
            f"{format_trimmed(result.exact_source)} mm = "
            f"{format_fixed(result.exact_target * denominator, _EXACT_PLACES)} / "
            f"{denominator} inch, rounded to "
            f"{format_fraction(result.target_steps, denominator)} "
            f"has ratio {ratio}{result.closeness.suffix}"
        )
    return (
        f"{format_fraction(result.source_steps, result.source.denominator)} inch = "
        f"{format_fixed(result.exact_target, _EXACT_PLACES)} mm, rounded to "
        f"{format_trimmed(result.rounded_target)} "
        f"has ratio {ratio}{result.closeness.suffix}"
    )


class ConversionEngine:
    """
    Runs the metric-to-SAE sweep, then the SAE-to-metric sweep.

    Holds no state between runs; one engine may serve any number of requests.
    """

    @staticmethod
    def _sweeps(
        request: ConversionRequest,
    ) -> tuple[tuple[Direction, GridSpec, GridSpec, float, float], ...]:
        return (
            (
                Direction.METRIC_TO_SAE,
                request.metric_grid,
                request.sae_grid,
                request.metric_first,
                request.metric_last,
            ),
            (
                Direction.SAE_TO_METRIC,
                request.sae_grid,
                request.metric_grid,
                request.sae_first,
                request.sae_last,
            ),
        )

    def results(
        self,
        request: ConversionRequest,
        cancel: CancelToken | None = None,
    ) -> Iterator[ConversionResult]:
        """Yield the rows of both sweeps, metric first."""
        for _, source, target, first, last in self._sweeps(request):
            yield from sweep(source, target, first, last, request.bias, cancel)

    def run(
        self,
        request: ConversionRequest,
        cancel: CancelToken | None = None,
    ) -> Iterator[str]:
        """
        Yield the full report, one line at a time.

        Each sweep is introduced by a blank line and its header. Once
        ``cancel`` is set no further lines are produced.
        """
        for direction, source, target, first, last in self._sweeps(request):
            if _cancelled(cancel):
                return
            yield ""
            yield direction.header
            for result in sweep(source, target, first, last, request.bias, cancel):
                yield format_result(result)
