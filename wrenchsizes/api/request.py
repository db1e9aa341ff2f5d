"""
Public request-building API.

build_request() turns the strings a user typed into a validated
ConversionRequest. Every problem is reported as a RequestError before any
computation starts, carrying the name of the offending field and a message
fit to show the user as-is.
"""

from __future__ import annotations

from wrenchsizes.config.settings import SizeSettings, get_settings
from wrenchsizes.grid.unit_grid import inch_grid, metric_grid
from wrenchsizes.parser.size import parse_bias, parse_size
from wrenchsizes.schemas.request import ConversionRequest


class RequestError(ValueError):
    """Raised when user input cannot form a valid ConversionRequest.

    Attributes:
        field: Input that failed (``"metric_range"``, ``"sae_range"``,
            ``"bias"``, ``"metric_unit"`` or ``"sae_unit"``).
        detail: Human-readable description of the failure.
    """

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(detail)
        self.field = field
        self.detail = detail


def _check_range(
    first_text: str,
    last_text: str,
    maximum: float,
    field: str,
    message: str,
) -> tuple[float, float]:
    first = parse_size(first_text)
    last = parse_size(last_text)
    if first is None or last is None or first > last or last > maximum:
        raise RequestError(field, message)
    return first, last


def build_request(
    metric_first: str,
    metric_last: str,
    sae_first: str,
    sae_last: str,
    metric_unit: str,
    sae_unit: str,
    bias: str,
    settings: SizeSettings | None = None,
) -> ConversionRequest:
    """
    Parse and validate user input for one conversion run.

    Parameters
    ----------
    metric_first, metric_last:
        Metric range in mm, in any form parse_size accepts.
    sae_first, sae_last:
        SAE range in inches, e.g. ``"1/8"`` and ``"1-1/4"``.
    metric_unit:
        Metric unit label in mm per unit, e.g. ``"0.5"``.
    sae_unit:
        SAE unit label in inch per unit, e.g. ``"1/16"``.
    bias:
        Rounding bias, a float literal.
    settings:
        Registry of unit labels and limits; defaults to get_settings().

    Returns
    -------
    ConversionRequest

    Raises
    ------
    RequestError
        On the first invalid input, checked in the order metric range, SAE
        range, bias, units.
    """
    settings = settings or get_settings()
    limits = settings.limits

    met_first, met_last = _check_range(
        metric_first,
        metric_last,
        limits.metric_max_mm,
        "metric_range",
        f"Metric size range must be from 0.0 to {limits.metric_max_mm} mm.",
    )
    sae_lo, sae_hi = _check_range(
        sae_first,
        sae_last,
        limits.sae_max_inch,
        "sae_range",
        f"SAE size range must be from 0.0 to {limits.sae_max_inch} inch.",
    )

    bias_value = parse_bias(bias)
    if bias_value is None or not (limits.bias_min <= bias_value <= limits.bias_max):
        raise RequestError(
            "bias", f"Bias value must be from {limits.bias_min} to {limits.bias_max:+}"
        )

    try:
        steps_per_mm = settings.steps_per_mm(metric_unit)
    except KeyError:
        choices = ", ".join(settings.metric_units)
        raise RequestError(
            "metric_unit", f"Unknown metric unit {metric_unit!r}; choose from {choices}"
        ) from None
    try:
        steps_per_inch = settings.steps_per_inch(sae_unit)
    except KeyError:
        choices = ", ".join(settings.sae_units)
        raise RequestError(
            "sae_unit", f"Unknown SAE unit {sae_unit!r}; choose from {choices}"
        ) from None

    return ConversionRequest(
        metric_grid=metric_grid(steps_per_mm),
        sae_grid=inch_grid(steps_per_inch),
        metric_first=met_first,
        metric_last=met_last,
        sae_first=sae_lo,
        sae_last=sae_hi,
        bias=bias_value,
    )
