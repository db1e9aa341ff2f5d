"""
Free-form size parsing.

A size is an unsigned integer ("3"), a decimal ("12.5", "3.", ".5"), or a
fraction with an optional whole part ("7/32", "1-1/4", "1 3/8", "1&1/2",
"3:4"). Signs and exponents are not accepted. Parse failures return None
rather than raising, so callers can report a targeted message and let the
user retry.
"""

from __future__ import annotations

import math
import re

_SIZE_RE = re.compile(
    r"""
    \s*
    (?:
        (?P<decimal>\d+\.?\d*|\d*\.\d+)
      |
        (?:(?P<whole>\d+)(?:\s+|\s*[&+\-]\s*))?
        (?P<numerator>\d+)\s*[/:]\s*(?P<denominator>\d+)
    )
    \s*
    """,
    re.VERBOSE | re.ASCII,
)

# Largest whole, numerator or denominator accepted in a fraction (signed 32-bit)
MAX_FRACTION_PART: int = 2**31 - 1


def _fraction_part(digits: str | None) -> int | None:
    """Integer value of one fraction group, or None if it is out of range."""
    if not digits:
        return 0
    # length check first: int() refuses very long digit strings
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_FRACTION_PART)):
        return None
    value = int(significant)
    return value if value <= MAX_FRACTION_PART else None


def parse_size(text: str) -> float | None:
    """
    Parse a non-negative size.

    Returns:
        The size as a float, or None if the text matches no accepted form,
        names a zero denominator, or overflows. Each part of a fraction must
        be at most MAX_FRACTION_PART.
    """
    match = _SIZE_RE.fullmatch(text)
    if match is None:
        return None
    if match.group("decimal"):
        result = float(match.group("decimal"))
    else:
        whole = _fraction_part(match.group("whole"))
        numerator = _fraction_part(match.group("numerator"))
        denominator = _fraction_part(match.group("denominator"))
        if whole is None or numerator is None or not denominator:
            return None
        result = whole + numerator / denominator
    if not math.isfinite(result):
        return None
    return result


def parse_bias(text: str) -> float | None:
    """Parse a rounding bias: any finite float literal, signed or not.

    Digit-group underscores ("0.0_1") are not accepted.
    """
    if "_" in text:
        return None
    try:
        result = float(text.strip())
    except ValueError:
        return None
    return result if math.isfinite(result) else None
