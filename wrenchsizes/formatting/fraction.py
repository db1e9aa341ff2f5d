"""
Mixed-fraction rendering for binary-fraction inch sizes.

The denominator is always a power of two, so halving the numerator and the
denominator together while the numerator is even reduces the fraction fully;
no general GCD is needed.
"""

from __future__ import annotations

from wrenchsizes.utilities.types import is_power_of_two


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Remove common factors of two from a proper fraction."""
    while numerator > 0 and numerator % 2 == 0:
        numerator //= 2
        denominator //= 2
    return numerator, denominator


def format_fraction(numerator: int, denominator: int) -> str:
    """
    Render ``numerator / denominator`` as a reduced mixed fraction.

    Examples: (16, 16) -> "1", (15, 16) -> "15/16", (20, 16) -> "1-1/4".

    Raises:
        ValueError: If the numerator is negative or the denominator is not a
            power of two.
    """
    if numerator < 0:
        raise ValueError(f"numerator must be non-negative, got {numerator}")
    if not is_power_of_two(denominator):
        raise ValueError(f"denominator must be a power of two, got {denominator}")
    whole, remainder = divmod(numerator, denominator)
    num, denom = reduce_fraction(remainder, denominator)
    if num == 0:
        return str(whole)
    if whole == 0:
        return f"{num}/{denom}"
    return f"{whole}-{num}/{denom}"
