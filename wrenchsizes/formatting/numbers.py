"""Plain decimal formatting for report lines. No locale, no digit grouping."""

from __future__ import annotations


def format_fixed(value: float, places: int) -> str:
    """Exactly ``places`` decimal digits: format_fixed(1.8898, 3) -> "1.890"."""
    return f"{value:.{places}f}"


def format_trimmed(value: float, places: int = 1) -> str:
    """At most ``places`` decimal digits, trailing zeros dropped.

    format_trimmed(3.0) -> "3", format_trimmed(0.30000000000000004) -> "0.3"
    """
    text = format_fixed(value, places)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
