from .fraction import format_fraction, reduce_fraction
from .numbers import format_fixed, format_trimmed

__all__ = [
    "format_fixed",
    "format_fraction",
    "format_trimmed",
    "reduce_fraction",
]
