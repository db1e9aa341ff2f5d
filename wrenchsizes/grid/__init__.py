from .unit_grid import MIN_STEPS, cross_convert, inch_grid, metric_grid, to_steps, to_value

__all__ = [
    "MIN_STEPS",
    "cross_convert",
    "inch_grid",
    "metric_grid",
    "to_steps",
    "to_value",
]
