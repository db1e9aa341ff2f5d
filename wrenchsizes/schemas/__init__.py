from .request import BIAS_MAX, BIAS_MIN, METRIC_MAX_MM, SAE_MAX_INCH, ConversionRequest
from .result import Closeness, ConversionResult, Direction

__all__ = [
    "BIAS_MAX",
    "BIAS_MIN",
    "METRIC_MAX_MM",
    "SAE_MAX_INCH",
    "Closeness",
    "ConversionRequest",
    "ConversionResult",
    "Direction",
]
