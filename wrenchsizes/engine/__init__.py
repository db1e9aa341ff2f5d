from .job import ConversionJob, JobStatus
from .sweep import (
    GOOD_BAND,
    VERY_GOOD_BAND,
    CancelToken,
    ConversionEngine,
    classify_ratio,
    convert_step,
    format_result,
    sweep,
)

__all__ = [
    "GOOD_BAND",
    "VERY_GOOD_BAND",
    "CancelToken",
    "ConversionEngine",
    "ConversionJob",
    "JobStatus",
    "classify_ratio",
    "convert_step",
    "format_result",
    "sweep",
]
