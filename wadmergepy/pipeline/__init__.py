"""Shared parse carriers and result types."""

from wadmergepy.pipeline.result import WadMergeParseResult
from wadmergepy.pipeline.results import FormatRunResult

__all__ = [
    "FormatRunResult",
    "WadMergeParseResult",
]
