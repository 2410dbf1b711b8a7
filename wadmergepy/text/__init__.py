"""Text offsets, ranges and line/column lookup."""

from wadmergepy.text.lines import LineColumn, LineIndex
from wadmergepy.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
