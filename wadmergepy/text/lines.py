"""Offset -> (line, column) mapping for script text."""

from bisect import bisect_right
from dataclasses import dataclass

from wadmergepy.text.text import TextSize


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line and column of a character offset."""

    line: int
    column: int


class LineIndex:
    """Line start table for one source text.

    Line breaks are `\\n`, `\\r\\n` and a bare `\\r`, the same set the lexer
    recognizes, so line numbers agree with what the parser counts.
    """

    def __init__(self, source: str) -> None:
        starts = [0]
        position = 0
        length = len(source)
        while position < length:
            ch = source[position]
            if ch == "\r":
                position += 2 if source.startswith("\n", position + 1) else 1
                starts.append(position)
                continue
            position += 1
            if ch == "\n":
                starts.append(position)
        self._line_starts = tuple(starts)
        self._length = length

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, line: int) -> TextSize:
        """Offset of the first character of a 1-based line."""
        return TextSize(self._line_starts[line - 1])

    def line_col(self, offset: TextSize | int) -> LineColumn:
        value = offset.value if isinstance(offset, TextSize) else offset
        value = min(max(value, 0), self._length)
        index = bisect_right(self._line_starts, value) - 1
        return LineColumn(line=index + 1, column=value - self._line_starts[index] + 1)
