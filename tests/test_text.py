import pytest

from wadmergepy.text import LineColumn, LineIndex, TextRange, TextSize, slice_text_range


def test_line_index_handles_all_line_endings() -> None:
    index = LineIndex("a\nb\r\nc\rd")

    assert index.line_count == 4
    assert index.line_col(0) == LineColumn(1, 1)
    assert index.line_col(2) == LineColumn(2, 1)
    assert index.line_col(TextSize(5)) == LineColumn(3, 1)
    assert index.line_col(7) == LineColumn(4, 1)
    assert index.line_start(3) == TextSize(5)


def test_line_index_clamps_out_of_range_offsets() -> None:
    index = LineIndex("ab")

    assert index.line_col(99) == LineColumn(1, 3)
    assert LineIndex("").line_col(0) == LineColumn(1, 1)


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextSize(-1)

    first = TextRange.new(TextSize(1), TextSize(3))
    assert first.cover(TextRange(5, 6)).as_tuple() == (1, 6)
    assert first.len() == TextSize(2)
    assert first.contains(TextSize(2))
    assert TextRange.empty(TextSize(4)).is_empty()
    assert slice_text_range("abcdef", first) == "bc"
