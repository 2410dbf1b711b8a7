"""Line parser core."""

from collections.abc import Callable
from typing import NoReturn

from wadmergepy.diagnostics import (
    Diagnostic,
    DiagnosticSpec,
    ParseCancelledError,
    error_for,
)
from wadmergepy.lexer import LexContext, Token, TokenFlags, TokenKind, unquote_string
from wadmergepy.parser.options import ParserOptions
from wadmergepy.parser.token_source import TokenSource
from wadmergepy.text import LineIndex, TextRange, TextSize, slice_text_range

CancelCheck = Callable[[], bool]


class Parser:
    """Single-state parser: every line is parsed from "start of line"."""

    def __init__(
        self,
        source: TokenSource,
        options: ParserOptions | None = None,
        *,
        line_index: LineIndex | None = None,
        cancel: CancelCheck | None = None,
    ) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._line_index = line_index or source.lexer.line_index
        self._cancel = cancel

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> Token:
        return self._source.current

    @property
    def line_start(self) -> int:
        return self._source.line_start

    @property
    def line_number(self) -> int:
        return self._line_index.line_col(self._source.line_start).line

    def bump(self, context: LexContext) -> Token:
        return self._source.bump(context)

    def text(self, token: Token) -> str:
        return slice_text_range(self._source.text, token.range)

    def check_cancelled(self) -> None:
        """Called at the start of each line, before its first token is lexed."""
        if self._cancel is None or not self._cancel():
            return
        current = self._source.current
        offset = current.range.end if current.kind == TokenKind.NEWLINE else self.line_start
        raise ParseCancelledError(self._line_index.line_col(offset).line)

    def symbol_value(self, token: Token) -> str:
        """Text of a STRING or IDENTIFIER token, rejecting unterminated strings."""
        if token.kind == TokenKind.STRING:
            if token.is_unterminated:
                self.lexer_error()
            raw = self.text(token)
            return unquote_string(raw) if token.flags & TokenFlags.HAS_ESCAPE else raw[1:-1]
        return self.text(token)

    def lexer_error(self) -> NoReturn:
        diagnostic = self._source.lexer.diagnostics[-1]
        raise error_for(diagnostic)

    def error(self, spec: DiagnosticSpec, at: Token) -> NoReturn:
        """Reject the document at the start of the current line."""
        start = TextSize.from_int(self.line_start)
        end = max(at.range.end, start)
        diagnostic = Diagnostic.from_spec(spec, TextRange.new(start, end), self._line_index)
        raise error_for(diagnostic)
