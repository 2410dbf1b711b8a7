"""Exceptions raised by `wadmergepy.parse`."""

from __future__ import annotations

from wadmergepy.diagnostics.diagnostic import Diagnostic


class WadMergeParseError(ValueError):
    """A script failed to parse. Wraps the diagnostic that rejected it."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"line {diagnostic.line}, column {diagnostic.column}: {diagnostic.message}")
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column

    @property
    def offset(self) -> int:
        return self.diagnostic.offset


class WadMergeLexError(WadMergeParseError):
    """Malformed token, e.g. an unterminated string literal."""


class WadMergeSyntaxError(WadMergeParseError):
    """A line matched none of the known command shapes."""


class ParseCancelledError(Exception):
    """The caller's cancel callback asked the parse to stop."""

    def __init__(self, line: int) -> None:
        super().__init__(f"parse cancelled before line {line}")
        self.line = line


def error_for(diagnostic: Diagnostic) -> WadMergeParseError:
    if diagnostic.category == "lexer":
        return WadMergeLexError(diagnostic)
    return WadMergeSyntaxError(diagnostic)
