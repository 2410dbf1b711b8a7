"""Diagnostics."""

from wadmergepy.diagnostics.codes import (
    LEXER_UNTERMINATED_STRING,
    PARSER_MISSING_CLEAR_SYMBOL,
    PARSER_MISSING_CREATE_SYMBOL,
    PARSER_UNEXPECTED_TRAILING_CONTENT,
    PARSER_UNRECOGNIZED_LINE,
    DiagnosticSpec,
    Severity,
)
from wadmergepy.diagnostics.diagnostic import Diagnostic
from wadmergepy.diagnostics.errors import (
    ParseCancelledError,
    WadMergeLexError,
    WadMergeParseError,
    WadMergeSyntaxError,
    error_for,
)
from wadmergepy.diagnostics.report import first_error, has_errors

__all__ = [
    "LEXER_UNTERMINATED_STRING",
    "PARSER_MISSING_CLEAR_SYMBOL",
    "PARSER_MISSING_CREATE_SYMBOL",
    "PARSER_UNEXPECTED_TRAILING_CONTENT",
    "PARSER_UNRECOGNIZED_LINE",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseCancelledError",
    "Severity",
    "WadMergeLexError",
    "WadMergeParseError",
    "WadMergeSyntaxError",
    "error_for",
    "first_error",
    "has_errors",
]
