"""Parser for WadMerge scripts."""

from wadmergepy.ast import (
    BareToken,
    ClearCommand,
    Comment,
    CreateCommand,
    Document,
    EchoCommand,
    EndCommand,
    StringLiteral,
)
from wadmergepy.diagnostics import (
    Diagnostic,
    ParseCancelledError,
    WadMergeLexError,
    WadMergeParseError,
    WadMergeSyntaxError,
)
from wadmergepy.format import render_document, run_format
from wadmergepy.parser import ParseMode, ParserOptions, parse, parse_result
from wadmergepy.pipeline import WadMergeParseResult

__all__ = [
    "BareToken",
    "ClearCommand",
    "Comment",
    "CreateCommand",
    "Diagnostic",
    "Document",
    "EchoCommand",
    "EndCommand",
    "ParseCancelledError",
    "ParseMode",
    "ParserOptions",
    "StringLiteral",
    "WadMergeLexError",
    "WadMergeParseError",
    "WadMergeParseResult",
    "WadMergeSyntaxError",
    "parse",
    "parse_result",
    "render_document",
    "run_format",
]
