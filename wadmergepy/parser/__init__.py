"""Parser infrastructure (token source + line parser + entrypoints)."""

from wadmergepy.parser.grammar import parse_document, parse_line
from wadmergepy.parser.options import ParseMode, ParserOptions
from wadmergepy.parser.parser import CancelCheck, Parser
from wadmergepy.parser.script import parse, parse_result
from wadmergepy.parser.token_source import TokenSource

__all__ = [
    "CancelCheck",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_document",
    "parse_line",
    "parse_result",
]
