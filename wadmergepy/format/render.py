"""Canonical text rendering of parsed documents.

Records that would not parse back to themselves are rejected with `ValueError`.
"""

from collections.abc import Iterable

from wadmergepy.ast import (
    ClearCommand,
    Comment,
    CreateCommand,
    Document,
    EchoCommand,
    EndCommand,
    Line,
    StringLiteral,
    Symbol,
)
from wadmergepy.lexer.keywords import EXTRAS, IWAD, NEWLINE_CHARS, WHITESPACE


def render_symbol(symbol: Symbol) -> str:
    if isinstance(symbol, StringLiteral):
        _reject_newlines(symbol.value, "string symbol")
        escaped = symbol.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return symbol.value


def render_line(line: Line) -> str:
    """Render one record with upper-case keywords and single spaces."""
    match line:
        case Comment(text=text):
            _reject_newlines(text, "comment text")
            return f"#{text}"
        case ClearCommand(symbol=symbol, ignored=ignored):
            return " ".join(("CLEAR", render_symbol(symbol), *_trailer_words(ignored)))
        case CreateCommand(symbol=symbol, is_iwad=is_iwad, trailers=trailers):
            if not is_iwad and trailers and IWAD.match(trailers[0], 0) is not None:
                raise ValueError(f"First CREATE trailer would read back as IWAD: {trailers[0]!r}")
            qualifier = ("IWAD",) if is_iwad else ()
            return " ".join(("CREATE", render_symbol(symbol), *qualifier, *_trailer_words(trailers)))
        case EchoCommand(text=text):
            _reject_newlines(text, "echo text")
            if text[:1] in EXTRAS:
                raise ValueError(f"Echo text cannot start with whitespace: {text!r}")
            return f"ECHO {text}" if text else "ECHO"
        case EndCommand(trailers=trailers):
            return " ".join(("END", *_trailer_words(trailers)))
    raise TypeError(f"Not a WadMerge line record: {line!r}")


def render_document(document: Document, newline: str = "\n") -> str:
    if newline not in ("\n", "\r\n", "\r"):
        raise ValueError(f"Unsupported newline: {newline!r}")
    if document.is_empty:
        return ""
    return newline.join(render_line(line) for line in document) + newline


def _trailer_words(trailers: Iterable[str]) -> tuple[str, ...]:
    words = tuple(trailers)
    for word in words:
        if not word or any(ch in WHITESPACE for ch in word):
            raise ValueError(f"Trailer must be a non-empty run without whitespace: {word!r}")
    return words


def _reject_newlines(text: str, what: str) -> None:
    if any(ch in NEWLINE_CHARS for ch in text):
        raise ValueError(f"{what} cannot contain a line break: {text!r}")
