"""Typed line records for WadMerge scripts."""

from wadmergepy.ast.model import (
    BareToken,
    ClearCommand,
    Command,
    Comment,
    CreateCommand,
    Document,
    EchoCommand,
    EndCommand,
    Line,
    StringLiteral,
    Symbol,
)

__all__ = [
    "BareToken",
    "ClearCommand",
    "Command",
    "Comment",
    "CreateCommand",
    "Document",
    "EchoCommand",
    "EndCommand",
    "Line",
    "StringLiteral",
    "Symbol",
]
