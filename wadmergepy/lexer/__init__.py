"""Lexer."""

from wadmergepy.lexer.keywords import (
    COMMAND_KEYWORDS,
    ECHO_SEPARATORS,
    EXTRAS,
    Keyword,
    case_insensitive_pattern,
)
from wadmergepy.lexer.lexer import (
    Lexer,
    LexerCheckpoint,
    dump_tokens,
    token_text,
    unquote_string,
)
from wadmergepy.lexer.tokens import (
    LexContext,
    Token,
    TokenFlags,
    TokenKind,
)

__all__ = [
    "COMMAND_KEYWORDS",
    "ECHO_SEPARATORS",
    "EXTRAS",
    "Keyword",
    "LexContext",
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenFlags",
    "TokenKind",
    "case_insensitive_pattern",
    "dump_tokens",
    "token_text",
    "unquote_string",
]
