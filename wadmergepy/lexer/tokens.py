"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag, StrEnum

from wadmergepy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia / separators
    # -------------------------
    WHITESPACE = 10  # run of extras, never significant
    NEWLINE = 11  # \n, \r\n or \r
    COMMENT = 12  # `#` to end of line, only at line start

    # -------------------------
    # Keywords (case-insensitive)
    # -------------------------
    CLEAR_KW = 20
    CREATE_KW = 21
    IWAD_KW = 22
    ECHO_KW = 23
    END_KW = 24

    # -------------------------
    # Operands
    # -------------------------
    STRING = 30  # quoted symbol
    IDENTIFIER = 31  # bare symbol
    TRAILER = 32  # opaque non-whitespace run
    ECHO_TEXT = 33  # rest of an ECHO line

    # First word of a line that is no known command.
    UNKNOWN = 40

    @property
    def is_trivia(self) -> bool:
        return self == TokenKind.WHITESPACE

    @property
    def ends_line(self) -> bool:
        return self == TokenKind.NEWLINE or self == TokenKind.EOF


class LexContext(StrEnum):
    """What the parser expects next; selects how the lexer scans a token."""

    LINE_START = "line_start"
    SYMBOL = "symbol"
    QUALIFIER = "qualifier"  # IWAD keyword or a trailer
    TRAILER = "trailer"
    ECHO_TEXT = "echo_text"


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    WAS_QUOTED = 1 << 0
    HAS_ESCAPE = 1 << 1
    UNTERMINATED = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)

