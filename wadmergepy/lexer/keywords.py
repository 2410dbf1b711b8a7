"""Case-insensitive keyword matchers and character classes.

Matchers are compiled once at import and shared by every lexer instance.
"""

import re
from dataclasses import dataclass
from typing import Final

from wadmergepy.lexer.tokens import TokenKind

# Closed allowlist; deliberately not `str.isspace()`.
EXTRAS: Final[frozenset[str]] = frozenset(
    " \t\v\f"
    + "".join(chr(c) for c in range(0x1C, 0x20))
    + "".join(chr(c) for c in range(0x2000, 0x2007))
    + "".join(chr(c) for c in range(0x2008, 0x200B))
    + "\u0085\u1680\u2028\u2029\u205f\u3000"
)

NEWLINE_CHARS: Final[frozenset[str]] = frozenset("\r\n")

WHITESPACE: Final[frozenset[str]] = EXTRAS | NEWLINE_CHARS

# Characters allowed directly after `ECHO`.
ECHO_SEPARATORS: Final[frozenset[str]] = frozenset(" \t\v" + "".join(chr(c) for c in range(0x1C, 0x20)))


def case_insensitive_pattern(keyword: str) -> re.Pattern[str]:
    """Build a pattern accepting either ASCII case at each letter of `keyword`.

    Non-letters match literally. `re.IGNORECASE` is avoided since it also
    folds non-ASCII look-alikes.
    """
    parts: list[str] = []
    for ch in keyword:
        lower, upper = ch.lower(), ch.upper()
        if lower != upper and ch.isascii():
            parts.append(f"[{lower}{upper}]")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts))


@dataclass(frozen=True, slots=True)
class Keyword:
    text: str
    kind: TokenKind
    pattern: re.Pattern[str]
    followers: frozenset[str] | None = None  # None: any token boundary

    def match(self, source: str, position: int) -> int | None:
        """Return the end offset if the keyword starts at `position`."""
        found = self.pattern.match(source, position)
        if found is None:
            return None
        end = found.end()
        if end >= len(source):
            return end
        follower = source[end]
        if self.followers is not None:
            return end if follower in self.followers else None
        return end if follower in WHITESPACE or follower == '"' else None


def _keyword(text: str, kind: TokenKind, followers: frozenset[str] | None = None) -> Keyword:
    return Keyword(text=text, kind=kind, pattern=case_insensitive_pattern(text), followers=followers)


CLEAR: Final[Keyword] = _keyword("CLEAR", TokenKind.CLEAR_KW)
CREATE: Final[Keyword] = _keyword("CREATE", TokenKind.CREATE_KW)
IWAD: Final[Keyword] = _keyword("IWAD", TokenKind.IWAD_KW)
ECHO: Final[Keyword] = _keyword("ECHO", TokenKind.ECHO_KW, ECHO_SEPARATORS | NEWLINE_CHARS)
END: Final[Keyword] = _keyword("END", TokenKind.END_KW)

# Priority order for the first word of a line.
COMMAND_KEYWORDS: Final[tuple[Keyword, ...]] = (CLEAR, CREATE, ECHO, END)
