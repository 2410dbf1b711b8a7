"""Token source that hides whitespace trivia from the line parser."""

from wadmergepy.lexer import LexContext, Lexer
from wadmergepy.lexer.tokens import Token, TokenKind
from wadmergepy.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer and parser.

    Skips WHITESPACE tokens and remembers where the current physical line
    begins, which is where syntax errors are reported.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current = Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(0)))
        self._line_start = 0

    @property
    def current(self) -> Token:
        return self._current

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def line_start(self) -> int:
        """Offset of the first character of the line being parsed."""
        return self._line_start

    def bump(self, context: LexContext) -> Token:
        """Advance to the next non-trivia token lexed in `context`."""
        if self._current.kind == TokenKind.NEWLINE:
            self._line_start = self._current.range.end.value
        while True:
            token = self._lexer.next_token(context)
            if not token.kind.is_trivia:
                break
        self._current = token
        return token
