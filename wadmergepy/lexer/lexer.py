"""Lexer."""

from dataclasses import dataclass

from wadmergepy.diagnostics import LEXER_UNTERMINATED_STRING, Diagnostic
from wadmergepy.lexer.keywords import (
    COMMAND_KEYWORDS,
    EXTRAS,
    IWAD,
    NEWLINE_CHARS,
    WHITESPACE,
)
from wadmergepy.lexer.tokens import LexContext, Token, TokenFlags, TokenKind
from wadmergepy.text import LineIndex, TextRange, TextSize, slice_text_range


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Lexer checkpoint."""

    position: int
    current_start: TextSize
    current_kind: TokenKind
    current_flags: TokenFlags
    eof_emitted: bool
    diagnostics_position: int


class Lexer:
    """On-demand lexer. The caller picks a `LexContext` for every token."""

    def __init__(
        self,
        source: str,
        *,
        allow_multiline_strings: bool = False,
        line_index: LineIndex | None = None,
    ) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE
        self._eof_emitted = False
        self._allow_multiline_strings = allow_multiline_strings
        self._line_index = line_index
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self._source)
        return self._line_index

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self, context: LexContext = LexContext.LINE_START) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._eof_emitted = True
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        kind = self._lex_token(context)
        self._current_kind = kind
        return Token(kind, self.current_range, self._current_flags)

    @property
    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(
            position=self._position,
            current_start=self._current_start,
            current_kind=self._current_kind,
            current_flags=self._current_flags,
            eof_emitted=self._eof_emitted,
            diagnostics_position=len(self._diagnostics),
        )

    def rewind(self, checkpoint: LexerCheckpoint) -> None:
        self._position = checkpoint.position
        self._current_start = checkpoint.current_start
        self._current_kind = checkpoint.current_kind
        self._current_flags = checkpoint.current_flags
        self._eof_emitted = checkpoint.eof_emitted
        if len(self._diagnostics) > checkpoint.diagnostics_position:
            self._diagnostics = self._diagnostics[: checkpoint.diagnostics_position]

    def lex(self) -> list[Token]:
        """Lex the whole buffer, switching contexts the way the line parser does."""
        tokens: list[Token] = []
        context = LexContext.LINE_START
        in_create = False
        while True:
            token = self.next_token(context)
            tokens.append(token)
            kind = token.kind
            if kind == TokenKind.EOF:
                break
            if kind == TokenKind.NEWLINE:
                context = LexContext.LINE_START
                in_create = False
            elif kind.is_trivia:
                continue
            elif kind == TokenKind.CLEAR_KW:
                context = LexContext.SYMBOL
            elif kind == TokenKind.CREATE_KW:
                context = LexContext.SYMBOL
                in_create = True
            elif kind == TokenKind.ECHO_KW:
                context = LexContext.ECHO_TEXT
            elif context == LexContext.SYMBOL and in_create:
                context = LexContext.QUALIFIER
            else:
                context = LexContext.TRAILER
        return tokens

    def _lex_token(self, context: LexContext) -> TokenKind:
        ch = self._current_char()

        if ch in NEWLINE_CHARS:
            self._consume_newline()
            return TokenKind.NEWLINE

        if ch in EXTRAS:
            self._consume_extras()
            return TokenKind.WHITESPACE

        match context:
            case LexContext.LINE_START:
                return self._lex_line_start()
            case LexContext.SYMBOL:
                if ch == '"':
                    return self._lex_string()
                self._consume_run(WHITESPACE, stop_at_quote=True)
                return TokenKind.IDENTIFIER
            case LexContext.QUALIFIER:
                end = IWAD.match(self._source, self._position)
                if end is not None:
                    self._position = end
                    return TokenKind.IWAD_KW
                self._consume_run(WHITESPACE)
                return TokenKind.TRAILER
            case LexContext.ECHO_TEXT:
                self._consume_run(NEWLINE_CHARS)
                return TokenKind.ECHO_TEXT
            case _:
                self._consume_run(WHITESPACE)
                return TokenKind.TRAILER

    def _lex_line_start(self) -> TokenKind:
        if self._current_char() == "#":
            return self._lex_comment()

        if self._current_char() == '"':
            # An unterminated quote is a lexical error; a closed one starts no command.
            self._lex_string()
            if self._current_flags & TokenFlags.UNTERMINATED:
                return TokenKind.STRING
            self._current_flags = TokenFlags.NONE
            return TokenKind.UNKNOWN

        for keyword in COMMAND_KEYWORDS:
            end = keyword.match(self._source, self._position)
            if end is not None:
                self._position = end
                return keyword.kind

        self._consume_run(WHITESPACE)
        return TokenKind.UNKNOWN

    def _lex_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(1)
        self._consume_run(NEWLINE_CHARS)
        return TokenKind.COMMENT

    def _lex_string(self) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        self._current_flags |= TokenFlags.WAS_QUOTED
        escaped = False
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                closed = True
                break
            if ch in NEWLINE_CHARS and not self._allow_multiline_strings:
                break
            if ch == "\\":
                if self._position + 1 >= len(self._source):
                    self._advance(1)
                    break
                if self._peek_char() in NEWLINE_CHARS and not self._allow_multiline_strings:
                    self._advance(1)
                    break
                escaped = True
                self._advance(2)
                continue
            self._advance(1)

        if escaped:
            self._current_flags |= TokenFlags.HAS_ESCAPE

        if not closed:
            self._current_flags |= TokenFlags.UNTERMINATED
            self._diagnostics.append(
                Diagnostic.from_spec(
                    LEXER_UNTERMINATED_STRING,
                    TextRange.new(self._current_start, TextSize.from_int(self._position)),
                    self.line_index,
                )
            )

        return TokenKind.STRING

    def _consume_run(self, stop: frozenset[str], *, stop_at_quote: bool = False) -> None:
        source = self._source
        position = self._position
        length = len(source)
        while position < length:
            ch = source[position]
            if ch in stop or (stop_at_quote and ch == '"'):
                break
            position += 1
        self._position = position

    def _consume_extras(self) -> None:
        while not self.is_eof and self._current_char() in EXTRAS:
            self._advance(1)

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def unquote_string(raw: str) -> str:
    """Decode the text of a closed STRING token, quotes included.

    `\\"` and `\\\\` collapse to the escaped character; any other escape is
    kept as written, so `\\n` stays a backslash followed by `n`.
    """
    body = raw[1:-1]
    if "\\" not in body:
        return body
    out: list[str] = []
    index = 0
    while index < len(body):
        ch = body[index]
        if ch == "\\" and index + 1 < len(body):
            follower = body[index + 1]
            if follower not in ('"', "\\"):
                out.append(ch)
            out.append(follower)
            index += 2
            continue
        out.append(ch)
        index += 1
    return "".join(out)


def token_text(
    source: str,
    token: Token,
    null_char_on_eof: bool = False,
) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} {d.line}:{d.column} message={d.message}")
