"""WadMerge line grammar.

    document := line? (NEWLINE line?)*
    line     := comment | clear | create | echo | end
    clear    := CLEAR symbol trailer*
    create   := CREATE symbol IWAD? trailer*
    echo     := ECHO echo_text?
    end      := END trailer*
"""

from wadmergepy.ast import (
    BareToken,
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
from wadmergepy.diagnostics import (
    PARSER_MISSING_CLEAR_SYMBOL,
    PARSER_MISSING_CREATE_SYMBOL,
    PARSER_UNEXPECTED_TRAILING_CONTENT,
    PARSER_UNRECOGNIZED_LINE,
    DiagnosticSpec,
)
from wadmergepy.lexer import LexContext, Token, TokenKind
from wadmergepy.parser.parser import Parser
from wadmergepy.text import TextRange


def parse_document(parser: Parser) -> Document:
    lines: list[Line] = []
    while True:
        parser.check_cancelled()
        first = parser.bump(LexContext.LINE_START)
        if first.kind == TokenKind.EOF:
            break
        if first.kind == TokenKind.NEWLINE:
            continue
        lines.append(parse_line(parser, first))
        if parser.current.kind == TokenKind.EOF:
            break
    return Document(lines=tuple(lines))


def parse_line(parser: Parser, first: Token) -> Line:
    """Parse one non-blank line and consume its terminating NEWLINE/EOF."""
    match first.kind:
        case TokenKind.COMMENT:
            return parse_comment(parser, first)
        case TokenKind.CLEAR_KW:
            return parse_clear(parser, first)
        case TokenKind.CREATE_KW:
            return parse_create(parser, first)
        case TokenKind.ECHO_KW:
            return parse_echo(parser, first)
        case TokenKind.END_KW:
            return parse_end(parser, first)
        case TokenKind.STRING if first.is_unterminated:
            parser.lexer_error()
        case _:
            parser.error(PARSER_UNRECOGNIZED_LINE, first)


def parse_comment(parser: Parser, first: Token) -> Comment:
    line = parser.line_number
    text = parser.text(first)[1:]
    parser.bump(LexContext.TRAILER)
    return Comment(text=text, line=line, range=first.range)


def parse_clear(parser: Parser, first: Token) -> ClearCommand:
    line = parser.line_number
    symbol_token = parser.bump(LexContext.SYMBOL)
    symbol = parse_symbol(parser, symbol_token, PARSER_MISSING_CLEAR_SYMBOL)
    ignored, last = parse_trailers(parser, LexContext.TRAILER)
    if ignored and not parser.options.allow_clear_trailing:
        parser.error(PARSER_UNEXPECTED_TRAILING_CONTENT, last)
    return ClearCommand(
        symbol=symbol,
        ignored=ignored,
        line=line,
        range=_record_range(first, last or symbol_token),
    )


def parse_create(parser: Parser, first: Token) -> CreateCommand:
    line = parser.line_number
    symbol_token = parser.bump(LexContext.SYMBOL)
    symbol = parse_symbol(parser, symbol_token, PARSER_MISSING_CREATE_SYMBOL)

    last = symbol_token
    is_iwad = False
    trailers: tuple[str, ...] = ()
    qualifier = parser.bump(LexContext.QUALIFIER)
    if qualifier.kind == TokenKind.IWAD_KW:
        is_iwad = True
        last = qualifier
        trailers, last_trailer = parse_trailers(parser, LexContext.TRAILER)
    elif qualifier.kind == TokenKind.TRAILER:
        rest, last_trailer = parse_trailers(parser, LexContext.TRAILER)
        trailers = (parser.text(qualifier), *rest)
        last_trailer = last_trailer or qualifier
    else:
        last_trailer = None

    if trailers and not parser.options.allow_create_trailers:
        parser.error(PARSER_UNEXPECTED_TRAILING_CONTENT, last_trailer or last)
    return CreateCommand(
        symbol=symbol,
        is_iwad=is_iwad,
        trailers=trailers,
        line=line,
        range=_record_range(first, last_trailer or last),
    )


def parse_echo(parser: Parser, first: Token) -> EchoCommand:
    line = parser.line_number
    token = parser.bump(LexContext.ECHO_TEXT)
    if token.kind == TokenKind.ECHO_TEXT:
        text = parser.text(token)
        parser.bump(LexContext.TRAILER)
        return EchoCommand(text=text, line=line, range=_record_range(first, token))
    return EchoCommand(text="", line=line, range=first.range)


def parse_end(parser: Parser, first: Token) -> EndCommand:
    line = parser.line_number
    trailers, last = parse_trailers(parser, LexContext.TRAILER)
    return EndCommand(trailers=trailers, line=line, range=_record_range(first, last or first))


def parse_symbol(parser: Parser, token: Token, missing: DiagnosticSpec) -> Symbol:
    if token.kind == TokenKind.STRING:
        return StringLiteral(parser.symbol_value(token))
    if token.kind == TokenKind.IDENTIFIER:
        return BareToken(parser.symbol_value(token))
    parser.error(missing, token)


def parse_trailers(parser: Parser, context: LexContext) -> tuple[tuple[str, ...], Token | None]:
    """Collect opaque tokens up to the end of the line.

    Returns the trailer texts and the last trailer token (None if there were
    none). Leaves the parser on the NEWLINE/EOF token.
    """
    trailers: list[str] = []
    last: Token | None = None
    token = parser.bump(context)
    while not token.kind.ends_line:
        trailers.append(parser.text(token))
        last = token
        token = parser.bump(context)
    return tuple(trailers), last


def _record_range(first: Token, last: Token) -> TextRange:
    return first.range.cover(last.range)
