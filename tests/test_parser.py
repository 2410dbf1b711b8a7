from concurrent.futures import ThreadPoolExecutor

import pytest

from tests._debug import debug_dump_diagnostics, debug_dump_document
from tests._shared_cases import SCRIPT_CASES, ScriptCase
from wadmergepy import (
    BareToken,
    ClearCommand,
    Comment,
    CreateCommand,
    Document,
    EchoCommand,
    EndCommand,
    ParseCancelledError,
    ParseMode,
    ParserOptions,
    StringLiteral,
    WadMergeLexError,
    WadMergeParseError,
    WadMergeSyntaxError,
    parse,
)


def _parse_ok(name: str, source: str, **kwargs) -> Document:
    document = parse(source, **kwargs)
    debug_dump_document(name, document, source)
    return document


def _parse_fails(name: str, source: str, **kwargs) -> WadMergeParseError:
    with pytest.raises(WadMergeParseError) as excinfo:
        parse(source, **kwargs)
    debug_dump_diagnostics(name, [excinfo.value.diagnostic], source)
    return excinfo.value


@pytest.mark.parametrize("case", SCRIPT_CASES, ids=lambda case: case.name)
def test_shared_cases_parse_to_expected_documents(case: ScriptCase) -> None:
    assert _parse_ok(case.name, case.source) == case.expected


@pytest.mark.parametrize("case", SCRIPT_CASES, ids=lambda case: case.name)
def test_shared_cases_in_strict_mode(case: ScriptCase) -> None:
    if case.strict_should_parse_cleanly:
        assert _parse_ok(case.name, case.source, mode=ParseMode.STRICT) == case.expected
    else:
        error = _parse_fails(case.name, case.source, mode=ParseMode.STRICT)
        assert error.code == "PARSER_UNEXPECTED_TRAILING_CONTENT"


def test_create_then_end() -> None:
    document = _parse_ok("create_then_end", "CREATE FOO\nEND")

    assert document == Document(
        (CreateCommand(symbol=BareToken("FOO"), is_iwad=False, trailers=()), EndCommand(trailers=()))
    )


def test_create_quoted_symbol_with_lowercase_iwad() -> None:
    document = _parse_ok("quoted_iwad", 'create "my wad" iwad\nend')

    assert document[0] == CreateCommand(symbol=StringLiteral("my wad"), is_iwad=True, trailers=())
    assert isinstance(document[1], EndCommand)


def test_echo_text() -> None:
    assert _parse_ok("echo", "ECHO hello world\n") == Document((EchoCommand(text="hello world"),))


def test_comment_then_clear() -> None:
    document = _parse_ok("comment_clear", "# a note\nCLEAR X")

    assert document.lines == (Comment(text=" a note"), ClearCommand(symbol=BareToken("X")))


def test_clear_without_symbol_is_rejected_at_line_one() -> None:
    error = _parse_fails("clear_missing_symbol", "CLEAR")

    assert isinstance(error, WadMergeSyntaxError)
    assert error.code == "PARSER_MISSING_CLEAR_SYMBOL"
    assert error.message == "missing symbol for clear"
    assert (error.line, error.column, error.offset) == (1, 1, 0)


def test_unterminated_string_is_reported_at_opening_quote() -> None:
    error = _parse_fails("create_unterminated", 'CREATE "unterminated')

    assert isinstance(error, WadMergeLexError)
    assert error.code == "LEXER_UNTERMINATED_STRING"
    assert "unterminated string literal" in str(error)
    assert (error.line, error.column, error.offset) == (1, 8, 7)


def test_create_without_symbol() -> None:
    error = _parse_fails("create_missing_symbol", "CREATE   \nEND")

    assert error.code == "PARSER_MISSING_CREATE_SYMBOL"
    assert error.message == "missing symbol for create"
    assert error.line == 1


def test_unrecognized_line_reports_line_start() -> None:
    error = _parse_fails("unrecognized", "CREATE a\n  bogus line\nEND\n")

    assert error.code == "PARSER_UNRECOGNIZED_LINE"
    assert (error.line, error.column, error.offset) == (2, 1, 9)


@pytest.mark.parametrize(
    "source",
    ['"quoted" start', "CLEARX y", "ECHO\u2000hi", "ENDX", "IWAD", "clear\u00a0x"],
)
def test_lines_without_a_known_command_are_rejected(source: str) -> None:
    assert _parse_fails("unknown_first_word", source).code == "PARSER_UNRECOGNIZED_LINE"


def test_stray_quote_is_a_lexical_error() -> None:
    error = _parse_fails("stray_quote", 'END\nCLEAR "\n')

    assert isinstance(error, WadMergeLexError)
    assert (error.line, error.column) == (2, 7)


def test_clear_keeps_extra_tokens_out_of_the_command() -> None:
    document = _parse_ok("clear_extra", "CLEAR X extra stuff\n")
    clear = document[0]

    assert clear == ClearCommand(BareToken("X"))
    assert isinstance(clear, ClearCommand)
    assert clear.ignored == ("extra", "stuff")


def test_strict_mode_rejects_clear_trailing_content() -> None:
    error = _parse_fails("strict_clear", "END\nCLEAR X extra\n", mode=ParseMode.STRICT)

    assert error.code == "PARSER_UNEXPECTED_TRAILING_CONTENT"
    assert (error.line, error.column) == (2, 1)


def test_strict_mode_rejects_create_trailers_but_keeps_end_trailers() -> None:
    assert _parse_ok("strict_end", "END a b", mode=ParseMode.STRICT) == Document((EndCommand(("a", "b")),))
    assert _parse_ok("strict_iwad", "CREATE x IWAD", mode=ParseMode.STRICT) == Document(
        (CreateCommand(BareToken("x"), is_iwad=True),)
    )
    error = _parse_fails("strict_create", "CREATE x IWAD more", mode=ParseMode.STRICT)
    assert error.code == "PARSER_UNEXPECTED_TRAILING_CONTENT"


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError, match="Pass either options or mode, not both"):
        parse("END", ParserOptions(), mode=ParseMode.STRICT)


def test_custom_options_mix_leniency_flags() -> None:
    options = ParserOptions(allow_clear_trailing=False)

    assert parse("CREATE a b c", options)[0] == CreateCommand(BareToken("a"), trailers=("b", "c"))
    with pytest.raises(WadMergeSyntaxError):
        parse("CLEAR a b", options)


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("CREATE iwad", CreateCommand(BareToken("iwad"))),
        ("CREATE x IWAD IWAD", CreateCommand(BareToken("x"), is_iwad=True, trailers=("IWAD",))),
        ("CREATE x foo IWAD", CreateCommand(BareToken("x"), trailers=("foo", "IWAD"))),
        ("CREATE x IWADS", CreateCommand(BareToken("x"), trailers=("IWADS",))),
        ('CREATE "x"iwad', CreateCommand(StringLiteral("x"), is_iwad=True)),
        ('CREATE foo"bar"', CreateCommand(BareToken("foo"), trailers=('"bar"',))),
        ('CREATE "" -x', CreateCommand(StringLiteral(""), trailers=("-x",))),
        ('CREATE "a\\"b\\\\c\\n"', CreateCommand(StringLiteral('a"b\\c\\n'))),
    ],
)
def test_create_shapes(source: str, expected: CreateCommand) -> None:
    assert _parse_ok("create_shapes", source) == Document((expected,))


@pytest.mark.parametrize(
    ("source", "text"),
    [
        ("ECHO", ""),
        ("ECHO\n", ""),
        ("ECHO   \nEND", ""),
        ("echo\thi  ", "hi  "),
        ('Echo # "quoted" #', '# "quoted" #'),
    ],
)
def test_echo_shapes(source: str, text: str) -> None:
    document = _parse_ok("echo_shapes", source)

    assert document[0] == EchoCommand(text=text)


def test_end_trailers_are_opaque() -> None:
    document = _parse_ok("end_trailers", 'END "a b" #c')

    assert document[0] == EndCommand(trailers=('"a', 'b"', "#c"))


def test_clear_with_quoted_symbol_containing_hash() -> None:
    assert _parse_ok("clear_hash", 'CLEAR "a#b"')[0] == ClearCommand(StringLiteral("a#b"))


def test_blank_lines_of_extras_leave_no_record() -> None:
    assert _parse_ok("extras_only", "\u3000\t\n\u2028\r\n\x1c").is_empty


def test_empty_comment() -> None:
    assert _parse_ok("empty_comment", "#\nEND")[0] == Comment(text="")


def test_records_carry_line_numbers_and_ranges() -> None:
    source = "\n\n# c\r\nEND\r  CREATE foo IWAD x\n"
    document = _parse_ok("positions", source)

    assert [record.line for record in document] == [3, 4, 5]
    create = document[2]
    assert create.range.as_tuple() == (13, 30)
    assert source[13:30] == "CREATE foo IWAD x"


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"], ids=["lf", "crlf", "cr"])
def test_line_endings_do_not_change_the_document(newline: str) -> None:
    lines = ["# header", "CLEAR out", "", "CREATE out IWAD a.wad", "ECHO built it", "END"]
    reference = parse("\n".join(lines))

    assert parse(newline.join(lines)) == reference
    assert parse(newline.join(lines) + newline) == reference


def test_mixed_line_endings() -> None:
    document = _parse_ok("mixed_newlines", "CLEAR a\rCLEAR b\r\nCLEAR c\n")

    assert [record.symbol for record in document] == [BareToken("a"), BareToken("b"), BareToken("c")]
    assert [record.line for record in document] == [1, 2, 3]


def test_parse_is_idempotent() -> None:
    source = 'create "x" iwad t1\necho hi\nend\n'

    assert parse(source) == parse(source)


def test_multiline_strings_when_enabled() -> None:
    source = 'CREATE "a\nb" IWAD\nEND'
    options = ParserOptions(allow_multiline_strings=True)

    document = _parse_ok("multiline", source, options=options)

    assert document.lines == (CreateCommand(StringLiteral("a\nb"), is_iwad=True), EndCommand())
    assert document[1].line == 3
    with pytest.raises(WadMergeLexError):
        parse(source)


def test_cancel_is_checked_between_lines() -> None:
    answers = iter([False, False, True])

    with pytest.raises(ParseCancelledError) as excinfo:
        parse("END\nEND\nEND\n", cancel=lambda: next(answers))

    assert excinfo.value.line == 3


def test_cancel_never_set_parses_everything() -> None:
    assert len(parse("END\nEND\n", cancel=lambda: False)) == 2


def test_independent_parses_run_concurrently() -> None:
    sources = [f"CREATE t{i} IWAD\nECHO {i}\nEND\n" for i in range(32)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        documents = list(pool.map(parse, sources))

    assert documents == [parse(source) for source in sources]
    assert documents[7][1] == EchoCommand("7")


def test_document_accessors() -> None:
    document = parse("# c\nCLEAR a\nEND\n")

    assert len(document) == 3
    assert list(document)[0] == Comment(" c")
    assert document[1:] == (ClearCommand(BareToken("a")), EndCommand())
    assert document.commands() == (ClearCommand(BareToken("a")), EndCommand())
    assert not document.is_empty


@pytest.mark.parametrize("value", ['a"b', "", "a b", "a\tb", "a\u3000b", "a\nb"])
def test_bare_token_rejects_quotes_and_whitespace(value: str) -> None:
    with pytest.raises(ValueError):
        BareToken(value)


def test_bare_token_accepts_other_unicode_spaces() -> None:
    assert BareToken("a\u00a0b").value == "a\u00a0b"


def test_unterminated_quote_at_line_start_is_a_lexical_error() -> None:
    error = _parse_fails("line_start_quote", 'END\n  "abc\n')

    assert isinstance(error, WadMergeLexError)
    assert error.code == "LEXER_UNTERMINATED_STRING"
    assert (error.line, error.column, error.offset) == (2, 3, 6)


def test_symbols_with_and_without_escapes() -> None:
    document = _parse_ok("escapes", 'CLEAR "plain"\nCLEAR "a\\\\b"')

    assert [record.symbol for record in document] == [StringLiteral("plain"), StringLiteral("a\\b")]
