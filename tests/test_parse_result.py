import logging

import pytest

from wadmergepy import EndCommand, WadMergeLexError, WadMergeSyntaxError
from wadmergepy.diagnostics import first_error, has_errors
from wadmergepy.parser import ParseMode, parse, parse_result


def test_parse_result_exposes_document_and_error_state() -> None:
    result = parse_result("END\n")

    assert result.document is not None
    assert result.document.lines == (EndCommand(),)
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.raise_for_errors() is result.document


def test_parse_result_keeps_the_rejecting_diagnostic() -> None:
    result = parse_result("END\nfrobnicate\n")

    assert result.document is None
    assert result.has_errors is True
    assert [d.code for d in result.diagnostics] == ["PARSER_UNRECOGNIZED_LINE"]
    diagnostic = result.diagnostics[0]
    assert (diagnostic.line, diagnostic.column, diagnostic.offset) == (2, 1, 4)
    assert diagnostic.category == "parser"
    assert diagnostic.hint is not None
    with pytest.raises(WadMergeSyntaxError):
        result.raise_for_errors()


def test_parse_result_lexer_errors_raise_lex_error() -> None:
    result = parse_result('CLEAR "x')

    assert result.diagnostics[0].category == "lexer"
    with pytest.raises(WadMergeLexError):
        result.raise_for_errors()


def test_parse_result_strict_and_permissive_match_parse_contract() -> None:
    source = "CLEAR a b\n"

    strict_result = parse_result(source, mode=ParseMode.STRICT)
    permissive_result = parse_result(source, mode=ParseMode.PERMISSIVE)

    assert strict_result.has_errors is True
    assert permissive_result.has_errors is False
    assert permissive_result.document == parse(source, mode=ParseMode.PERMISSIVE)
    assert strict_result.options.mode == ParseMode.STRICT


def test_parse_result_for_empty_source() -> None:
    result = parse_result("")

    assert result.document is not None
    assert result.document.is_empty


def test_diagnostic_helpers() -> None:
    result = parse_result("CREATE\n")

    assert has_errors(result.diagnostics)
    assert first_error(result.diagnostics) is result.diagnostics[0]
    assert first_error([]) is None


def test_parse_logs_at_debug_level(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="wadmergepy.parser.script"):
        parse_result("END\n")
        parse_result("nope\n")

    messages = [record.getMessage() for record in caplog.records]
    assert any("Parsed 1 line records" in message for message in messages)
    assert any("Rejected WadMerge script" in message for message in messages)
