"""High-level parse entrypoint for WadMerge script text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wadmergepy.ast import Document
from wadmergepy.diagnostics import WadMergeParseError
from wadmergepy.lexer import Lexer
from wadmergepy.parser.grammar import parse_document
from wadmergepy.parser.options import ParseMode, ParserOptions
from wadmergepy.parser.parser import CancelCheck, Parser
from wadmergepy.parser.token_source import TokenSource
from wadmergepy.text import LineIndex

if TYPE_CHECKING:
    from wadmergepy.pipeline import WadMergeParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def _build_parser(text: str, options: ParserOptions, cancel: CancelCheck | None) -> Parser:
    line_index = LineIndex(text)
    lexer = Lexer(
        text,
        allow_multiline_strings=options.allow_multiline_strings,
        line_index=line_index,
    )
    return Parser(TokenSource(lexer), options=options, line_index=line_index, cancel=cancel)


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    cancel: CancelCheck | None = None,
) -> Document:
    """Parse a script into a `Document`.

    Raises `WadMergeParseError` on the first line that matches no known shape,
    and `ParseCancelledError` if `cancel` returns true between lines.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    logger.debug("Parsing WadMerge script: %d chars, mode=%s", len(text), resolved_options.mode)

    parser = _build_parser(text, resolved_options, cancel)
    document = parse_document(parser)

    logger.debug("Parsed %d line records", len(document))
    return document


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    cancel: CancelCheck | None = None,
) -> WadMergeParseResult:
    """Parse without raising for malformed input; errors land in `diagnostics`."""
    from wadmergepy.pipeline import WadMergeParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    try:
        document = parse(text, options=resolved_options, cancel=cancel)
    except WadMergeParseError as error:
        logger.debug("Rejected WadMerge script: %s", error)
        return WadMergeParseResult(
            source_text=text,
            document=None,
            diagnostics=[error.diagnostic],
            options=resolved_options,
        )
    return WadMergeParseResult(
        source_text=text,
        document=document,
        diagnostics=[],
        options=resolved_options,
    )
