"""Format runner over a shared WadMerge parse result."""

from __future__ import annotations

import logging

from wadmergepy.format.render import render_document
from wadmergepy.parser import ParseMode, ParserOptions, parse_result
from wadmergepy.pipeline import FormatRunResult, WadMergeParseResult

logger = logging.getLogger(__name__)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: WadMergeParseResult | None = None,
    newline: str = "\n",
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle.

    A script that fails to parse is returned unchanged with its diagnostics.
    """
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)

    if resolved_parse.document is None:
        logger.debug("Skipping format: script has %d diagnostics", len(resolved_parse.diagnostics))
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = render_document(resolved_parse.document, newline=newline)

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=list(resolved_parse.diagnostics),
        changed=formatted_text != resolved_parse.source_text,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: WadMergeParseResult | None,
) -> WadMergeParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
