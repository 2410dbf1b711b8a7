"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from wadmergepy.diagnostics import Diagnostic
from wadmergepy.pipeline.result import WadMergeParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: WadMergeParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
