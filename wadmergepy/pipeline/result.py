"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass

from wadmergepy.ast import Document
from wadmergepy.diagnostics import Diagnostic, error_for, has_errors
from wadmergepy.parser.options import ParserOptions


@dataclass(slots=True)
class WadMergeParseResult:
    """Outcome of one parse: a document, or the diagnostic that rejected it."""

    source_text: str
    document: Document | None
    diagnostics: list[Diagnostic]
    options: ParserOptions

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def raise_for_errors(self) -> Document:
        """Return the document, or raise the parse error it was rejected with."""
        if self.document is None:
            raise error_for(self.diagnostics[0])
        return self.document
