"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from wadmergepy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def first_error(diagnostics: Iterable[Diagnostic]) -> Diagnostic | None:
    """Earliest error by source offset."""
    errors = [d for d in diagnostics if d.severity == "error"]
    if not errors:
        return None
    return min(errors, key=lambda d: d.range.start)
