"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="unterminated string literal",
    hint='Close the string with a double quote, or escape a literal quote as `\\"`.',
    severity="error",
    category="lexer",
)

PARSER_UNRECOGNIZED_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNRECOGNIZED_LINE",
    message="unrecognized line",
    hint="Lines must start with CLEAR, CREATE, ECHO, END or `#`.",
    severity="error",
    category="parser",
)

PARSER_MISSING_CLEAR_SYMBOL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CLEAR_SYMBOL",
    message="missing symbol for clear",
    hint="Name the target to clear, e.g. `CLEAR out`.",
    severity="error",
    category="parser",
)

PARSER_MISSING_CREATE_SYMBOL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CREATE_SYMBOL",
    message="missing symbol for create",
    hint='Name the target to create, e.g. `CREATE out` or `CREATE "my wad" IWAD`.',
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TRAILING_CONTENT",
    message="unexpected trailing content",
    hint="Strict mode accepts no tokens after the command's fields; use permissive mode to keep them.",
    severity="error",
    category="parser",
)
