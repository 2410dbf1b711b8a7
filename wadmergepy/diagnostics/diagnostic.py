"""Diagnostics core types."""

from dataclasses import dataclass

from wadmergepy.diagnostics.codes import DiagnosticSpec, Severity
from wadmergepy.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and the line parser."""

    code: str
    message: str
    range: TextRange
    line: int
    column: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, line_index: LineIndex) -> "Diagnostic":
        position = line_index.line_col(range.start)
        return Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            line=position.line,
            column=position.column,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @property
    def offset(self) -> int:
        return self.range.start.value
