"""Document model for parsed WadMerge scripts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias, overload

from wadmergepy.lexer.keywords import WHITESPACE
from wadmergepy.text import TextRange

_NO_RANGE = TextRange(0, 0)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Quoted symbol; `value` is the escape-processed content."""

    value: str


@dataclass(frozen=True, slots=True)
class BareToken:
    """Unquoted symbol: a run of non-whitespace, non-quote characters."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or any(ch == '"' or ch in WHITESPACE for ch in self.value):
            raise ValueError(f"Invalid bare symbol: {self.value!r}")


Symbol: TypeAlias = StringLiteral | BareToken


# Position fields are left out of equality: two scripts with the same content
# but different line endings parse to equal documents.


@dataclass(frozen=True, slots=True)
class ClearCommand:
    symbol: Symbol
    ignored: tuple[str, ...] = field(default=(), compare=False)
    line: int = field(default=0, compare=False, repr=False)
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class CreateCommand:
    symbol: Symbol
    is_iwad: bool = False
    trailers: tuple[str, ...] = ()
    line: int = field(default=0, compare=False, repr=False)
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class EchoCommand:
    text: str = ""
    line: int = field(default=0, compare=False, repr=False)
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class EndCommand:
    trailers: tuple[str, ...] = ()
    line: int = field(default=0, compare=False, repr=False)
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Comment:
    """Text after `#`, up to the end of the line."""

    text: str
    line: int = field(default=0, compare=False, repr=False)
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


Command: TypeAlias = ClearCommand | CreateCommand | EchoCommand | EndCommand
Line: TypeAlias = Command | Comment


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered line records of one script. Blank lines leave no record."""

    lines: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    @overload
    def __getitem__(self, index: int) -> Line: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Line, ...]: ...

    def __getitem__(self, index: int | slice) -> Line | tuple[Line, ...]:
        return self.lines[index]

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def commands(self) -> tuple[Command, ...]:
        """All records except comments, in source order."""
        return tuple(line for line in self.lines if not isinstance(line, Comment))
