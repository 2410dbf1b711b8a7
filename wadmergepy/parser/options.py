"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar compatibility.

    PERMISSIVE keeps every extra token on CLEAR/CREATE lines; STRICT rejects
    anything after the command's own fields.
    """

    mode: ParseMode = ParseMode.PERMISSIVE
    allow_clear_trailing: bool = True
    allow_create_trailers: bool = True
    allow_multiline_strings: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(
                mode=mode,
                allow_clear_trailing=False,
                allow_create_trailers=False,
                allow_multiline_strings=False,
            )

        return ParserOptions(
            mode=mode,
            allow_clear_trailing=True,
            allow_create_trailers=True,
            allow_multiline_strings=False,
        )
