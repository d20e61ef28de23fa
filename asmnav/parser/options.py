"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling which structural findings become diagnostics.

    The defaults are the STRICT profile, so `ParserOptions()` equals
    `ParserOptions.for_mode(ParseMode.STRICT)`.
    """

    mode: ParseMode = ParseMode.STRICT
    report_unmatched_scope_close: bool = True
    report_unclosed_scopes: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                report_unmatched_scope_close=False,
                report_unclosed_scopes=False,
            )
        return ParserOptions(mode=mode)
