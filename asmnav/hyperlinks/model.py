"""Hyperlink target values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from asmnav.text import TextRange


class HyperlinkKind(IntEnum):
    SOURCE_INCLUDE = 1
    BINARY_INCLUDE = 2
    IDENTIFIER = 3


class Viewer(StrEnum):
    """Which kind of editor a hyperlink target should be opened with."""

    LANGUAGE_EDITOR = "language"
    HEX_EDITOR = "hex"
    GRAPHICS_EDITOR = "graphics"
    DEFAULT_EDITOR = "default"
    SYSTEM_EDITOR = "system"


@dataclass(frozen=True, slots=True)
class HyperlinkTarget:
    """Navigation target for a cursor position.

    `line` is 1-based and None for include targets, which open at the top of
    the file. `region` is the linked text range in the queried document.
    """

    path: str
    line: int | None
    description: str
    kind: HyperlinkKind
    viewer: Viewer
    region: TextRange
