"""Text offsets, ranges and line tables."""

from asmnav.text.lines import LineIndex, LineInfo
from asmnav.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineIndex",
    "LineInfo",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
