"""Hyperlink detection for include paths and identifiers."""

from asmnav.hyperlinks.detector import detect_hyperlinks, identifier_at
from asmnav.hyperlinks.model import HyperlinkKind, HyperlinkTarget, Viewer

__all__ = [
    "HyperlinkKind",
    "HyperlinkTarget",
    "Viewer",
    "detect_hyperlinks",
    "identifier_at",
]
