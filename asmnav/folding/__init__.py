"""Folding region calculation."""

from asmnav.folding.annotations import FoldingAnnotation, FoldingAnnotationModel
from asmnav.folding.regions import FoldingDiff, FoldRegion, diff_folding_regions, folding_regions

__all__ = [
    "FoldRegion",
    "FoldingAnnotation",
    "FoldingAnnotationModel",
    "FoldingDiff",
    "diff_folding_regions",
    "folding_regions",
]
