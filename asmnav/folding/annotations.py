"""Displayed folding annotations, updated by diff."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from asmnav.folding.regions import FoldingDiff, FoldRegion, diff_folding_regions

logger = logging.getLogger(__name__)


class FoldingAnnotation:
    __slots__ = ("region", "collapsed")

    def __init__(self, region: FoldRegion, *, collapsed: bool = False) -> None:
        self.region = region
        self.collapsed = collapsed

    def __repr__(self) -> str:
        return f"FoldingAnnotation({self.region.start}, {self.region.end}, collapsed={self.collapsed})"


class FoldingAnnotationModel:
    """Set of folding annotations currently shown for one document.

    Only `update` changes the set, from a single writer; there is no locking.
    Annotations of regions that survive an update are kept as they are,
    including their collapsed state.
    """

    def __init__(self) -> None:
        self._annotations: dict[FoldRegion, FoldingAnnotation] = {}
        self._revision = 0

    @property
    def annotations(self) -> Mapping[FoldRegion, FoldingAnnotation]:
        return MappingProxyType(self._annotations)

    @property
    def regions(self) -> frozenset[FoldRegion]:
        return frozenset(self._annotations)

    @property
    def revision(self) -> int:
        """Number of non-empty batches applied so far."""
        return self._revision

    def update(self, regions: Iterable[FoldRegion]) -> FoldingDiff:
        diff = diff_folding_regions(self._annotations, regions)
        if diff.is_empty:
            return diff
        self._apply(diff)
        return diff

    def set_collapsed(self, region: FoldRegion, collapsed: bool) -> None:
        annotation = self._annotations.get(region)
        if annotation is None:
            raise KeyError(f"No folding annotation for {region!r}")
        annotation.collapsed = collapsed

    def _apply(self, diff: FoldingDiff) -> None:
        for region in diff.to_remove:
            del self._annotations[region]
        for region in sorted(diff.to_add):
            self._annotations[region] = FoldingAnnotation(region)
        self._revision += 1
        logger.debug(
            "Applied folding diff: +%d -%d =%d",
            len(diff.to_add),
            len(diff.to_remove),
            len(diff.unchanged),
        )
