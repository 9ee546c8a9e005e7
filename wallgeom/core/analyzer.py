"""Geometric analysis: footprints and pairwise wall overlaps."""

from __future__ import annotations
import logging

from wallgeom.models import EngineContext, FootprintOverlap
from wallgeom.geometry.clipper import clip_polygon
from wallgeom.geometry.footprint import build_footprints
from wallgeom.geometry.intersections import find_overlapping_pairs

logger = logging.getLogger(__name__)


class WallAnalyzer:
    """Derives footprints and detects overlapping walls."""

    def analyze(self, context: EngineContext) -> None:
        """Run all analysis passes and populate the context."""
        context.footprints = build_footprints(context.walls, context.eps)
        context.overlaps = self._detect_overlaps(context)

    def _detect_overlaps(self, context: EngineContext) -> list[FootprintOverlap]:
        """Overlap polygon for every pair of overlapping footprints."""
        footprints = context.footprints
        eps = context.eps
        pairs = find_overlapping_pairs(
            footprints, eps, edge_crossings=context.config.detect_edge_crossings,
        )

        overlaps: list[FootprintOverlap] = []
        for a, b in pairs:
            # Both footprints are convex, so the clip is the exact intersection
            polygon = clip_polygon(footprints[b], footprints[a], eps)
            if not polygon:
                logger.debug("Walls %d and %d touch without sharing area", a, b)
                continue
            overlaps.append(FootprintOverlap(wall_a=a, wall_b=b, polygon=polygon))

        logger.debug("Detected %d overlap(s) among %d wall(s)", len(overlaps), len(footprints))
        return overlaps
