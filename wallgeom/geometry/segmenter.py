"""Vertical face segmentation under occlusion by crossing walls.

A face is a width x height strip. Other walls cover intervals of its width.
Walls at least as tall as this one sever the strip into independent
regions; shorter ones cut a notch up from the floor. Overlapping notches merge
into one notch whose top follows the highest occluder at each position.
"""

from __future__ import annotations
import logging

from wallgeom.models import (
    Wall, FaceType, FaceOcclusion, PolygonWithHoles, Point2D, Tolerances,
)
from wallgeom.geometry.clipper import clip_segment, dedupe_ring
from wallgeom.geometry.footprint import build_footprint
from wallgeom.geometry.frames import face_frame, face_line
from wallgeom.geometry.penetration import horizontal_region, overlap_polygons

logger = logging.getLogger(__name__)


def occlusion_intervals(
    wall: Wall,
    face_type: FaceType,
    others: list[Wall],
    eps: float,
    indices: list[int] | None = None,
    footprints: list[list[Point2D]] | None = None,
) -> list[FaceOcclusion]:
    """
    Intervals of a vertical face covered by other walls.

    ``indices`` names each entry of ``others`` in the caller's wall list
    (defaults to its position); ``footprints`` can pass precomputed footprints.
    """
    frame = face_frame(wall, face_type)
    a, b = face_line(frame)
    occlusions: list[FaceOcclusion] = []

    for k, other in enumerate(others):
        footprint = footprints[k] if footprints is not None else build_footprint(other, eps)
        if not footprint:
            continue
        covered = clip_segment(a, b, footprint, eps)
        if covered is None:
            continue
        occlusions.append(FaceOcclusion(
            other_index=indices[k] if indices is not None else k,
            start=covered[0],
            end=covered[1],
            other_height=other.height,
        ))
    return occlusions


def merge_intervals(intervals: list[tuple[float, float]], eps: float) -> list[tuple[float, float]]:
    """Union of intervals; ones that overlap or touch within eps become one."""
    merged: list[tuple[float, float]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + eps:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def _uncovered(width: float, blocked: list[tuple[float, float]], eps: float) -> list[tuple[float, float]]:
    strips: list[tuple[float, float]] = []
    cursor = 0.0
    for start, end in blocked:
        if start - cursor >= eps:
            strips.append((cursor, start))
        cursor = max(cursor, end)
    if width - cursor >= eps:
        strips.append((cursor, width))
    return strips


def _skyline(
    x0: float, x1: float, notches: list[tuple[float, float, float]], eps: float,
) -> list[tuple[float, float, float]]:
    """Pieces (start, end, occluded height) tiling [x0, x1]; height 0 where uncovered."""
    inside = [
        (max(s, x0), min(e, x1), h) for s, e, h in notches
        if min(e, x1) - max(s, x0) >= eps
    ]

    breaks = [x0]
    for v in sorted({v for s, e, _ in inside for v in (s, e)}):
        if x0 + eps < v < x1 - eps and v - breaks[-1] >= eps:
            breaks.append(v)
    breaks.append(x1)

    pieces: list[tuple[float, float, float]] = []
    for start, end in zip(breaks, breaks[1:]):
        mid = (start + end) / 2
        h = max((nh for s, e, nh in inside if s - eps <= mid <= e + eps), default=0.0)
        if pieces and abs(pieces[-1][2] - h) < eps:
            pieces[-1] = (pieces[-1][0], end, pieces[-1][2])
        else:
            pieces.append((start, end, h))
    return pieces


def _strip_ring(
    x0: float, x1: float, height: float,
    notches: list[tuple[float, float, float]], eps: float,
) -> list[Point2D]:
    """Walk the floor line (stepping over notches) left to right, then back along the top."""
    ring: list[Point2D] = []
    for start, end, h in _skyline(x0, x1, notches, eps):
        ring.append(Point2D(x=start, y=h))
        ring.append(Point2D(x=end, y=h))
    ring.append(Point2D(x=x1, y=height))
    ring.append(Point2D(x=x0, y=height))
    return dedupe_ring(ring, eps)


def segment_face(
    width: float,
    height: float,
    occlusions: list[FaceOcclusion],
    eps: float,
) -> list[PolygonWithHoles]:
    """Regions of a width x height face left visible by the occlusions."""
    if width < eps or height < eps:
        return []

    full: list[tuple[float, float]] = []
    notches: list[tuple[float, float, float]] = []
    for occ in occlusions:
        start, end = max(0.0, occ.start), min(width, occ.end)
        if end - start < eps or occ.other_height < eps:
            continue
        if occ.other_height >= height - eps:
            full.append((start, end))
        else:
            notches.append((start, end, occ.other_height))

    regions: list[PolygonWithHoles] = []
    for x0, x1 in _uncovered(width, merge_intervals(full, eps), eps):
        ring = _strip_ring(x0, x1, height, notches, eps)
        if len(ring) >= 3:
            regions.append(PolygonWithHoles(outer=ring))

    logger.debug(
        "segment_face: width=%.3f height=%.3f full=%d notches=%d -> %d region(s)",
        width, height, len(full), len(notches), len(regions),
    )
    return regions


def segment_side(
    wall: Wall,
    face_type: FaceType,
    others: list[Wall],
    tolerances: Tolerances | None = None,
) -> list[PolygonWithHoles]:
    """
    Regions of one side of ``wall`` given the other walls of the plan.

    Top and bottom get their penetration holes instead of a segmentation.
    """
    tol = tolerances or Tolerances()
    eps = tol.epsilon
    if wall.is_degenerate(eps):
        return []

    if face_type.is_horizontal:
        holes = overlap_polygons(
            build_footprint(wall, eps), [build_footprint(o, eps) for o in others], eps,
        )
        return [horizontal_region(face_frame(wall, face_type), holes, eps)]

    frame = face_frame(wall, face_type)
    occlusions = occlusion_intervals(wall, face_type, others, eps)
    return segment_face(frame.width, frame.height, occlusions, eps)
