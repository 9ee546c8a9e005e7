"""Pairwise overlap detection between wall footprints."""

from __future__ import annotations

from wallgeom.models import Point2D
from wallgeom.models.geometry import bounding_box, boxes_overlap
from wallgeom.geometry.clipper import point_strictly_inside, segments_cross


def _centroid(points: list[Point2D]) -> Point2D:
    return Point2D(
        x=sum(p.x for p in points) / len(points),
        y=sum(p.y for p in points) / len(points),
    )


def _any_vertex_inside(a: list[Point2D], b: list[Point2D], eps: float) -> bool:
    return any(point_strictly_inside(p, b, eps) for p in a)


def _any_edges_cross(a: list[Point2D], b: list[Point2D], eps: float) -> bool:
    for i in range(len(a)):
        a0, a1 = a[i], a[(i + 1) % len(a)]
        for j in range(len(b)):
            if segments_cross(a0, a1, b[j], b[(j + 1) % len(b)], eps):
                return True
    return False


def footprints_overlap(
    a: list[Point2D],
    b: list[Point2D],
    eps: float,
    edge_crossings: bool = True,
) -> bool:
    """
    True when two footprints share area.

    Broad phase: bounding boxes. Narrow phase: a vertex of either footprint
    strictly inside the other. The vertex test alone misses rectangles that
    cross like a plus sign; ``edge_crossings`` adds a proper edge-crossing
    check for those.
    """
    if not a or not b:
        return False
    if not boxes_overlap(bounding_box(a), bounding_box(b), eps):
        return False
    if _any_vertex_inside(a, b, eps) or _any_vertex_inside(b, a, eps):
        return True
    if not edge_crossings:
        return False
    # Coincident footprints have every vertex on the other's boundary
    if point_strictly_inside(_centroid(a), b, eps):
        return True
    return _any_edges_cross(a, b, eps)


def find_overlapping_pairs(
    footprints: list[list[Point2D]],
    eps: float,
    edge_crossings: bool = True,
) -> list[tuple[int, int]]:
    """All unordered index pairs (i < j) whose footprints overlap. O(n^2)."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(footprints)):
        for j in range(i + 1, len(footprints)):
            if footprints_overlap(footprints[i], footprints[j], eps, edge_crossings):
                pairs.append((i, j))
    return pairs
