"""Top/bottom faces: the footprint rectangle with a hole per penetrating wall."""

from __future__ import annotations

from wallgeom.models import FaceFrame, PolygonWithHoles, Point2D
from wallgeom.models.geometry import ensure_ccw, polygon_area
from wallgeom.geometry.clipper import clip_polygon
from wallgeom.geometry.intersections import footprints_overlap


def overlap_polygons(
    footprint: list[Point2D],
    partners: list[list[Point2D]],
    eps: float,
    edge_crossings: bool = True,
) -> list[list[Point2D]]:
    """Overlap polygon (plan coordinates) of ``footprint`` with each overlapping partner."""
    if not footprint:
        return []
    polygons: list[list[Point2D]] = []
    for partner in partners:
        if not footprints_overlap(footprint, partner, eps, edge_crossings):
            continue
        overlap = clip_polygon(partner, footprint, eps)
        if overlap:
            polygons.append(overlap)
    return polygons


def horizontal_region(
    frame: FaceFrame,
    holes: list[list[Point2D]],
    eps: float,
) -> PolygonWithHoles:
    """
    Outer rectangle in the face frame plus one hole per overlap polygon.

    Holes are clockwise and kept as separate loops even when they overlap
    each other; a renderer that cannot take that must union them itself.
    """
    outer = [
        Point2D(x=0.0, y=0.0),
        Point2D(x=frame.width, y=0.0),
        Point2D(x=frame.width, y=frame.height),
        Point2D(x=0.0, y=frame.height),
    ]
    local_holes: list[list[Point2D]] = []
    for polygon in holes:
        if len(polygon) < 3 or polygon_area(polygon) < eps * eps:
            continue
        local = [frame.to_local(p) for p in polygon]
        local_holes.append(list(reversed(ensure_ccw(local))))
    return PolygonWithHoles(outer=outer, holes=local_holes)
