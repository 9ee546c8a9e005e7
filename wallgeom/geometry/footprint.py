"""Wall footprints: the plan-view rectangle of each wall."""

from __future__ import annotations

from wallgeom.models import Wall, Point2D


def build_footprint(wall: Wall, eps: float = 1e-3) -> list[Point2D]:
    """
    Counter-clockwise rectangle of length x thickness around the centerline.

    Corners run right-start, right-end, left-end, left-start (left = +normal).
    A zero-length wall has no footprint.
    """
    if wall.is_degenerate(eps):
        return []

    n = wall.normal
    half = wall.thickness / 2
    return [
        wall.start.offset(n, -half),
        wall.end.offset(n, -half),
        wall.end.offset(n, half),
        wall.start.offset(n, half),
    ]


def build_footprints(walls: list[Wall], eps: float = 1e-3) -> list[list[Point2D]]:
    """Footprints aligned with the wall list ([] for degenerate walls)."""
    return [build_footprint(w, eps) for w in walls]
