"""Convex hull (Graham scan) over 2D point sets."""

from __future__ import annotations
import math
from functools import cmp_to_key

from wallgeom.models import Point2D
from wallgeom.models.geometry import cross2d


def convex_hull_indices(points: list[Point2D], eps: float = 1e-3) -> list[int]:
    """
    Indices of the hull vertices, counter-clockwise, starting at the pivot.

    Pivot is the lowest point (then leftmost). Points are ordered around it by
    the sign of their cross product; when the farther of two points lies within
    ``eps`` of the ray through the nearer one they count as collinear and the
    nearer comes first. Collinear and interior points are dropped. Fewer than
    3 points come back unchanged.
    """
    if len(points) < 3:
        return list(range(len(points)))

    pivot_idx = 0
    for i in range(1, len(points)):
        p, q = points[i], points[pivot_idx]
        if p.y < q.y or (p.y == q.y and p.x < q.x):
            pivot_idx = i
    pivot = points[pivot_idx]

    def dist(i: int) -> float:
        return math.hypot(points[i].x - pivot.x, points[i].y - pivot.y)

    def compare(i: int, j: int) -> int:
        di, dj = dist(i), dist(j)
        c = cross2d(pivot, points[i], points[j])
        near = min(di, dj)
        if near == 0.0 or abs(c) / near < eps:
            return (di > dj) - (di < dj)
        return -1 if c > 0 else 1

    order = sorted((i for i in range(len(points)) if i != pivot_idx), key=cmp_to_key(compare))

    hull = [pivot_idx]
    for idx in order:
        while len(hull) >= 2 and cross2d(points[hull[-2]], points[hull[-1]], points[idx]) <= 0:
            hull.pop()
        hull.append(idx)
    return hull


def convex_hull(points: list[Point2D], eps: float = 1e-3) -> list[Point2D]:
    return [points[i] for i in convex_hull_indices(points, eps)]
