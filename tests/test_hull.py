"""Tests for the Graham-scan convex hull."""
from wallgeom.models import Point2D
from wallgeom.models.geometry import signed_area
from wallgeom.geometry.hull import convex_hull, convex_hull_indices


def pts(*coords):
    return [Point2D(x=x, y=y) for x, y in coords]


def test_hull_drops_interior_and_collinear_points():
    points = pts((0, 0), (0.5, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.25))
    hull = convex_hull(points)
    assert len(hull) == 4
    assert signed_area(hull) > 0


def test_hull_starts_at_lowest_then_leftmost():
    points = pts((2, 1), (1, 0), (3, 0), (2, 3))
    idx = convex_hull_indices(points)
    assert idx[0] == 1


def test_hull_contains_extremes():
    points = pts((0, 0), (5, 1), (2, -3), (-4, 2), (1, 6), (1, 1), (0, 2))
    hull = convex_hull(points)
    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    assert min(xs) == -4 and max(xs) == 5
    assert min(ys) == -3 and max(ys) == 6


def test_hull_every_point_inside_or_on():
    points = pts((0, 0), (4, 0), (4, 3), (0, 3), (2, 1), (1, 2), (3, 2.5))
    hull = convex_hull(points)
    for p in points:
        for i in range(len(hull)):
            a, b = hull[i], hull[(i + 1) % len(hull)]
            assert (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x) >= -1e-12


def test_hull_of_two_points_is_unchanged():
    points = pts((0, 0), (1, 1))
    assert convex_hull(points) == points


def test_hull_with_duplicates():
    points = pts((0, 0), (0, 0), (1, 0), (1, 0), (0, 1))
    hull = convex_hull(points)
    assert len(hull) == 3


def test_hull_ignores_input_order():
    coords = [(0, 0), (2, 0), (4, 0), (4, 2), (2, 2.0004), (0, 2), (1, 1), (3, 1.5)]
    expected = {(p.x, p.y) for p in convex_hull(pts(*coords))}
    for shift in range(1, len(coords)):
        rotated = coords[shift:] + coords[:shift]
        assert {(p.x, p.y) for p in convex_hull(pts(*rotated))} == expected
        assert {(p.x, p.y) for p in convex_hull(pts(*reversed(rotated)))} == expected


def test_hull_near_collinear_points_share_a_ray():
    # (1, 1.0002) sits within tolerance of the ray through (2, 2)
    points = pts((0, 0), (2, 0), (2, 2), (1, 1.0002), (0, 2))
    hull = convex_hull(points)
    assert len(hull) == 4
    assert Point2D(x=1, y=1.0002) not in hull
    assert signed_area(hull) > 0
