"""Tests for footprint overlap detection."""
from wallgeom.geometry.footprint import build_footprint, build_footprints
from wallgeom.geometry.intersections import footprints_overlap, find_overlapping_pairs

EPS = 1e-3


def test_plus_crossing_needs_edge_test(wall_a, wall_b):
    # No corner of either footprint lies inside the other
    fa, fb = build_footprint(wall_a), build_footprint(wall_b)
    assert not footprints_overlap(fa, fb, EPS, edge_crossings=False)
    assert footprints_overlap(fa, fb, EPS, edge_crossings=True)


def test_corner_inside_detected_without_edge_test(make_wall):
    a = build_footprint(make_wall(0, 0, 4, 0))
    c = build_footprint(make_wall(4, 0, 4, 3))
    assert footprints_overlap(a, c, EPS, edge_crossings=False)


def test_parallel_separated_walls_do_not_overlap(make_wall):
    a = build_footprint(make_wall(0, 0, 4, 0))
    b = build_footprint(make_wall(0, 1, 4, 1))
    assert not footprints_overlap(a, b, EPS)


def test_collinear_walls_meeting_end_to_end_do_not_overlap(make_wall):
    a = build_footprint(make_wall(0, 0, 4, 0))
    b = build_footprint(make_wall(4, 0, 8, 0))
    assert not footprints_overlap(a, b, EPS)


def test_coincident_walls_overlap(make_wall):
    a = build_footprint(make_wall(0, 0, 4, 0))
    b = build_footprint(make_wall(4, 0, 0, 0))
    assert footprints_overlap(a, b, EPS)


def test_degenerate_footprint_never_overlaps(wall_a):
    assert not footprints_overlap(build_footprint(wall_a), [], EPS)


def test_find_overlapping_pairs(wall_a, wall_b, make_wall):
    far = make_wall(10, 10, 12, 10)
    pairs = find_overlapping_pairs(build_footprints([wall_a, wall_b, far]), EPS)
    assert pairs == [(0, 1)]
