"""Tests for vertical face segmentation."""
from wallgeom.models import FaceType, FaceOcclusion, Tolerances
from wallgeom.models.geometry import polygon_area
from wallgeom.geometry.segmenter import (
    occlusion_intervals, merge_intervals, segment_face, segment_side,
)

EPS = 1e-3


def ring_coords(region):
    return [(round(p.x, 9), round(p.y, 9)) for p in region.outer]


# --- merge_intervals ---

def test_merge_overlapping_and_touching_intervals():
    merged = merge_intervals([(3, 4), (0, 1), (0.5, 2), (2.0005, 2.5)], EPS)
    assert merged == [(0, 2.5), (3, 4)]


# --- occlusion_intervals ---

def test_crossing_wall_occludes_front(wall_a, wall_b):
    occ = occlusion_intervals(wall_a, FaceType.FRONT, [wall_b], EPS, indices=[1])
    assert len(occ) == 1
    assert occ[0].other_index == 1
    assert abs(occ[0].start - 1.9) < 1e-9
    assert abs(occ[0].end - 2.1) < 1e-9
    assert abs(occ[0].other_height - 3.0) < 1e-12


def test_distant_wall_does_not_occlude(wall_a, make_wall):
    far = make_wall(10, -1, 10, 1)
    assert occlusion_intervals(wall_a, FaceType.FRONT, [far], EPS) == []


# --- segment_side ---

def test_no_occlusion_gives_single_rectangle(wall_a):
    regions = segment_side(wall_a, FaceType.FRONT, [])
    assert len(regions) == 1
    assert len(regions[0].outer) == 4
    assert abs(regions[0].area - 12.0) < 1e-9


def test_equal_height_crossing_splits_face(wall_a, wall_b):
    regions = segment_side(wall_a, FaceType.FRONT, [wall_b])
    assert len(regions) == 2
    assert ring_coords(regions[0]) == [(0, 0), (1.9, 0), (1.9, 3), (0, 3)]
    assert ring_coords(regions[1]) == [(2.1, 0), (4, 0), (4, 3), (2.1, 3)]


def test_shorter_crossing_cuts_notch(wall_a, wall_b_short):
    regions = segment_side(wall_a, FaceType.FRONT, [wall_b_short])
    assert len(regions) == 1
    assert ring_coords(regions[0]) == [
        (0, 0), (1.9, 0), (1.9, 2), (2.1, 2), (2.1, 0), (4, 0), (4, 3), (0, 3),
    ]
    assert abs(regions[0].area - (12.0 - 0.2 * 2)) < 1e-9


def test_taller_crossing_is_a_full_break(wall_a, make_wall):
    tall = make_wall(2, -1, 2, 1, height=5.0)
    regions = segment_side(wall_a, FaceType.BACK, [tall])
    assert len(regions) == 2


def test_end_cap_untouched_by_crossing(wall_a, wall_b):
    regions = segment_side(wall_a, FaceType.LEFT, [wall_b])
    assert len(regions) == 1
    assert abs(regions[0].area - 0.2 * 3) < 1e-9


def test_zero_length_wall_has_no_regions(make_wall, wall_b):
    assert segment_side(make_wall(1, 1, 1, 1), FaceType.FRONT, [wall_b]) == []


def test_segment_side_top_face_has_hole(wall_a, wall_b):
    regions = segment_side(wall_a, FaceType.TOP, [wall_b], Tolerances())
    assert len(regions) == 1
    assert len(regions[0].holes) == 1
    assert abs(polygon_area(regions[0].holes[0]) - 0.04) < 1e-9


# --- segment_face ---

def test_mixed_breaks_and_notches():
    occlusions = [
        FaceOcclusion(other_index=1, start=0.9, end=1.1, other_height=3.0),
        FaceOcclusion(other_index=2, start=2.9, end=3.1, other_height=1.5),
    ]
    regions = segment_face(4.0, 3.0, occlusions, EPS)
    assert len(regions) == 2
    assert len(regions[0].outer) == 4
    assert len(regions[1].outer) == 8
    assert abs(regions[1].area - (2.9 * 3 - 0.2 * 1.5)) < 1e-9


def test_overlapping_notches_form_stepped_skyline():
    occlusions = [
        FaceOcclusion(other_index=1, start=1.0, end=2.0, other_height=1.0),
        FaceOcclusion(other_index=2, start=1.5, end=2.5, other_height=2.0),
    ]
    regions = segment_face(4.0, 3.0, occlusions, EPS)
    assert len(regions) == 1
    assert ring_coords(regions[0]) == [
        (0, 0), (1, 0), (1, 1), (1.5, 1), (1.5, 2), (2.5, 2), (2.5, 0), (4, 0), (4, 3), (0, 3),
    ]
    assert abs(regions[0].area - 9.5) < 1e-9


def test_fully_covered_face_has_no_regions():
    occlusions = [FaceOcclusion(other_index=1, start=-1.0, end=5.0, other_height=3.0)]
    assert segment_face(4.0, 3.0, occlusions, EPS) == []


def test_occlusion_at_face_end_leaves_one_region():
    occlusions = [FaceOcclusion(other_index=1, start=3.8, end=4.2, other_height=3.0)]
    regions = segment_face(4.0, 3.0, occlusions, EPS)
    assert len(regions) == 1
    assert abs(regions[0].area - 3.8 * 3) < 1e-9


def test_sliver_occlusion_is_ignored():
    occlusions = [FaceOcclusion(other_index=1, start=2.0, end=2.0005, other_height=3.0)]
    regions = segment_face(4.0, 3.0, occlusions, EPS)
    assert len(regions) == 1
    assert abs(regions[0].area - 12.0) < 1e-9
