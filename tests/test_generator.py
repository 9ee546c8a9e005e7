"""Tests for the registry, rules and face generator."""
from wallgeom.models import FaceType, EngineConfig, EngineContext
from wallgeom.core.analyzer import WallAnalyzer
from wallgeom.core.generator import FaceGenerator
from wallgeom.core.registry import RuleRegistry, create_default_registry
from wallgeom.rules.faces.plain import PlainFaceRule
from wallgeom.rules.faces.side_segmentation import SideSegmentationRule


def generate(walls, **config):
    return FaceGenerator(create_default_registry()).generate(walls, config=EngineConfig(**config))


# --- analyzer ---

def test_analyzer_finds_crossing(crossing):
    context = EngineContext(walls=crossing)
    WallAnalyzer().analyze(context)
    assert len(context.footprints) == 2
    assert len(context.overlaps) == 1
    assert (context.overlaps[0].wall_a, context.overlaps[0].wall_b) == (0, 1)
    assert context.overlaps_for(1) == context.overlaps


def test_analyzer_vertex_only_misses_plus_crossing(crossing):
    context = EngineContext(walls=crossing, config=EngineConfig(detect_edge_crossings=False))
    WallAnalyzer().analyze(context)
    assert context.overlaps == []


# --- registry ---

def test_default_registry_rule_choice(crossing):
    registry = create_default_registry()
    context = EngineContext(walls=crossing)
    assert registry.rule_for(FaceType.FRONT, context).get_id() == "face.side_segmentation"
    assert registry.rule_for(FaceType.TOP, context).get_id() == "face.penetration_holes"


def test_disabled_rule_falls_through_to_plain(crossing):
    registry = create_default_registry()
    context = EngineContext(
        walls=crossing, config=EngineConfig(disabled_rules=["face.side_segmentation"]),
    )
    assert registry.rule_for(FaceType.BACK, context).get_id() == "face.plain"


def test_enabled_rules_restrict_choice(crossing):
    registry = create_default_registry()
    context = EngineContext(
        walls=crossing, config=EngineConfig(enabled_rules=["face.side_segmentation"]),
    )
    assert registry.rule_for(FaceType.TOP, context) is None


def test_registry_register_and_unregister():
    registry = RuleRegistry()
    registry.register(PlainFaceRule())
    registry.register(SideSegmentationRule())
    assert [r.get_id() for r in registry.list_rules()] == ["face.side_segmentation", "face.plain"]
    registry.unregister("face.plain")
    assert registry.get_rule("face.plain") is None


# --- generator ---

def test_crossing_face_set(crossing):
    result = generate(crossing)
    assert result.stats.walls == 2
    assert result.stats.faces == 12
    assert result.stats.regions == 16
    assert result.stats.holes == 4
    assert result.skipped_walls == []

    front = result.face(0, FaceType.FRONT)
    assert front.wall_id == "A"
    assert len(front.regions) == 2
    top = result.face(0, FaceType.TOP)
    assert len(top.regions[0].holes) == 1


def test_zero_length_wall_is_skipped(wall_a, make_wall):
    result = generate([wall_a, make_wall(2, 2, 2, 2)])
    assert result.skipped_walls == [1]
    assert result.stats.skipped_walls == 1
    assert result.faces_for(1) == []
    assert len(result.faces_for(0)) == 6


def test_configured_face_types_only(crossing):
    result = generate(crossing, faces=[FaceType.TOP])
    assert result.stats.faces == 2
    assert {f.face_type for f in result.faces} == {FaceType.TOP}


def test_plain_rule_ignores_crossings(crossing):
    result = generate(crossing, enabled_rules=["face.plain"])
    assert len(result.face(0, FaceType.FRONT).regions) == 1
    assert result.stats.holes == 0


def test_faces_without_rule_are_omitted(crossing):
    result = generate(crossing, enabled_rules=["face.side_segmentation"])
    assert result.stats.faces == 8
    assert result.face(0, FaceType.TOP) is None


def test_shorter_wall_notches_taller_one(wall_a, wall_b_short):
    result = generate([wall_a, wall_b_short])
    a_front = result.face(0, FaceType.FRONT)
    b_front = result.face(1, FaceType.FRONT)
    assert len(a_front.regions) == 1
    assert len(a_front.regions[0].outer) == 8
    # the taller wall severs the shorter one
    assert len(b_front.regions) == 2
