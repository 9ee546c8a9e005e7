from .geometry import (
    Point2D, Point3D, Vector2D, Vector3D, GeometryError,
    direction_from_points, plan_to_world,
)
from .building import Wall, FootprintOverlap, FaceOcclusion
from .faces import FaceType, FaceFrame, PolygonWithHoles, Face, WallFaceSet, FaceStats
from .mesh import TriangleMesh, MeshEdge, Solid, WallSolid
from .outline import PlaneBasis, ClosedOutline, HullOutline, Outline, OutlineGroup
from .parameters import Tolerances, EngineConfig
from .context import EngineContext

__all__ = [
    "Point2D", "Point3D", "Vector2D", "Vector3D", "GeometryError",
    "direction_from_points", "plan_to_world",
    "Wall", "FootprintOverlap", "FaceOcclusion",
    "FaceType", "FaceFrame", "PolygonWithHoles", "Face", "WallFaceSet", "FaceStats",
    "TriangleMesh", "MeshEdge", "Solid", "WallSolid",
    "PlaneBasis", "ClosedOutline", "HullOutline", "Outline", "OutlineGroup",
    "Tolerances", "EngineConfig",
    "EngineContext",
]
