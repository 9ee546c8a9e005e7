"""Per-wall face output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, field_validator

from .geometry import (
    Point2D, Point3D, Vector2D, Vector3D, plan_to_world, polygon_area,
)


class FaceType(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"   # Left of the centerline direction (+normal)
    BACK = "back"     # Right of the centerline direction (-normal)
    LEFT = "left"     # Start cap
    RIGHT = "right"   # End cap

    @property
    def is_horizontal(self) -> bool:
        return self in (FaceType.TOP, FaceType.BOTTOM)


class FaceFrame(BaseModel):
    """
    Local 2D frame of one wall face.

    Vertical faces use (distance along width_axis, height above elevation).
    Horizontal faces use (distance along width_axis, distance along depth_axis)
    at a fixed elevation.
    """
    face_type: FaceType
    origin: Point2D
    width_axis: Vector2D
    depth_axis: Vector2D
    width: float
    height: float
    elevation: float = 0.0
    normal: Vector3D

    def to_world(self, point: Point2D) -> Point3D:
        """The one local -> world transform every caller goes through."""
        if self.face_type.is_horizontal:
            plan = self.origin.offset(self.width_axis, point.x).offset(self.depth_axis, point.y)
            return plan_to_world(plan, self.elevation)
        plan = self.origin.offset(self.width_axis, point.x)
        return plan_to_world(plan, self.elevation + point.y)

    def to_local(self, plan: Point2D) -> Point2D:
        """Plan point -> local coordinates (horizontal faces only)."""
        rel = plan - self.origin
        return Point2D(x=rel.dot(self.width_axis), y=rel.dot(self.depth_axis))


class PolygonWithHoles(BaseModel):
    """Outer ring plus independent hole rings. Holes are never merged, even if they touch."""
    outer: list[Point2D]
    holes: list[list[Point2D]] = []

    @field_validator("outer")
    @classmethod
    def _outer_is_polygon(cls, v: list[Point2D]) -> list[Point2D]:
        if len(v) < 3:
            raise ValueError(f"outer ring needs at least 3 points, got {len(v)}")
        return v

    @property
    def area(self) -> float:
        return polygon_area(self.outer) - sum(polygon_area(h) for h in self.holes)


class Face(BaseModel):
    """All regions of one side of one wall."""
    wall_index: int
    wall_id: str = ""
    face_type: FaceType
    frame: FaceFrame
    regions: list[PolygonWithHoles]


class WallFaceSet(BaseModel):
    """The complete generated face set for a wall list."""
    faces: list[Face]
    skipped_walls: list[int] = []
    stats: FaceStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = FaceStats.from_faces(self.faces, len(self.skipped_walls))

    def faces_for(self, wall_index: int) -> list[Face]:
        return [f for f in self.faces if f.wall_index == wall_index]

    def face(self, wall_index: int, face_type: FaceType) -> Face | None:
        for f in self.faces:
            if f.wall_index == wall_index and f.face_type == face_type:
                return f
        return None


class FaceStats(BaseModel):
    """Summary statistics for a generated face set."""
    walls: int = 0
    faces: int = 0
    regions: int = 0
    holes: int = 0
    skipped_walls: int = 0

    @classmethod
    def from_faces(cls, faces: list[Face], skipped: int = 0) -> FaceStats:
        regions = [r for f in faces for r in f.regions]
        return cls(
            walls=len({f.wall_index for f in faces}),
            faces=len(faces),
            regions=len(regions),
            holes=sum(len(r.holes) for r in regions),
            skipped_walls=skipped,
        )


WallFaceSet.model_rebuild()
