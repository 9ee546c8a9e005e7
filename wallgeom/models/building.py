"""Building element models: walls and their pairwise interactions."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .geometry import Point2D, Vector2D, direction_from_points


class Wall(BaseModel):
    """A wall segment defined by its plan centerline, thickness and height (meters)."""
    id: str = ""
    start: Point2D
    end: Point2D
    thickness: float = Field(default=0.2, gt=0)
    height: float = Field(default=3.0, gt=0)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Vector2D:
        """Unit vector from start to end (zero for a degenerate wall)."""
        return direction_from_points(self.start, self.end).normalized()

    @property
    def normal(self) -> Vector2D:
        """Unit normal to the left of the centerline."""
        return self.direction.perpendicular()

    def is_degenerate(self, eps: float) -> bool:
        return self.length < eps


class FootprintOverlap(BaseModel):
    """Plan-view overlap between two wall footprints (wall_a < wall_b)."""
    wall_a: int
    wall_b: int
    polygon: list[Point2D]

    def other(self, wall_index: int) -> int:
        return self.wall_b if wall_index == self.wall_a else self.wall_a


class FaceOcclusion(BaseModel):
    """Part of a vertical face covered by another wall, along the face width axis."""
    other_index: int
    start: float
    end: float
    other_height: float
