"""Outline results recovered from triangulated surfaces."""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from .geometry import Point2D, Point3D, Vector3D


class PlaneBasis(BaseModel):
    """Orthonormal frame of a coplanar group: points = x*x_axis + y*y_axis + offset*normal."""
    normal: Vector3D
    x_axis: Vector3D
    y_axis: Vector3D
    offset: float

    def project(self, point: Point3D) -> Point2D:
        v = point.as_vector()
        return Point2D(x=v.dot(self.x_axis), y=v.dot(self.y_axis))

    def to_world(self, point: Point2D) -> Point3D:
        v = self.x_axis * point.x + self.y_axis * point.y + self.normal * self.offset
        return Point3D(x=v.x, y=v.y, z=v.z)


class ClosedOutline(BaseModel):
    """Exact boundary: the outer loop plus any inner loops."""
    kind: Literal["closed"] = "closed"
    loop: list[Point2D]
    holes: list[list[Point2D]] = []

    def loops(self) -> list[list[Point2D]]:
        return [self.loop, *self.holes]


class HullOutline(BaseModel):
    """Approximate boundary: convex hull of the group's vertices."""
    kind: Literal["hull"] = "hull"
    points: list[Point2D]

    def loops(self) -> list[list[Point2D]]:
        return [self.points]


Outline = Annotated[Union[ClosedOutline, HullOutline], Field(discriminator="kind")]


class OutlineGroup(BaseModel):
    """Outline of one coplanar triangle group."""
    basis: PlaneBasis
    triangle_count: int
    boundary_edge_count: int
    outline: Outline

    @property
    def is_exact(self) -> bool:
        return self.outline.kind == "closed"

    def loops_to_world(self) -> list[tuple[Point3D, Point3D]]:
        """Outline as 3D line segments, for display."""
        segments: list[tuple[Point3D, Point3D]] = []
        for loop in self.outline.loops():
            pts = [self.basis.to_world(p) for p in loop]
            for i in range(len(pts)):
                segments.append((pts[i], pts[(i + 1) % len(pts)]))
        return segments
