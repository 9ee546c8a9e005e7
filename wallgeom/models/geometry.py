"""Geometric primitives and tolerance helpers used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class GeometryError(ValueError):
    """Raised for malformed geometry input (a programmer error, not a runtime condition)."""


class Point2D(BaseModel):
    """Point on the plan (x to the right, y up the drawing)."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        return Point2D(x=self.x + direction.x * distance, y=self.y + direction.y * distance)

    def __add__(self, other: Point2D | Vector2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Vector2D:
        return Vector2D(x=self.x - other.x, y=self.y - other.y)


class Vector2D(BaseModel):
    """2D vector for direction calculations on the plan."""
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-12:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.y, y=self.x)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle_to(self, other: Vector2D) -> float:
        """Angle between two vectors in radians."""
        d = self.dot(other) / (self.length() * other.length() + 1e-12)
        d = max(-1.0, min(1.0, d))
        return math.acos(d)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, y=self.y * scalar)

    def __neg__(self) -> Vector2D:
        return Vector2D(x=-self.x, y=-self.y)


class Point3D(BaseModel):
    """Point in world space (Y up)."""
    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return (self - other).length()

    def lerp(self, other: Point3D, t: float) -> Point3D:
        return Point3D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def as_vector(self) -> Vector3D:
        return Vector3D(x=self.x, y=self.y, z=self.z)

    def __add__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Vector3D:
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)


class Vector3D(BaseModel):
    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-12:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)

    def __neg__(self) -> Vector3D:
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)


def plan_to_world(point: Point2D, elevation: float = 0.0) -> Point3D:
    """Map a plan point at the given elevation into world space.

    The plan is the world X-Z floor with plan y running along world -Z, so a
    counter-clockwise plan polygon faces +Y when viewed from above.
    """
    return Point3D(x=point.x, y=elevation, z=-point.y)


def cross2d(o: Point2D, a: Point2D, b: Point2D) -> float:
    """Cross product of (a - o) and (b - o); positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def signed_area(points: list[Point2D]) -> float:
    """Shoelace area, positive for counter-clockwise rings."""
    n = len(points)
    a = 0.0
    for i in range(n):
        j = (i + 1) % n
        a += points[i].x * points[j].y - points[j].x * points[i].y
    return a / 2


def polygon_area(points: list[Point2D]) -> float:
    return abs(signed_area(points))


def ensure_ccw(points: list[Point2D]) -> list[Point2D]:
    if signed_area(points) < 0:
        return list(reversed(points))
    return list(points)


def bounding_box(points: list[Point2D]) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y)."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def boxes_overlap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
    eps: float,
) -> bool:
    """Strict AABB overlap; boxes that only touch within eps do not overlap."""
    return (
        a[0] < b[2] - eps and b[0] < a[2] - eps
        and a[1] < b[3] - eps and b[1] < a[3] - eps
    )


def points_coincide(p: Point2D, q: Point2D, eps: float) -> bool:
    return p.distance_to(q) < eps


def quantize(value: float, precision: float) -> int:
    """Fixed-point key for a coordinate, rounding half up."""
    return math.floor(value / precision + 0.5)
