"""Triangle meshes and closed solids exchanged with the mesh/boolean collaborators."""

from __future__ import annotations
from collections import Counter
from pydantic import BaseModel

from .geometry import Point3D


Triangle = tuple[Point3D, Point3D, Point3D]


class TriangleMesh(BaseModel):
    """Triangle soup, as produced by an external mesh builder."""
    triangles: list[Triangle]


class MeshEdge(BaseModel):
    """Undirected mesh edge with the number of triangles that use it."""
    v1: Point3D
    v2: Point3D
    usage_count: int = 0


class Solid(BaseModel):
    """
    Indexed triangle solid.

    Faces are wound counter-clockwise when seen from outside, so a closed
    solid has a positive signed volume.
    """
    vertices: list[Point3D]
    faces: list[tuple[int, int, int]]

    def to_mesh(self) -> TriangleMesh:
        v = self.vertices
        return TriangleMesh(triangles=[(v[a], v[b], v[c]) for a, b, c in self.faces])

    def signed_volume(self) -> float:
        total = 0.0
        for a, b, c in self.faces:
            p0 = self.vertices[a].as_vector()
            p1 = self.vertices[b].as_vector()
            p2 = self.vertices[c].as_vector()
            total += p0.dot(p1.cross(p2))
        return total / 6

    def edge_usage(self) -> Counter[tuple[int, int]]:
        """Directed edge counts."""
        counts: Counter[tuple[int, int]] = Counter()
        for a, b, c in self.faces:
            counts[(a, b)] += 1
            counts[(b, c)] += 1
            counts[(c, a)] += 1
        return counts

    def is_closed_manifold(self) -> bool:
        """Every directed edge is used once and paired with its reverse."""
        usage = self.edge_usage()
        return all(n == 1 and usage.get((j, i)) == 1 for (i, j), n in usage.items())


class WallSolid(BaseModel):
    """A wall's 3D solid, flagged when it came from the truncation approximator."""
    wall_index: int
    wall_id: str = ""
    solid: Solid
    approximated: bool = False
