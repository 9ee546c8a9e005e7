"""Outline extraction from a triangulated surface.

Pipeline per mesh:
1. Group coplanar triangles under a quantized (normal, plane offset) key.
2. Split each group into islands of triangles connected through shared vertices.
3. Count edge usage per island; edges used once are boundary edges.
4. Project boundary edges into the island's plane basis.
5. Chain them into closed loops; loops inside a larger loop become its holes.
6. If any chain stays open, fall back to the convex hull of the island's
   vertices and tag the result as a hull so callers know it is approximate.

Grouping by hashed key rather than by scanning for the first similar group
makes the result independent of triangle order. Triangles whose normal or
offset sits right on a bucket boundary can still land in a neighbouring
bucket.
"""

from __future__ import annotations
import logging
from collections import defaultdict

from wallgeom.models import (
    TriangleMesh, MeshEdge, Point2D, Point3D, Vector3D, Tolerances,
    PlaneBasis, ClosedOutline, HullOutline, OutlineGroup,
)
from wallgeom.models.geometry import quantize, signed_area
from wallgeom.models.mesh import Triangle
from wallgeom.geometry.clipper import distance_to_segment, point_in_polygon
from wallgeom.geometry.hull import convex_hull

logger = logging.getLogger(__name__)

VertexKey = tuple[int, int, int]
GroupKey = tuple[int, int, int, int]


def triangle_normal(tri: Triangle) -> Vector3D:
    """Unnormalized normal; its length is twice the triangle area."""
    a, b, c = tri
    return (b - a).cross(c - a)


def canonical_normal(n: Vector3D, threshold: float) -> Vector3D:
    """Flip so the first component above ``threshold`` is positive; n and -n share a plane."""
    for component in (n.x, n.y, n.z):
        if abs(component) > threshold:
            return n if component > 0 else -n
    return n


def vertex_key(p: Point3D, precision: float) -> VertexKey:
    return quantize(p.x, precision), quantize(p.y, precision), quantize(p.z, precision)


def edge_key(a: Point3D, b: Point3D, precision: float) -> tuple[VertexKey, VertexKey]:
    """Undirected key from quantized endpoints."""
    ka, kb = vertex_key(a, precision), vertex_key(b, precision)
    return (ka, kb) if ka <= kb else (kb, ka)


def plane_basis(normal: Vector3D, offset: float) -> PlaneBasis:
    """Orthonormal basis with ``normal`` as its third axis."""
    n = normal.normalized()
    up = Vector3D(x=0.0, y=1.0, z=0.0)
    if abs(n.dot(up)) > 0.9:
        up = Vector3D(x=1.0, y=0.0, z=0.0)
    x_axis = up.cross(n).normalized()
    y_axis = n.cross(x_axis).normalized()
    return PlaneBasis(normal=n, x_axis=x_axis, y_axis=y_axis, offset=offset)


def group_coplanar(mesh: TriangleMesh, tol: Tolerances) -> dict[GroupKey, list[Triangle]]:
    """Triangles bucketed by quantized canonical normal and signed plane offset."""
    bucket = 1.0 - tol.normal_similarity
    groups: dict[GroupKey, list[Triangle]] = defaultdict(list)
    skipped = 0

    for tri in mesh.triangles:
        raw = triangle_normal(tri)
        if raw.length() / 2 < tol.min_triangle_area:
            skipped += 1
            continue
        n = canonical_normal(raw.normalized(), bucket / 2)
        a, b, c = tri
        centroid = Vector3D(
            x=(a.x + b.x + c.x) / 3, y=(a.y + b.y + c.y) / 3, z=(a.z + b.z + c.z) / 3,
        )
        key = (
            quantize(n.x, bucket), quantize(n.y, bucket), quantize(n.z, bucket),
            quantize(n.dot(centroid), tol.epsilon),
        )
        groups[key].append(tri)

    if skipped:
        logger.debug("group_coplanar: skipped %d degenerate triangle(s)", skipped)
    return groups


def count_edges(triangles: list[Triangle], precision: float) -> dict[tuple[VertexKey, VertexKey], MeshEdge]:
    """Edge usage within one group, keyed by quantized endpoints."""
    edges: dict[tuple[VertexKey, VertexKey], MeshEdge] = {}
    for tri in triangles:
        for i in range(3):
            a, b = tri[i], tri[(i + 1) % 3]
            key = edge_key(a, b, precision)
            if key[0] == key[1]:
                continue
            edge = edges.get(key)
            if edge is None:
                v1, v2 = (Point3D(x=k[0] * precision, y=k[1] * precision, z=k[2] * precision) for k in key)
                edge = edges[key] = MeshEdge(v1=v1, v2=v2)
            edge.usage_count += 1
    return edges


def boundary_edges(triangles: list[Triangle], precision: float) -> list[MeshEdge]:
    edges = count_edges(triangles, precision)
    return [edges[k] for k in sorted(edges) if edges[k].usage_count == 1]


def chain_loops(edges: list[tuple[Point2D, Point2D]], eps: float) -> list[list[Point2D]] | None:
    """
    Chain 2D edges into closed loops by shared endpoints.

    Returns None as soon as one chain cannot be closed.
    """
    remaining = list(edges)
    loops: list[list[Point2D]] = []

    while remaining:
        start, end = remaining.pop(0)
        chain = [start, end]
        closed = False
        while True:
            if len(chain) >= 4 and chain[-1].distance_to(chain[0]) < eps:
                chain.pop()
                closed = True
                break
            tip = chain[-1]
            for k, (p, q) in enumerate(remaining):
                if p.distance_to(tip) < eps:
                    chain.append(q)
                    break
                if q.distance_to(tip) < eps:
                    chain.append(p)
                    break
            else:
                break
            remaining.pop(k)
        if not closed:
            return None
        loops.append(chain)
    return loops


def _hull_outline(triangles: list[Triangle], basis: PlaneBasis, tol: Tolerances) -> HullOutline:
    unique: dict[VertexKey, Point3D] = {}
    for tri in triangles:
        for v in tri:
            unique.setdefault(vertex_key(v, tol.quantization), v)
    points = [basis.project(unique[k]) for k in sorted(unique)]
    return HullOutline(points=convex_hull(points, tol.epsilon))


def split_islands(triangles: list[Triangle], precision: float) -> list[list[Triangle]]:
    """Connected components of a group, joined through shared quantized vertices."""
    parent: dict[VertexKey, VertexKey] = {}

    def find(key: VertexKey) -> VertexKey:
        parent.setdefault(key, key)
        while parent[key] != key:
            parent[key] = parent[parent[key]]
            key = parent[key]
        return key

    for tri in triangles:
        keys = [vertex_key(v, precision) for v in tri]
        for other in keys[1:]:
            ra, rb = find(keys[0]), find(other)
            if ra != rb:
                # The smallest key roots each component
                parent[max(ra, rb)] = min(ra, rb)

    islands: dict[VertexKey, list[Triangle]] = defaultdict(list)
    for tri in triangles:
        islands[find(vertex_key(tri[0], precision))].append(tri)
    return [islands[k] for k in sorted(islands)]


def _loop_inside(inner: list[Point2D], outer: list[Point2D], eps: float) -> bool:
    """Every vertex of ``inner`` lies inside ``outer`` or on its boundary."""
    n = len(outer)
    return all(
        point_in_polygon(p, outer)
        or any(distance_to_segment(p, outer[i], outer[(i + 1) % n]) < eps for i in range(n))
        for p in inner
    )


def nest_loops(loops: list[list[Point2D]], eps: float) -> list[ClosedOutline]:
    """
    Outer loops (counter-clockwise) each with the loops they contain as holes
    (clockwise). A loop outside every larger loop starts an outline of its own.
    """
    nested: list[tuple[list[Point2D], list[list[Point2D]]]] = []
    for lp in sorted(loops, key=lambda lp: abs(signed_area(lp)), reverse=True):
        for outer, holes in nested:
            if _loop_inside(lp, outer, eps):
                holes.append(lp if signed_area(lp) < 0 else list(reversed(lp)))
                break
        else:
            nested.append((lp if signed_area(lp) > 0 else list(reversed(lp)), []))
    return [ClosedOutline(loop=outer, holes=holes) for outer, holes in nested]


def extract_island_outlines(
    triangles: list[Triangle],
    tol: Tolerances,
) -> list[OutlineGroup]:
    """Outlines of one connected island of a coplanar group (normally exactly one)."""
    normals = sorted(
        (n.x, n.y, n.z) for n in (
            canonical_normal(triangle_normal(t).normalized(), (1.0 - tol.normal_similarity) / 2)
            for t in triangles
        )
    )
    mean = Vector3D(
        x=sum(n[0] for n in normals), y=sum(n[1] for n in normals), z=sum(n[2] for n in normals),
    ).normalized()
    offsets = sorted(
        mean.dot(Vector3D(x=(a.x + b.x + c.x) / 3, y=(a.y + b.y + c.y) / 3, z=(a.z + b.z + c.z) / 3))
        for a, b, c in triangles
    )
    basis = plane_basis(mean, sum(offsets) / len(offsets))

    edges = boundary_edges(triangles, tol.quantization)
    projected = [(basis.project(e.v1), basis.project(e.v2)) for e in edges]
    loops = chain_loops(projected, tol.epsilon) if projected else None

    if loops is None:
        logger.warning(
            "Outline of %d triangle(s) did not close (%d boundary edges); using convex hull",
            len(triangles), len(edges),
        )
        return [OutlineGroup(
            basis=basis,
            triangle_count=len(triangles),
            boundary_edge_count=len(edges),
            outline=_hull_outline(triangles, basis, tol),
        )]

    outlines = nest_loops(loops, tol.epsilon)
    if len(outlines) > 1:
        logger.debug("Island of %d triangle(s) has %d separate outer loops", len(triangles), len(outlines))
    return [
        OutlineGroup(
            basis=basis,
            triangle_count=len(triangles),
            boundary_edge_count=len(o.loop) + sum(len(h) for h in o.holes),
            outline=o,
        )
        for o in outlines
    ]


def extract_outlines(mesh: TriangleMesh, tolerances: Tolerances | None = None) -> list[OutlineGroup]:
    """One outline per connected island of each coplanar group, ordered by group key."""
    tol = tolerances or Tolerances()
    groups = group_coplanar(mesh, tol)
    result: list[OutlineGroup] = []
    for key in sorted(groups):
        for island in split_islands(groups[key], tol.quantization):
            result.extend(extract_island_outlines(island, tol))
    logger.info(
        "Extracted %d outline(s) from %d coplanar group(s) of %d triangle(s), %d approximated",
        len(result), len(groups), len(mesh.triangles), sum(1 for g in result if not g.is_exact),
    )
    return result
