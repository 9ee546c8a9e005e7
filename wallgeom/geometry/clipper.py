"""2D polygon clipping (Sutherland-Hodgman) and the segment/point tests around it.

Every tolerance here is the caller's shared epsilon; nothing picks its own.
"""

from __future__ import annotations
import math

from wallgeom.models import Point2D, GeometryError
from wallgeom.models.geometry import cross2d, ensure_ccw, polygon_area


def _require_polygon(points: list[Point2D], name: str) -> None:
    if len(points) < 3:
        raise GeometryError(f"{name} needs at least 3 points, got {len(points)}")


def is_inside_edge(point: Point2D, edge_start: Point2D, edge_end: Point2D, eps: float) -> bool:
    """Left of (or on, within eps) the directed edge."""
    dx = edge_end.x - edge_start.x
    dy = edge_end.y - edge_start.y
    ln = math.hypot(dx, dy)
    if ln < eps:
        return True
    return (dx * (point.y - edge_start.y) - dy * (point.x - edge_start.x)) / ln >= -eps


def line_intersection(
    p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D, eps: float,
) -> Point2D | None:
    """Intersection of the infinite lines p1-p2 and p3-p4; None when parallel."""
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < eps:
        return None
    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    return Point2D(x=p1.x + t * (p2.x - p1.x), y=p1.y + t * (p2.y - p1.y))


def segment_intersection(
    p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D, eps: float,
) -> Point2D | None:
    """Intersection of the segments p1-p2 and p3-p4 (endpoints included within eps)."""
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < eps:
        return None
    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    u = -((p1.x - p2.x) * (p1.y - p3.y) - (p1.y - p2.y) * (p1.x - p3.x)) / denom
    len_a = p1.distance_to(p2)
    len_b = p3.distance_to(p4)
    tol_t = eps / len_a if len_a > 0 else 0.0
    tol_u = eps / len_b if len_b > 0 else 0.0
    if -tol_t <= t <= 1 + tol_t and -tol_u <= u <= 1 + tol_u:
        return Point2D(x=p1.x + t * (p2.x - p1.x), y=p1.y + t * (p2.y - p1.y))
    return None


def segments_cross(p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D, eps: float) -> bool:
    """Proper crossing: each segment's endpoints lie strictly on opposite sides of the other."""
    def side(o: Point2D, a: Point2D, b: Point2D) -> int:
        ln = o.distance_to(a)
        if ln < eps:
            return 0
        c = cross2d(o, a, b) / ln
        if c > eps:
            return 1
        if c < -eps:
            return -1
        return 0

    d1 = side(p3, p4, p1)
    d2 = side(p3, p4, p2)
    d3 = side(p1, p2, p3)
    d4 = side(p1, p2, p4)
    return d1 * d2 < 0 and d3 * d4 < 0


def distance_to_segment(point: Point2D, a: Point2D, b: Point2D) -> float:
    ab = b - a
    ln2 = ab.dot(ab)
    if ln2 == 0:
        return point.distance_to(a)
    t = max(0.0, min(1.0, (point - a).dot(ab) / ln2))
    return point.distance_to(a.offset(ab, t))


def point_in_polygon(point: Point2D, polygon: list[Point2D]) -> bool:
    """Ray-casting parity test. Points exactly on the boundary are unspecified."""
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y
        if (yi > point.y) != (yj > point.y):
            x_cross = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def point_strictly_inside(point: Point2D, polygon: list[Point2D], eps: float) -> bool:
    """Inside by parity and farther than eps from every edge."""
    if not point_in_polygon(point, polygon):
        return False
    n = len(polygon)
    return all(
        distance_to_segment(point, polygon[i], polygon[(i + 1) % n]) > eps
        for i in range(n)
    )


def dedupe_ring(points: list[Point2D], eps: float) -> list[Point2D]:
    """Drop consecutive duplicates (including the closing one) and collinear middles."""
    out: list[Point2D] = []
    for p in points:
        if not out or p.distance_to(out[-1]) >= eps:
            out.append(p)
    while len(out) > 1 and out[0].distance_to(out[-1]) < eps:
        out.pop()

    changed = True
    while changed and len(out) >= 3:
        changed = False
        for i in range(len(out)):
            prev = out[i - 1]
            nxt = out[(i + 1) % len(out)]
            ln = prev.distance_to(nxt)
            if ln < eps or abs(cross2d(prev, out[i], nxt)) / ln < eps:
                del out[i]
                changed = True
                break
    return out


def clip_polygon(subject: list[Point2D], clip: list[Point2D], eps: float) -> list[Point2D]:
    """
    Clip ``subject`` against the convex polygon ``clip``.

    Returns the clipped ring (counter-clockwise when the subject is), or []
    when fewer than 3 points survive.
    """
    _require_polygon(subject, "subject polygon")
    _require_polygon(clip, "clip polygon")

    clip = ensure_ccw(clip)
    output = list(subject)

    for i in range(len(clip)):
        if not output:
            break
        edge_start = clip[i]
        edge_end = clip[(i + 1) % len(clip)]

        source = output
        output = []
        prev = source[-1]
        prev_inside = is_inside_edge(prev, edge_start, edge_end, eps)

        for current in source:
            current_inside = is_inside_edge(current, edge_start, edge_end, eps)
            if current_inside != prev_inside:
                crossing = line_intersection(prev, current, edge_start, edge_end, eps)
                if crossing is not None:
                    output.append(crossing)
            if current_inside:
                output.append(current)
            prev, prev_inside = current, current_inside

    output = dedupe_ring(output, eps)
    if len(output) < 3 or polygon_area(output) < eps * eps:
        return []
    return output


def clip_segment(
    a: Point2D, b: Point2D, polygon: list[Point2D], eps: float,
) -> tuple[float, float] | None:
    """
    Part of segment a-b inside the convex polygon, as distances from ``a``.

    Returns None when the covered stretch is shorter than eps.
    """
    _require_polygon(polygon, "clip polygon")
    polygon = ensure_ccw(polygon)
    length = a.distance_to(b)
    if length < eps:
        return None

    d = b - a
    t0, t1 = 0.0, 1.0
    for i in range(len(polygon)):
        e0 = polygon[i]
        e1 = polygon[(i + 1) % len(polygon)]
        edge = e1 - e0
        edge_len = edge.length()
        if edge_len < eps:
            continue
        # Signed distance (left positive) of a + t*d from the edge line: f0 + t*df
        f0 = edge.cross(a - e0) / edge_len
        df = edge.cross(d) / edge_len
        if abs(df) < eps:
            # Parallel within tolerance: all in or all out
            if f0 < -eps:
                return None
            continue
        t_hit = -f0 / df
        if df > 0:
            t0 = max(t0, t_hit)
        else:
            t1 = min(t1, t_hit)
        if t0 > t1:
            return None

    start, end = t0 * length, t1 * length
    if end - start < eps:
        return None
    return start, end
