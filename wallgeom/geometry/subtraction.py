"""Wall solids, with an approximate stand-in for boolean subtraction.

An exact boolean evaluator is an optional collaborator. Without one (or when
it fails) each wall that crosses another is truncated instead: the end nearer
each crossing loses a bite of ``ratio * length`` over the back half of its
thickness. The result is a closed L- or T-shaped prism, flagged as
approximated.
"""

from __future__ import annotations
import logging
from typing import Protocol

from wallgeom.models import (
    Wall, Solid, WallSolid, Point2D, Point3D, FootprintOverlap, plan_to_world,
)
from wallgeom.models.geometry import ensure_ccw
from wallgeom.geometry.footprint import build_footprint

logger = logging.getLogger(__name__)


class BooleanEvaluationError(RuntimeError):
    """Raised by (or on behalf of) an evaluator that could not subtract."""


class BooleanEvaluator(Protocol):
    """Exact mesh boolean collaborator."""

    def subtract(self, a: Solid, b: Solid) -> Solid | None:
        """Return ``a`` minus ``b`` as a closed solid, or None on failure."""
        ...


def extrude_profile(profile: list[Point2D], height: float, kernel: Point2D | None = None) -> Solid:
    """
    Prism over a plan profile, from the floor up to ``height``.

    Caps are fanned from ``kernel``, which must see every profile vertex
    (any interior point of a convex profile does; defaults to the vertex mean).
    """
    ring = ensure_ccw(profile)
    n = len(ring)
    if kernel is None:
        kernel = Point2D(x=sum(p.x for p in ring) / n, y=sum(p.y for p in ring) / n)

    vertices: list[Point3D] = [plan_to_world(p, 0.0) for p in ring]
    vertices += [plan_to_world(p, height) for p in ring]
    vertices += [plan_to_world(kernel, 0.0), plan_to_world(kernel, height)]
    bottom_center, top_center = 2 * n, 2 * n + 1

    faces: list[tuple[int, int, int]] = []
    for i in range(n):
        j = (i + 1) % n
        faces.append((bottom_center, j, i))
        faces.append((top_center, n + i, n + j))
        faces.append((i, j, n + j))
        faces.append((i, n + j, n + i))
    return Solid(vertices=vertices, faces=faces)


def wall_solid(wall: Wall, eps: float = 1e-3) -> Solid | None:
    """Unmodified box of a wall; None for a degenerate wall."""
    footprint = build_footprint(wall, eps)
    if not footprint:
        return None
    return extrude_profile(footprint, wall.height)


def truncation_profile(
    wall: Wall,
    crossings: list[list[Point2D]],
    ratio: float,
) -> tuple[list[Point2D], Point2D]:
    """Plan profile of the truncated wall and a kernel point for its caps."""
    length = wall.length
    d, n = wall.direction, wall.normal
    half = wall.thickness / 2
    cut = ratio * length

    bite_start = bite_end = False
    for polygon in crossings:
        cx = sum(p.x for p in polygon) / len(polygon)
        cy = sum(p.y for p in polygon) / len(polygon)
        along = (Point2D(x=cx, y=cy) - wall.start).dot(d)
        if along < length / 2:
            bite_start = True
        else:
            bite_end = True

    # (along, across) in the wall frame, counter-clockwise
    local: list[tuple[float, float]] = []
    if bite_start:
        local += [(0.0, 0.0), (cut, 0.0), (cut, -half)]
    else:
        local.append((0.0, -half))
    if bite_end:
        local += [(length - cut, -half), (length - cut, 0.0), (length, 0.0)]
    else:
        local.append((length, -half))
    local += [(length, half), (0.0, half)]

    def to_plan(u: float, v: float) -> Point2D:
        return wall.start.offset(d, u).offset(n, v)

    return [to_plan(u, v) for u, v in local], to_plan(length / 2, half / 2)


def truncated_wall_solid(wall: Wall, crossings: list[list[Point2D]], ratio: float) -> Solid:
    profile, kernel = truncation_profile(wall, crossings, ratio)
    return extrude_profile(profile, wall.height, kernel)


def _exact_solid(
    index: int,
    walls: list[Wall],
    partners: list[int],
    evaluator: BooleanEvaluator,
    eps: float,
) -> Solid:
    result = wall_solid(walls[index], eps)
    if result is None:
        raise BooleanEvaluationError(f"wall {index} is degenerate")
    for other in partners:
        cutter = wall_solid(walls[other], eps)
        if cutter is None:
            continue
        difference = evaluator.subtract(result, cutter)
        if difference is None:
            raise BooleanEvaluationError(f"wall {index}: subtracting wall {other} failed")
        result = difference
    return result


def subtract_walls(
    walls: list[Wall],
    overlaps: list[FootprintOverlap],
    evaluator: BooleanEvaluator | None = None,
    ratio: float = 0.4,
    eps: float = 1e-3,
) -> list[WallSolid]:
    """
    One solid per non-degenerate wall.

    With an evaluator, each wall has every earlier overlapping wall subtracted
    from it, so a crossing volume belongs to exactly one wall. Walls whose
    subtraction fails, or every crossed wall when there is no evaluator, get
    the truncated approximation with ``approximated=True``.
    """
    solids: list[WallSolid] = []
    for i, wall in enumerate(walls):
        box = wall_solid(wall, eps)
        if box is None:
            logger.debug("Wall %d is degenerate; no solid", i)
            continue

        mine = [o for o in overlaps if i in (o.wall_a, o.wall_b)]
        if not mine:
            solids.append(WallSolid(wall_index=i, wall_id=wall.id, solid=box))
            continue

        if evaluator is not None:
            earlier = sorted(o.other(i) for o in mine if o.other(i) < i)
            try:
                solid = _exact_solid(i, walls, earlier, evaluator, eps)
                solids.append(WallSolid(wall_index=i, wall_id=wall.id, solid=solid))
                continue
            except BooleanEvaluationError as exc:
                logger.warning("Boolean subtraction failed (%s); truncating wall %d instead", exc, i)

        solid = truncated_wall_solid(wall, [o.polygon for o in mine], ratio)
        solids.append(WallSolid(wall_index=i, wall_id=wall.id, solid=solid, approximated=True))

    logger.info(
        "Built %d wall solid(s), %d approximated",
        len(solids), sum(1 for s in solids if s.approximated),
    )
    return solids
