"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from wallgeom.models import Wall, TriangleMesh
from wallgeom.services.face_service import FaceService
from wallgeom.api.schemas import (
    WallInput, FacesRequest, FacesResponse, SolidsRequest, SolidsResponse,
    OutlinesRequest, OutlinesResponse, PlanOutlineRequest, PlanOutlineResponse,
    RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = FaceService()


def _to_walls(inputs: list[WallInput]) -> list[Wall]:
    return [
        Wall(id=w.id, start=w.start, end=w.end, thickness=w.thickness, height=w.height)
        for w in inputs
    ]


@router.post("/faces", response_model=FacesResponse)
async def generate_faces(request: FacesRequest) -> FacesResponse:
    """Generate the face regions of every wall."""
    walls = _to_walls(request.walls)
    faces = _service.generate(walls, request.tolerances, request.config)
    return FacesResponse(faces=faces, wall_count=len(walls))


@router.post("/solids", response_model=SolidsResponse)
async def build_solids(request: SolidsRequest) -> SolidsResponse:
    """Closed wall solids; crossed walls are truncated approximations."""
    solids = _service.build_solids(
        _to_walls(request.walls), tolerances=request.tolerances, config=request.config,
    )
    return SolidsResponse(solids=solids, approximated=sum(1 for s in solids if s.approximated))


@router.post("/outlines", response_model=OutlinesResponse)
async def extract_outlines(request: OutlinesRequest) -> OutlinesResponse:
    """Planar outlines of a triangle mesh."""
    groups = _service.extract_outlines(
        TriangleMesh(triangles=request.triangles), request.tolerances,
    )
    return OutlinesResponse(groups=groups, approximated=sum(1 for g in groups if not g.is_exact))


@router.post("/plan-outline", response_model=PlanOutlineResponse)
async def plan_outline(request: PlanOutlineRequest) -> PlanOutlineResponse:
    """Convex outline of the whole plan."""
    return PlanOutlineResponse(points=_service.plan_outline(_to_walls(request.walls)))


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available face rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
