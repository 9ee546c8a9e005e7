"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from wallgeom.models import (
    Tolerances, EngineConfig, WallFaceSet, WallSolid, OutlineGroup, Point3D,
)
from wallgeom.models.geometry import Point2D


class WallInput(BaseModel):
    """Wall as sent from the frontend."""
    id: str = ""
    start: Point2D
    end: Point2D
    thickness: float = Field(default=0.2, gt=0)
    height: float = Field(default=3.0, gt=0)


class FacesRequest(BaseModel):
    """Request body for the /faces endpoint."""
    walls: list[WallInput]
    tolerances: Tolerances = Tolerances()
    config: EngineConfig = EngineConfig()


class FacesResponse(BaseModel):
    faces: WallFaceSet
    wall_count: int


class SolidsRequest(BaseModel):
    """Request body for the /solids endpoint (always the truncation approximation)."""
    walls: list[WallInput]
    tolerances: Tolerances = Tolerances()
    config: EngineConfig = EngineConfig()


class SolidsResponse(BaseModel):
    solids: list[WallSolid]
    approximated: int


class OutlinesRequest(BaseModel):
    """Triangle soup: each triangle is three world-space points."""
    triangles: list[tuple[Point3D, Point3D, Point3D]]
    tolerances: Tolerances = Tolerances()


class OutlinesResponse(BaseModel):
    groups: list[OutlineGroup]
    approximated: int


class PlanOutlineRequest(BaseModel):
    walls: list[WallInput]


class PlanOutlineResponse(BaseModel):
    points: list[Point2D]


class RuleInfo(BaseModel):
    id: str
    name: str
    priority: int
