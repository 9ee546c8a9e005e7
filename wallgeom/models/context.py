"""Engine context: accumulates state during one face generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Wall, FootprintOverlap
from .geometry import Point2D
from .parameters import Tolerances, EngineConfig


class EngineContext(BaseModel):
    """
    Holds all state during a single generation pass.

    The analyzer adds derived data (footprints, overlaps).
    Rules read it to build faces.
    Nothing here outlives the pass; every edit recomputes from the walls.
    """
    # Input
    walls: list[Wall]
    tolerances: Tolerances = Field(default_factory=Tolerances)
    config: EngineConfig = Field(default_factory=EngineConfig)

    # Analysis results (populated by the analyzer)
    footprints: list[list[Point2D]] = []
    overlaps: list[FootprintOverlap] = []

    @property
    def eps(self) -> float:
        return self.tolerances.epsilon

    def overlaps_for(self, wall_index: int) -> list[FootprintOverlap]:
        return [o for o in self.overlaps if wall_index in (o.wall_a, o.wall_b)]
