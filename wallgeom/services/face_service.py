"""High-level wall geometry service: facade for the API layer and library callers."""

from __future__ import annotations

from wallgeom.models import (
    Wall, WallFaceSet, WallSolid, Tolerances, EngineConfig, EngineContext,
    TriangleMesh, OutlineGroup, Point2D,
)
from wallgeom.core.generator import FaceGenerator
from wallgeom.core.registry import RuleRegistry, create_default_registry
from wallgeom.geometry.hull import convex_hull
from wallgeom.geometry.outline import extract_outlines
from wallgeom.geometry.subtraction import BooleanEvaluator, subtract_walls


class FaceService:
    """Fills in defaults and delegates to the generator and geometry passes."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FaceGenerator(self.registry)

    def generate(
        self,
        walls: list[Wall],
        tolerances: Tolerances | None = None,
        config: EngineConfig | None = None,
    ) -> WallFaceSet:
        return self.generator.generate(walls, tolerances, config)

    def extract_outlines(
        self,
        mesh: TriangleMesh,
        tolerances: Tolerances | None = None,
    ) -> list[OutlineGroup]:
        return extract_outlines(mesh, tolerances)

    def build_solids(
        self,
        walls: list[Wall],
        evaluator: BooleanEvaluator | None = None,
        tolerances: Tolerances | None = None,
        config: EngineConfig | None = None,
    ) -> list[WallSolid]:
        context = EngineContext(
            walls=walls,
            tolerances=tolerances or Tolerances(),
            config=config or EngineConfig(),
        )
        self.generator.analyzer.analyze(context)
        return subtract_walls(
            walls,
            context.overlaps,
            evaluator=evaluator,
            ratio=context.config.truncation_ratio,
            eps=context.eps,
        )

    def plan_outline(
        self,
        walls: list[Wall],
        tolerances: Tolerances | None = None,
    ) -> list[Point2D]:
        """Convex hull of every footprint corner, counter-clockwise."""
        context = EngineContext(walls=walls, tolerances=tolerances or Tolerances())
        self.generator.analyzer.analyze(context)
        corners = [p for fp in context.footprints for p in fp]
        return convex_hull(corners, context.eps)

    def list_rules(self) -> list[dict[str, str | int]]:
        return [
            {"id": r.get_id(), "name": r.get_name(), "priority": r.priority}
            for r in self.registry.list_rules()
        ]
