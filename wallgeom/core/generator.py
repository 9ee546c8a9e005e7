"""Main face generator: orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from wallgeom.models import (
    Wall, Face, WallFaceSet, Tolerances, EngineConfig, EngineContext,
)
from wallgeom.core.registry import RuleRegistry
from wallgeom.core.analyzer import WallAnalyzer
from wallgeom.geometry.frames import face_frame

logger = logging.getLogger(__name__)


class FaceGenerator:
    """
    Stateless face generator.

    Takes walls + tolerances, runs analysis, lets the registry pick a rule for
    each configured face type, and returns the complete face set.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = WallAnalyzer()

    def generate(
        self,
        walls: list[Wall],
        tolerances: Tolerances | None = None,
        config: EngineConfig | None = None,
    ) -> WallFaceSet:
        context = EngineContext(
            walls=walls,
            tolerances=tolerances or Tolerances(),
            config=config or EngineConfig(),
        )

        # Analysis phase: footprints and overlaps
        self.analyzer.analyze(context)

        # Rule choice depends only on the face type
        rules = {ft: self.registry.rule_for(ft, context) for ft in context.config.faces}
        for ft, rule in rules.items():
            if rule is None:
                logger.warning("No enabled rule builds %s faces; skipping them", ft.value)

        faces: list[Face] = []
        skipped: list[int] = []
        for i, wall in enumerate(walls):
            if not context.footprints[i]:
                logger.debug("Skipping zero-length wall %d (%r)", i, wall.id)
                skipped.append(i)
                continue
            for ft, rule in rules.items():
                if rule is None:
                    continue
                frame = face_frame(wall, ft)
                regions = rule.generate(context, i, frame)
                if not regions:
                    continue
                faces.append(Face(
                    wall_index=i, wall_id=wall.id, face_type=ft,
                    frame=frame, regions=regions,
                ))

        result = WallFaceSet(faces=faces, skipped_walls=skipped)
        logger.info(
            "Generated %d face(s) with %d region(s) for %d wall(s); %d overlap(s), %d skipped",
            result.stats.faces, result.stats.regions, len(walls),
            len(context.overlaps), len(skipped),
        )
        return result
