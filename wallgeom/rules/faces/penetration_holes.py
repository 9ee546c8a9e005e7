"""Penetration holes: top and bottom faces with a hole per crossing wall."""

from __future__ import annotations

from wallgeom.rules.base import FaceRule
from wallgeom.models import EngineContext, FaceFrame, FaceType, PolygonWithHoles
from wallgeom.geometry.penetration import horizontal_region


class PenetrationHolesRule(FaceRule):
    """The footprint rectangle, holed where other footprints overlap it."""

    priority = 50

    def get_id(self) -> str:
        return "face.penetration_holes"

    def get_name(self) -> str:
        return "Penetration Holes"

    def applies(self, face_type: FaceType, context: EngineContext) -> bool:
        return face_type.is_horizontal

    def generate(
        self, context: EngineContext, wall_index: int, frame: FaceFrame,
    ) -> list[PolygonWithHoles]:
        holes = [o.polygon for o in context.overlaps_for(wall_index)]
        return [horizontal_region(frame, holes, context.eps)]
