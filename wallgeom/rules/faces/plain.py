"""Plain face: the full face rectangle, ignoring every other wall."""

from __future__ import annotations

from wallgeom.rules.base import FaceRule
from wallgeom.models import EngineContext, FaceFrame, FaceType, PolygonWithHoles, Point2D


class PlainFaceRule(FaceRule):
    """Fallback for any face type when the specialised rules are disabled."""

    priority = 1000

    def get_id(self) -> str:
        return "face.plain"

    def get_name(self) -> str:
        return "Plain Face"

    def applies(self, face_type: FaceType, context: EngineContext) -> bool:
        return True

    def generate(
        self, context: EngineContext, wall_index: int, frame: FaceFrame,
    ) -> list[PolygonWithHoles]:
        if frame.width < context.eps or frame.height < context.eps:
            return []
        return [PolygonWithHoles(outer=[
            Point2D(x=0.0, y=0.0),
            Point2D(x=frame.width, y=0.0),
            Point2D(x=frame.width, y=frame.height),
            Point2D(x=0.0, y=frame.height),
        ])]
