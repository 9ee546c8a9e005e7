"""Side segmentation: vertical faces split around crossing walls.

Every other wall whose footprint covers part of a face's base line occludes
that interval. Walls as tall as this one cut the face into separate regions;
shorter ones leave a notch up from the floor.
"""

from __future__ import annotations
import logging

from wallgeom.rules.base import FaceRule
from wallgeom.models import EngineContext, FaceFrame, FaceType, PolygonWithHoles
from wallgeom.geometry.segmenter import occlusion_intervals, segment_face

logger = logging.getLogger(__name__)


class SideSegmentationRule(FaceRule):
    """Front, back and end caps, minus the parts hidden by other walls."""

    priority = 50

    def get_id(self) -> str:
        return "face.side_segmentation"

    def get_name(self) -> str:
        return "Side Segmentation"

    def applies(self, face_type: FaceType, context: EngineContext) -> bool:
        return not face_type.is_horizontal

    def generate(
        self, context: EngineContext, wall_index: int, frame: FaceFrame,
    ) -> list[PolygonWithHoles]:
        wall = context.walls[wall_index]
        indices = [
            k for k in range(len(context.walls))
            if k != wall_index and context.footprints[k]
        ]
        occlusions = occlusion_intervals(
            wall,
            frame.face_type,
            [context.walls[k] for k in indices],
            context.eps,
            indices=indices,
            footprints=[context.footprints[k] for k in indices],
        )
        if occlusions:
            logger.debug(
                "Wall %d %s face occluded by walls %s",
                wall_index, frame.face_type.value, [o.other_index for o in occlusions],
            )
        return segment_face(frame.width, frame.height, occlusions, context.eps)
