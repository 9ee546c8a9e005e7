"""Abstract base class for all face rules.

A face rule turns one side of one wall into polygon regions. Rules are:
- Self-contained: each knows how to build one kind of face
- Selectable: the registry picks the first applicable enabled rule by priority
- Replaceable: disabling a rule lets a lower-priority one take the face
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from wallgeom.models import EngineContext, FaceFrame, FaceType, PolygonWithHoles


class FaceRule(ABC):
    """
    Base class for all face rules.

    Subclasses implement `applies()` and `generate()`.
    The generator asks the registry for the rule of each face type and calls
    `generate()` once per wall.
    """

    # Lower priority = preferred. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'face.side_segmentation')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Side Segmentation')."""
        ...

    @abstractmethod
    def applies(self, face_type: FaceType, context: EngineContext) -> bool:
        """Return True if this rule can build faces of the given type."""
        ...

    @abstractmethod
    def generate(
        self, context: EngineContext, wall_index: int, frame: FaceFrame,
    ) -> list[PolygonWithHoles]:
        """
        Build the regions of one wall face, in the face's local frame.

        The context provides walls, tolerances, footprints and overlaps from
        the analysis phase.
        """
        ...
