"""Tolerances and engine configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .faces import FaceType


class Tolerances(BaseModel):
    """Numeric tolerances shared by every component of the engine."""
    epsilon: float = Field(default=1e-3, gt=0)             # Length tolerance (1mm)
    normal_similarity: float = Field(default=0.99, gt=0, lt=1)  # |n1 . n2| for "same plane"
    quantization: float = Field(default=1e-4, gt=0)        # Edge key precision (0.1mm)
    min_triangle_area: float = Field(default=1e-6, ge=0)   # Skip slivers below this (m^2)


class EngineConfig(BaseModel):
    """Controls which faces and rules are generated."""
    faces: list[FaceType] = Field(default_factory=lambda: list(FaceType))
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
    detect_edge_crossings: bool = True   # Also catch overlaps with no vertex inside
    truncation_ratio: float = Field(default=0.4, gt=0, lt=0.5)  # Fallback bite, share of length
