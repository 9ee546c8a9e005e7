"""Rule registry: stores face rules and picks one per face type."""

from __future__ import annotations

from wallgeom.models import EngineContext, FaceType
from wallgeom.rules.base import FaceRule


class RuleRegistry:
    """
    Central registry for all face rules.

    Rules are registered at startup. During generation the registry hands
    out, for each face type, the preferred rule that is enabled and applies.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FaceRule] = {}

    def register(self, rule: FaceRule) -> None:
        """Register a face rule (replacing any rule with the same id)."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FaceRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FaceRule]:
        """Return all registered rules, preferred first."""
        return sorted(self._rules.values(), key=lambda r: (r.priority, r.get_id()))

    def enabled_rules(self, context: EngineContext) -> list[FaceRule]:
        """
        Registered rules allowed by the config, sorted by priority.

        Respects EngineConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = self.list_rules()

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        return candidates

    def rule_for(self, face_type: FaceType, context: EngineContext) -> FaceRule | None:
        """The first enabled rule that applies to ``face_type``, or None."""
        for rule in self.enabled_rules(context):
            if rule.applies(face_type, context):
                return rule
        return None


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard face rules."""
    from wallgeom.rules.faces.penetration_holes import PenetrationHolesRule
    from wallgeom.rules.faces.plain import PlainFaceRule
    from wallgeom.rules.faces.side_segmentation import SideSegmentationRule

    registry = RuleRegistry()
    registry.register(SideSegmentationRule())
    registry.register(PenetrationHolesRule())
    registry.register(PlainFaceRule())
    return registry
