"""Rule registry: stores and orders diagnostic rules."""

from __future__ import annotations
from typing import TYPE_CHECKING

from glazing.models.parameters import DiagnosticsConfig
from glazing.rules.base import DiagnosticRule

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


class RuleRegistry:
    """
    Central registry for all diagnostic rules.

    Rules are registered at startup. For each design, the registry
    returns the applicable rules sorted by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, DiagnosticRule] = {}

    def register(self, rule: DiagnosticRule) -> None:
        """Register a diagnostic rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> DiagnosticRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[DiagnosticRule]:
        """Return all registered rules in priority order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(
        self,
        design: SecondaryGlazingDesign,
        config: DiagnosticsConfig | None = None,
    ) -> list[DiagnosticRule]:
        """
        Return rules that apply to the given design, sorted by priority.

        Respects DiagnosticsConfig.enabled_rules and disabled_rules.
        """
        if config is None:
            config = DiagnosticsConfig()
        candidates = self.list_rules()

        # If enabled_rules is specified, only use those
        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        # Remove explicitly disabled rules
        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        return [r for r in candidates if r.applies(design)]


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard diagnostic rules."""
    from glazing.rules.layout.run import (
        SurveyConsistencyRule, EgressRule, OpeningAlignmentRule,
        JambThicknessRule, CasementFitRule, LinerDepthRule,
    )
    from glazing.rules.glass.fit import (
        ImpingementRule, GlassThicknessRule, GlassFitRule, BeddingRule, RebateRule,
    )
    from glazing.rules.hardware.fittings import (
        StopProfileRule, DepthRule, FlyscreenStopRule, HingeRule,
    )

    registry = RuleRegistry()
    for rule in (
        SurveyConsistencyRule(), EgressRule(), OpeningAlignmentRule(),
        JambThicknessRule(), ImpingementRule(), GlassThicknessRule(),
        CasementFitRule(), LinerDepthRule(), GlassFitRule(), BeddingRule(),
        RebateRule(), StopProfileRule(), DepthRule(), FlyscreenStopRule(),
        HingeRule(),
    ):
        registry.register(rule)
    return registry
