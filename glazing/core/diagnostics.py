"""Diagnostics runner: collects the warnings of every applicable rule."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from glazing.core.registry import RuleRegistry, create_default_registry
from glazing.models.parameters import DiagnosticsConfig

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign

logger = logging.getLogger(__name__)


class DiagnosticsRunner:
    """
    Stateless diagnostics pass.

    Reads a design, runs the applicable rules in priority order and
    returns their warnings as one ordered list. Never raises on a bad design.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def run(
        self,
        design: SecondaryGlazingDesign,
        config: DiagnosticsConfig | None = None,
    ) -> list[str]:
        warnings: list[str] = []
        for rule in self.registry.get_applicable_rules(design, config):
            found = rule.check(design)
            if found:
                logger.debug("%s: %d warning(s)", rule.get_id(), len(found))
            warnings.extend(found)
        return warnings


_default_runner: DiagnosticsRunner | None = None


def run_diagnostics(
    design: SecondaryGlazingDesign,
    config: DiagnosticsConfig | None = None,
) -> list[str]:
    """Run the standard rules against a design."""
    global _default_runner
    if _default_runner is None:
        _default_runner = DiagnosticsRunner()
    return _default_runner.run(design, config)
