"""High-level design service: facade for the API layer."""

from __future__ import annotations
import logging

from glazing.config import settings
from glazing.models import (
    SecondaryGlazingDesign, DesignReport, DiagnosticsConfig,
    CutList, OutlineSet, Diagram, ResolvedOpening,
)
from glazing.core.diagnostics import DiagnosticsRunner
from glazing.core.registry import RuleRegistry, create_default_registry
from glazing.core.resolver import OpeningResolver

logger = logging.getLogger(__name__)


class DesignService:
    """Resolves, reports and draws designs on behalf of callers."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.diagnostics = DiagnosticsRunner(self.registry)
        self.resolver = OpeningResolver()

    def report(
        self,
        design: SecondaryGlazingDesign,
        apply_resolution: bool | None = None,
        config: DiagnosticsConfig | None = None,
    ) -> DesignReport:
        if apply_resolution is None:
            apply_resolution = settings.auto_apply_resolution
        if apply_resolution:
            self.resolver.apply(design)

        report = DesignReport.from_design(design, self.diagnostics.run(design, config))
        logger.info(
            "Design: %d casement(s) at %.1f mm, %d part line(s), %d warning(s)",
            design.casement_count, design.casement_width,
            len(report.parts), len(report.diagnostics),
        )
        return report

    def resolve(self, design: SecondaryGlazingDesign) -> ResolvedOpening:
        return self.resolver.resolve(design)

    def cut_list(self, design: SecondaryGlazingDesign) -> CutList:
        return CutList(parts=design.parts)

    def outlines(self, design: SecondaryGlazingDesign) -> OutlineSet:
        return design.outlines

    def diagram(self, design: SecondaryGlazingDesign) -> Diagram:
        return design.diagram()

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
