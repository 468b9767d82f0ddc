"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from glazing.models import CutList, Diagram, DesignReport, OutlineSet, ResolvedOpening
from glazing.services.design_service import DesignService
from glazing.api.schemas import DesignRequest, RuleInfo

router = APIRouter()

# Shared service instance
_service = DesignService()


@router.post("/design", response_model=DesignReport)
async def design_report(request: DesignRequest) -> DesignReport:
    """Full report: inputs, derived dimensions, cut list and diagnostics."""
    return _service.report(request.design, request.apply_resolution, request.diagnostics)


@router.post("/resolve", response_model=ResolvedOpening)
async def resolve_opening(request: DesignRequest) -> ResolvedOpening:
    """Suggested secondary opening position; the design is left unchanged."""
    return _service.resolve(request.design)


@router.post("/parts", response_model=CutList)
async def cut_list(request: DesignRequest) -> CutList:
    return _service.cut_list(request.design)


@router.post("/outlines", response_model=OutlineSet)
async def outlines(request: DesignRequest) -> OutlineSet:
    return _service.outlines(request.design)


@router.post("/diagram", response_model=Diagram)
async def diagram(request: DesignRequest) -> Diagram:
    return _service.diagram(request.design)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available diagnostic rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
