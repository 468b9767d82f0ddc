"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from glazing.models import DiagnosticsConfig, SecondaryGlazingDesign


class DesignRequest(BaseModel):
    """A design as entered in the form, survey included."""
    design: SecondaryGlazingDesign = Field(default_factory=SecondaryGlazingDesign)
    apply_resolution: bool | None = None    # None = use the server setting
    diagnostics: DiagnosticsConfig = Field(default_factory=DiagnosticsConfig)


class RuleInfo(BaseModel):
    id: str
    name: str
