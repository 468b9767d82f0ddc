"""Diagnostics configuration."""

from __future__ import annotations
from pydantic import BaseModel


class DiagnosticsConfig(BaseModel):
    """Controls which diagnostic rules are run."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
