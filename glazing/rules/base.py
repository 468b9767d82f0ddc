"""Abstract base class for all diagnostic rules.

Every check in the system implements this interface. Rules are:
- Independent: each reads the resolved design and nothing else
- Advisory: a rule returns warnings, it never raises or blocks
- Ordered: the registry runs them by priority so the report reads consistently
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from glazing.models.drawing import fmt

if TYPE_CHECKING:
    from glazing.models.design import SecondaryGlazingDesign


def mm(n: float) -> str:
    """Format a length the way the warnings quote it (no trailing zeros)."""
    return fmt(n)


class DiagnosticRule(ABC):
    """
    Base class for all diagnostic rules.

    Subclasses implement `check()`, and `applies()` where a rule only
    makes sense for some designs. The runner asks the registry for the
    applicable rules in priority order and concatenates their warnings.
    """

    # Lower priority = reported first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'glass.rebate')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Rebate Remainders')."""
        ...

    def applies(self, design: SecondaryGlazingDesign) -> bool:
        """Return True if this rule should run for the given design."""
        return True

    @abstractmethod
    def check(self, design: SecondaryGlazingDesign) -> list[str]:
        """Return the warnings this rule raises for the design, if any."""
        ...
