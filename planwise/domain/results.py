"""Outcome objects for storage operations that may degrade without failing."""
from dataclasses import dataclass, field
from typing import List, Optional

from planwise.domain.Plan import Plan


@dataclass
class SaveResult:
    ok: bool
    plan_id: Optional[int] = None
    error: Optional[str] = None


@dataclass
class PlanListing:
    """Plans that decoded cleanly, plus one warning per row that was skipped."""
    plans: List[Plan] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)
