# prioritykit/services/scoring/interfaces.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field


class ScoringFramework(str, Enum):
    """Supported scoring framework identifiers."""
    RICE = "RICE"
    WSJF = "WSJF"


class ScoreInputs(BaseModel):
    """Numeric inputs for scoring engines.

    A single container for all framework inputs; engines only read the subset
    they require. ``None`` means "not provided yet" and is never coerced to a
    default here.
    """
    # RICE-style inputs
    reach: Optional[float] = None
    impact: Optional[float] = None
    confidence: Optional[float] = None
    effort: Optional[float] = None

    # WSJF-style inputs
    business_value: Optional[float] = None
    time_criticality: Optional[float] = None
    risk_reduction: Optional[float] = None
    job_size: Optional[float] = None

    extra: Dict[str, Any] = Field(default_factory=dict)


class ScoreResult(BaseModel):
    """Result returned by a scoring engine.

    value_score: benefit / desirability (framework-specific)
    effort_score: cost / size (framework-specific)
    overall_score: the primary prioritization metric; None when inputs are incomplete
    components: raw components used to derive scores (for audit / transparency)
    warnings: non-fatal computation notes (e.g., missing inputs)
    """
    value_score: Optional[float] = None
    effort_score: Optional[float] = None
    overall_score: Optional[float] = None

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_scored(self) -> bool:
        return self.overall_score is not None


class ScoringEngine(Protocol):
    """Protocol that all scoring engines must satisfy."""

    framework: ScoringFramework

    def compute(self, inputs: ScoreInputs) -> ScoreResult:  # pragma: no cover - interface only
        ...


__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
]
