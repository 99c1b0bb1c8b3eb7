# prioritykit/schemas/idea.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from prioritykit.config import settings
from prioritykit.schemas.enums import IdeaStatus, Priority


UNSCORED_LABEL = "—"


class IdeaRecord(BaseModel):
    """Scoring-relevant view of an idea row.

    Sub-scores are expected in [1, 5] but are not range-checked here; the
    host's forms constrain them.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    product_id: Optional[int] = None
    title: str = ""
    status: IdeaStatus = IdeaStatus.SUBMITTED
    priority: Priority = Priority.MEDIUM

    reach_score: Optional[int] = None
    impact_score: Optional[int] = None
    confidence_score: Optional[int] = None
    effort_score: Optional[int] = None

    votes: int = 0
    created_at: Optional[datetime] = None


class DisplayPriority(BaseModel):
    """Manual priority and RICE score shown side by side, never merged."""
    model_config = ConfigDict(frozen=True)

    manual: Priority
    rice: Optional[float] = None

    @computed_field  # type: ignore[misc]
    @property
    def rice_label(self) -> str:
        if self.rice is None:
            return UNSCORED_LABEL
        return f"{self.rice:.{settings.SCORE_DISPLAY_DECIMALS}f}"


class ScoredIdea(IdeaRecord):
    rice_score: Optional[float] = None
    wsjf_score: Optional[float] = None
    display_priority: DisplayPriority = Field(
        default_factory=lambda: DisplayPriority(manual=Priority.MEDIUM)
    )


__all__ = ["IdeaRecord", "DisplayPriority", "ScoredIdea", "UNSCORED_LABEL"]
