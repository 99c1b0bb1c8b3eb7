# prioritykit/api/schemas/ideas.py

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from prioritykit.schemas.enums import Priority
from prioritykit.schemas.idea import IdeaRecord, ScoredIdea


class ScoreRequest(BaseModel):
    # Forms constrain these to 1-5; the engine itself does not
    reach: Optional[int] = None
    impact: Optional[int] = None
    confidence: Optional[int] = None
    effort: Optional[int] = None
    priority: Priority = Priority.MEDIUM


class ScoreResponse(BaseModel):
    rice_score: Optional[float] = None
    rice_label: str
    wsjf_score: Optional[float] = None
    priority: Priority
    required_fields: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class RankRequest(BaseModel):
    ideas: List[IdeaRecord] = Field(default_factory=list)


class RankedIdeasResponse(BaseModel):
    count: int
    ideas: List[ScoredIdea]
