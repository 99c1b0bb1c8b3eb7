# prioritykit/schemas/release.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from prioritykit.schemas.enums import ChangeType, ReleaseStatus


class ReleaseRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    product_id: Optional[int] = None
    name: str = ""
    version: str
    type: ChangeType = ChangeType.MINOR
    status: ReleaseStatus = ReleaseStatus.PLANNED
    release_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ReleaseCreate(BaseModel):
    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    type: ChangeType = ChangeType.MINOR
    description: Optional[str] = None
    release_date: Optional[datetime] = None
    feature_ids: List[int] = Field(default_factory=list)


class VersionSuggestion(BaseModel):
    previous_version: Optional[str] = None
    change_type: ChangeType
    suggested_version: str


class FeatureProgress(BaseModel):
    feature_id: Optional[int] = None
    title: str = ""
    total_tasks: int = 0
    done_tasks: int = 0
    completion_pct: float = 0.0
    total_effort: float = 0.0


class ReleaseRollup(BaseModel):
    """Numbers a release would carry if the selected features were bound."""
    feature_count: int = 0
    total_effort: float = 0.0
    completion_pct: float = 0.0
    features: List[FeatureProgress] = Field(default_factory=list)
    excluded_feature_ids: List[Optional[int]] = Field(default_factory=list)


__all__ = [
    "ReleaseRecord",
    "ReleaseCreate",
    "VersionSuggestion",
    "FeatureProgress",
    "ReleaseRollup",
]
