# prioritykit/api/schemas/releases.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from prioritykit.schemas.enums import ChangeType, ReleaseStatus
from prioritykit.schemas.feature import FeatureRecord


class NextVersionRequest(BaseModel):
    current: str = ""
    # Unknown values fall back to MINOR
    change_type: Optional[str] = None


class NextVersionResponse(BaseModel):
    current: str
    change_type: ChangeType
    version: str


class PreviewRequest(BaseModel):
    feature_ids: List[int] = Field(default_factory=list)


class EligibleFeaturesResponse(BaseModel):
    count: int
    features: List[FeatureRecord]


class ReleaseCreatedResponse(BaseModel):
    id: int
    name: str
    version: str
    type: ChangeType
    status: ReleaseStatus
    release_date: Optional[datetime] = None
    feature_ids: List[int] = Field(default_factory=list)
