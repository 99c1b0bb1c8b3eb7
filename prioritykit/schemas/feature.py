# prioritykit/schemas/feature.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from prioritykit.schemas.enums import WorkStatus


class TaskRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    title: str = ""
    status: WorkStatus = WorkStatus.NEW
    effort: Optional[float] = None  # story points


class FeatureRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    product_id: Optional[int] = None
    title: str = ""
    status: WorkStatus = WorkStatus.NEW
    release_id: Optional[int] = None
    created_at: Optional[datetime] = None
    tasks: List[TaskRecord] = Field(default_factory=list)


class SprintRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = ""
    capacity: Optional[float] = None
    tasks: List[TaskRecord] = Field(default_factory=list)


class KeyResultRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    title: str = ""
    current: float = 0.0
    target: float = 0.0
