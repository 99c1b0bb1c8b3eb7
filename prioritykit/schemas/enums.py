# prioritykit/schemas/enums.py

from __future__ import annotations

from enum import Enum


class Priority(str, Enum):
    """Manual priority tag users put on an idea."""
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class IdeaStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    REVIEWING = "REVIEWING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CONVERTED = "CONVERTED"


class WorkStatus(str, Enum):
    """Status vocabulary shared by features and tasks."""
    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class ChangeType(str, Enum):
    """Release classification driving the version bump."""
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"
    HOTFIX = "HOTFIX"


class ReleaseStatus(str, Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    RELEASED = "RELEASED"
    CANCELLED = "CANCELLED"


class OrgRole(str, Enum):
    ADMIN = "ADMIN"
    PRODUCT_MANAGER = "PRODUCT_MANAGER"
    CONTRIBUTOR = "CONTRIBUTOR"
    VIEWER = "VIEWER"


__all__ = [
    "Priority",
    "IdeaStatus",
    "WorkStatus",
    "ChangeType",
    "ReleaseStatus",
    "OrgRole",
]
