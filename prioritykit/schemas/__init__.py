from .enums import (
    ChangeType,
    IdeaStatus,
    OrgRole,
    Priority,
    ReleaseStatus,
    WorkStatus,
)
from .idea import DisplayPriority, IdeaRecord, ScoredIdea
from .feature import FeatureRecord, KeyResultRecord, SprintRecord, TaskRecord
from .release import (
    FeatureProgress,
    ReleaseCreate,
    ReleaseRecord,
    ReleaseRollup,
    VersionSuggestion,
)

__all__ = [
    "ChangeType",
    "IdeaStatus",
    "OrgRole",
    "Priority",
    "ReleaseStatus",
    "WorkStatus",
    "DisplayPriority",
    "IdeaRecord",
    "ScoredIdea",
    "FeatureRecord",
    "KeyResultRecord",
    "SprintRecord",
    "TaskRecord",
    "FeatureProgress",
    "ReleaseCreate",
    "ReleaseRecord",
    "ReleaseRollup",
    "VersionSuggestion",
]
