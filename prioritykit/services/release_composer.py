# prioritykit/services/release_composer.py

"""Which features may go into a new release, and what that release adds up to.

Binding features to a release is a persistence concern handled by
ReleaseService; nothing here mutates its inputs.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, TypeVar

from prioritykit.config import settings
from prioritykit.schemas.enums import WorkStatus
from prioritykit.schemas.release import FeatureProgress, ReleaseRollup
from prioritykit.services.filters import FeatureStatusFilter, UnreleasedFilter, apply_filters
from prioritykit.services.rollups import completion_pct, done_count, total_effort

logger = logging.getLogger("prioritykit.services.release_composer")

FeatureT = TypeVar("FeatureT")


def eligibility_filters() -> List[Any]:
    """Unbound features whose status means active or finished work."""
    return [
        UnreleasedFilter(),
        FeatureStatusFilter(statuses=[WorkStatus(s) for s in settings.RELEASE_ELIGIBLE_STATUSES]),
    ]


def eligible_features(features: Iterable[FeatureT]) -> List[FeatureT]:
    return apply_filters(features, eligibility_filters())


def feature_progress(feature: Any) -> FeatureProgress:
    tasks = list(feature.tasks or [])
    return FeatureProgress(
        feature_id=feature.id,
        title=feature.title or "",
        total_tasks=len(tasks),
        done_tasks=done_count(tasks),
        completion_pct=completion_pct(tasks),
        total_effort=total_effort(tasks),
    )


def compose_release(selected_features: Sequence[Any]) -> ReleaseRollup:
    """Roll up effort and completion over the eligible part of a selection.

    Ineligible selections are reported in ``excluded_feature_ids`` and left
    out of every number. Completion is computed over the pooled tasks of the
    included features.
    """
    included = eligible_features(selected_features)
    included_ids = {id(f) for f in included}
    excluded = [f.id for f in selected_features if id(f) not in included_ids]

    if excluded:
        logger.info(
            "release.compose.excluded",
            extra={"excluded": excluded, "feature_count": len(included)},
        )

    tasks = [t for f in included for t in (f.tasks or [])]
    return ReleaseRollup(
        feature_count=len(included),
        total_effort=total_effort(tasks),
        completion_pct=completion_pct(tasks),
        features=[feature_progress(f) for f in included],
        excluded_feature_ids=excluded,
    )


__all__ = [
    "eligibility_filters",
    "eligible_features",
    "feature_progress",
    "compose_release",
]
