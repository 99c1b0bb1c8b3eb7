# prioritykit/services/rollups.py

"""Progress and effort rollups over already-loaded tasks.

All functions are total: empty collections and missing values yield 0 rather
than raising.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from prioritykit.schemas.enums import WorkStatus


def _is_done(task: Any) -> bool:
    status = task.status
    return getattr(status, "value", status) == WorkStatus.DONE.value


def done_count(tasks: Iterable[Any]) -> int:
    return sum(1 for t in tasks if _is_done(t))


def completion_pct(tasks: Sequence[Any]) -> float:
    """Share of DONE tasks in percent; 0 when there are no tasks."""
    total = len(tasks)
    if total == 0:
        return 0.0
    return done_count(tasks) / total * 100


def feature_completion_pct(feature: Any) -> float:
    return completion_pct(list(feature.tasks or []))


def total_effort(tasks: Iterable[Any]) -> float:
    """Sum of task effort (story points), missing effort counted as 0."""
    return float(sum((t.effort or 0) for t in tasks))


def capacity_utilization(tasks: Iterable[Any], capacity: Optional[float]) -> float:
    """Committed effort as a percent of sprint capacity; 0 without a capacity."""
    if not capacity:
        return 0.0
    return total_effort(tasks) / capacity * 100


def okr_progress(key_results: Sequence[Any]) -> float:
    """Mean key-result progress in [0, 1].

    Each key result contributes current/target capped at 1; a non-positive
    target contributes 0.
    """
    if not key_results:
        return 0.0
    total = 0.0
    for kr in key_results:
        total += min(kr.current / kr.target, 1.0) if kr.target > 0 else 0.0
    return total / len(key_results)


__all__ = [
    "done_count",
    "completion_pct",
    "feature_completion_pct",
    "total_effort",
    "capacity_utilization",
    "okr_progress",
]
