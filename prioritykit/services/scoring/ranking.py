# prioritykit/services/scoring/ranking.py

"""Read-time scoring and ordering of ideas.

Scores are derived on every read and never written back. The persisted order
of ideas is by votes then recency; ordering by RICE is an explicit overlay.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

from prioritykit.config import settings
from prioritykit.schemas.idea import IdeaRecord, ScoredIdea
from prioritykit.services.priority import classify
from prioritykit.services.scoring.engines import compute_rice_score, compute_wsjf_score

IdeaT = TypeVar("IdeaT")


class IdeaSort(str, Enum):
    RICE = "rice"
    VOTES = "votes"
    NEWEST = "newest"


def rice_score_of(idea: Any) -> Optional[float]:
    return compute_rice_score(
        idea.reach_score,
        idea.impact_score,
        idea.confidence_score,
        idea.effort_score,
    )


def wsjf_score_of(idea: Any) -> Optional[float]:
    """WSJF for an idea: impact is the business value, effort the job size.

    Ideas carry no time criticality or risk reduction, so the configured
    defaults stand in for them.
    """
    if idea.impact_score is None or idea.effort_score is None:
        return None
    return compute_wsjf_score(
        idea.impact_score,
        settings.WSJF_DEFAULT_TIME_CRITICALITY,
        settings.WSJF_DEFAULT_RISK_REDUCTION,
        idea.effort_score,
    )


def _created_key(idea: Any) -> float:
    created_at = getattr(idea, "created_at", None)
    return created_at.timestamp() if created_at is not None else float("-inf")


def _votes_key(idea: Any) -> int:
    return getattr(idea, "votes", None) or 0


def _by_votes(ideas: Iterable[IdeaT]) -> List[IdeaT]:
    # Stable sorts, least significant key first
    ordered = sorted(ideas, key=_created_key, reverse=True)
    ordered.sort(key=_votes_key, reverse=True)
    return ordered


def _rice_key(pair: Tuple[Any, Optional[float]]) -> Tuple[bool, float]:
    score = pair[1]
    return (score is not None, score if score is not None else 0.0)


def rank_ideas(ideas: Iterable[IdeaT]) -> List[IdeaT]:
    """Order ideas by RICE score, highest first.

    Unscored ideas go last. Ties fall back to votes desc, then created_at desc.
    Raises ZeroEffortError if an idea carries a zero effort score.
    """
    pairs = [(idea, rice_score_of(idea)) for idea in _by_votes(ideas)]
    pairs.sort(key=_rice_key, reverse=True)
    return [idea for idea, _ in pairs]


def sort_ideas(ideas: Iterable[IdeaT], sort: IdeaSort = IdeaSort.RICE) -> List[IdeaT]:
    if sort == IdeaSort.RICE:
        return rank_ideas(ideas)
    if sort == IdeaSort.VOTES:
        return _by_votes(ideas)
    return sorted(ideas, key=_created_key, reverse=True)


def score_idea(idea: Any) -> ScoredIdea:
    record = idea if isinstance(idea, IdeaRecord) else IdeaRecord.model_validate(idea)
    rice = rice_score_of(record)
    return ScoredIdea(
        **record.model_dump(),
        rice_score=rice,
        wsjf_score=wsjf_score_of(record),
        display_priority=classify(record.priority, rice),
    )


def score_ideas(ideas: Sequence[Any], sort: IdeaSort = IdeaSort.RICE) -> List[ScoredIdea]:
    return sort_ideas([score_idea(idea) for idea in ideas], sort)


__all__ = [
    "IdeaSort",
    "rice_score_of",
    "wsjf_score_of",
    "rank_ideas",
    "sort_ideas",
    "score_idea",
    "score_ideas",
]
