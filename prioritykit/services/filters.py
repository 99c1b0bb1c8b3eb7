# prioritykit/services/filters.py

"""Typed filter predicates for idea and feature queries.

Each filter is a small pydantic model tagged by ``kind``; the allowed filters
per entity form a closed discriminated union. Every predicate can be applied
in memory (``matches``) or pushed into a SQL query (``clause``), and both
forms express the same rule.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Literal, Sequence, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement
from typing_extensions import Annotated

from prioritykit.db.models.feature import Feature
from prioritykit.db.models.idea import Idea
from prioritykit.schemas.enums import IdeaStatus, Priority, WorkStatus

RecordT = TypeVar("RecordT")

_RICE_COLUMNS = ("reach_score", "impact_score", "confidence_score", "effort_score")


def _value(raw: Any) -> Any:
    return raw.value if hasattr(raw, "value") else raw


class _Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)

    def matches(self, record: Any) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    def clause(self) -> ColumnElement[bool]:  # pragma: no cover - interface only
        raise NotImplementedError


# ----------------------------
# Ideas
# ----------------------------

class IdeaStatusFilter(_Predicate):
    kind: Literal["idea_status"] = "idea_status"
    statuses: List[IdeaStatus] = Field(..., min_length=1)

    def matches(self, record: Any) -> bool:
        return _value(record.status) in {s.value for s in self.statuses}

    def clause(self) -> ColumnElement[bool]:
        return Idea.status.in_([s.value for s in self.statuses])


class IdeaPriorityFilter(_Predicate):
    kind: Literal["idea_priority"] = "idea_priority"
    priorities: List[Priority] = Field(..., min_length=1)

    def matches(self, record: Any) -> bool:
        return _value(record.priority) in {p.value for p in self.priorities}

    def clause(self) -> ColumnElement[bool]:
        return Idea.priority.in_([p.value for p in self.priorities])


class RiceScoredFilter(_Predicate):
    """Ideas with (scored=True) or without (scored=False) all four RICE inputs."""
    kind: Literal["rice_scored"] = "rice_scored"
    scored: bool = True

    def matches(self, record: Any) -> bool:
        complete = all(getattr(record, name) is not None for name in _RICE_COLUMNS)
        return complete if self.scored else not complete

    def clause(self) -> ColumnElement[bool]:
        columns = [getattr(Idea, name) for name in _RICE_COLUMNS]
        if self.scored:
            return and_(*[c.is_not(None) for c in columns])
        return or_(*[c.is_(None) for c in columns])


class TitleSearchFilter(_Predicate):
    """Case-insensitive substring match on the title."""
    kind: Literal["title_search"] = "title_search"
    query: str = Field(..., min_length=1)

    def matches(self, record: Any) -> bool:
        return self.query.lower() in (record.title or "").lower()

    def clause(self) -> ColumnElement[bool]:
        return Idea.title.ilike(f"%{self.query}%")


IdeaFilter = Annotated[
    Union[IdeaStatusFilter, IdeaPriorityFilter, RiceScoredFilter, TitleSearchFilter],
    Field(discriminator="kind"),
]


# ----------------------------
# Features
# ----------------------------

class FeatureStatusFilter(_Predicate):
    kind: Literal["feature_status"] = "feature_status"
    statuses: List[WorkStatus] = Field(..., min_length=1)

    def matches(self, record: Any) -> bool:
        return _value(record.status) in {s.value for s in self.statuses}

    def clause(self) -> ColumnElement[bool]:
        return Feature.status.in_([s.value for s in self.statuses])


class UnreleasedFilter(_Predicate):
    """Features not yet bound to any release."""
    kind: Literal["unreleased"] = "unreleased"

    def matches(self, record: Any) -> bool:
        return record.release_id is None

    def clause(self) -> ColumnElement[bool]:
        return Feature.release_id.is_(None)


class ReleasedInFilter(_Predicate):
    kind: Literal["released_in"] = "released_in"
    release_id: int

    def matches(self, record: Any) -> bool:
        return record.release_id == self.release_id

    def clause(self) -> ColumnElement[bool]:
        return Feature.release_id == self.release_id


FeatureFilter = Annotated[
    Union[FeatureStatusFilter, UnreleasedFilter, ReleasedInFilter],
    Field(discriminator="kind"),
]

_idea_filters_adapter = TypeAdapter(List[IdeaFilter])
_feature_filters_adapter = TypeAdapter(List[FeatureFilter])


def parse_idea_filters(raw: Sequence[Any]) -> List[IdeaFilter]:
    """Validate plain dicts (or filter models) into the idea filter union."""
    return _idea_filters_adapter.validate_python(list(raw))


def parse_feature_filters(raw: Sequence[Any]) -> List[FeatureFilter]:
    return _feature_filters_adapter.validate_python(list(raw))


def apply_filters(records: Iterable[RecordT], filters: Sequence[_Predicate]) -> List[RecordT]:
    """In-memory AND of all filters; no filters keeps everything."""
    return [r for r in records if all(f.matches(r) for f in filters)]


def clauses(filters: Sequence[_Predicate]) -> List[ColumnElement[bool]]:
    return [f.clause() for f in filters]


__all__ = [
    "IdeaStatusFilter",
    "IdeaPriorityFilter",
    "RiceScoredFilter",
    "TitleSearchFilter",
    "IdeaFilter",
    "FeatureStatusFilter",
    "UnreleasedFilter",
    "ReleasedInFilter",
    "FeatureFilter",
    "parse_idea_filters",
    "parse_feature_filters",
    "apply_filters",
    "clauses",
]
