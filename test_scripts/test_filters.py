# Typed filter predicates: in-memory and SQL forms must agree
from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError
from sqlalchemy import select

from prioritykit.db.models import Feature, Idea
from prioritykit.services.filters import (
    FeatureStatusFilter,
    IdeaPriorityFilter,
    IdeaStatusFilter,
    ReleasedInFilter,
    RiceScoredFilter,
    TitleSearchFilter,
    UnreleasedFilter,
    apply_filters,
    clauses,
    parse_feature_filters,
    parse_idea_filters,
)

from conftest import add_feature, add_idea, add_release


@pytest.fixture()
def seeded_ideas(db, product):
    add_idea(db, product, "Dark mode", (3, 4, 5, 2), priority="HIGH", status="APPROVED")
    add_idea(db, product, "Bulk export", (1, 1, 1, 1), priority="LOW", status="SUBMITTED")
    add_idea(db, product, "Dark launch flags", (2, None, 3, 1), priority="MEDIUM", status="REVIEWING")
    add_idea(db, product, "SSO", priority="HIGH", status="SUBMITTED")
    return db.execute(select(Idea).order_by(Idea.id)).scalars().all()


IDEA_CASES = [
    [IdeaStatusFilter(statuses=["SUBMITTED"])],
    [IdeaPriorityFilter(priorities=["HIGH", "LOW"])],
    [RiceScoredFilter(scored=True)],
    [RiceScoredFilter(scored=False)],
    [TitleSearchFilter(query="dark")],
    [TitleSearchFilter(query="DARK"), RiceScoredFilter(scored=True)],
    [IdeaStatusFilter(statuses=["SUBMITTED"]), IdeaPriorityFilter(priorities=["HIGH"])],
    [],
]


@pytest.mark.parametrize("filters", IDEA_CASES)
def test_idea_filters_sql_matches_memory(db, seeded_ideas, filters):
    in_memory = [i.id for i in apply_filters(seeded_ideas, filters)]
    stmt = select(Idea.id).where(*clauses(filters)).order_by(Idea.id)
    in_sql = list(db.execute(stmt).scalars().all())
    assert in_memory == in_sql


def test_idea_filter_expected_results(seeded_ideas):
    titles = [i.title for i in apply_filters(seeded_ideas, [TitleSearchFilter(query="dark"), RiceScoredFilter()])]
    assert titles == ["Dark mode"]


def test_feature_filters_sql_matches_memory(db, product):
    release = add_release(db, product, "1.0.0", datetime(2026, 1, 1))
    add_feature(db, product, "A", "DONE")
    add_feature(db, product, "B", "NEW")
    add_feature(db, product, "C", "IN_REVIEW", release_id=release.id)
    features = db.execute(select(Feature).order_by(Feature.id)).scalars().all()

    for filters in (
        [UnreleasedFilter()],
        [ReleasedInFilter(release_id=release.id)],
        [FeatureStatusFilter(statuses=["DONE", "IN_REVIEW"])],
        [UnreleasedFilter(), FeatureStatusFilter(statuses=["DONE", "IN_REVIEW"])],
    ):
        in_memory = [f.id for f in apply_filters(features, filters)]
        in_sql = list(db.execute(select(Feature.id).where(*clauses(filters)).order_by(Feature.id)).scalars().all())
        assert in_memory == in_sql


def test_parse_idea_filters_from_dicts():
    filters = parse_idea_filters(
        [
            {"kind": "idea_status", "statuses": ["APPROVED"]},
            {"kind": "rice_scored", "scored": False},
        ]
    )
    assert isinstance(filters[0], IdeaStatusFilter)
    assert isinstance(filters[1], RiceScoredFilter)
    assert filters[1].scored is False


def test_parse_rejects_filter_of_other_entity():
    with pytest.raises(ValidationError):
        parse_idea_filters([{"kind": "unreleased"}])
    with pytest.raises(ValidationError):
        parse_feature_filters([{"kind": "title_search", "query": "x"}])


def test_parse_rejects_unknown_values():
    with pytest.raises(ValidationError):
        parse_idea_filters([{"kind": "idea_status", "statuses": ["LOST"]}])
    with pytest.raises(ValidationError):
        parse_idea_filters([{"kind": "idea_status", "statuses": []}])


def test_filters_are_immutable():
    f = UnreleasedFilter()
    with pytest.raises(ValidationError):
        f.kind = "released_in"  # type: ignore[assignment]
