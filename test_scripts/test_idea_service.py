# IdeaPrioritizationService against an in-memory database
from __future__ import annotations

from datetime import datetime

import pytest

from prioritykit.services.filters import IdeaStatusFilter, RiceScoredFilter
from prioritykit.services.idea_service import IdeaPrioritizationService
from prioritykit.services.scoring.ranking import IdeaSort

from conftest import add_idea


def test_list_ranked_orders_by_rice_then_votes(db, product):
    add_idea(db, product, "low", (1, 1, 1, 5), votes=50)
    add_idea(db, product, "tie-10", (3, 4, 5, 2), votes=10)
    add_idea(db, product, "tie-20", (3, 4, 5, 2), votes=20)
    add_idea(db, product, "unscored", votes=99)

    ranked = IdeaPrioritizationService(db).list_ranked(product.id)

    assert [i.title for i in ranked] == ["tie-20", "tie-10", "low", "unscored"]
    assert ranked[0].rice_score == 30
    assert ranked[-1].rice_score is None


def test_list_ranked_excludes_deleted_and_other_products(db, product):
    from prioritykit.db.models import Product

    other = Product(organization_id="org-2", key="OTHER", name="Other")
    db.add(other)
    db.commit()

    add_idea(db, product, "kept", (1, 1, 1, 1))
    add_idea(db, product, "gone", (5, 5, 5, 1), deleted_at=datetime(2026, 2, 1))
    add_idea(db, other, "foreign", (5, 5, 5, 1))

    ranked = IdeaPrioritizationService(db).list_ranked(product.id)
    assert [i.title for i in ranked] == ["kept"]


def test_list_ranked_applies_filters(db, product):
    add_idea(db, product, "approved", (2, 2, 2, 2), status="APPROVED")
    add_idea(db, product, "submitted", (5, 5, 5, 1), status="SUBMITTED")
    add_idea(db, product, "approved-unscored", status="APPROVED")

    service = IdeaPrioritizationService(db)
    approved = service.list_ranked(product.id, [IdeaStatusFilter(statuses=["APPROVED"])])
    assert [i.title for i in approved] == ["approved", "approved-unscored"]

    unscored = service.list_ranked(product.id, [RiceScoredFilter(scored=False)])
    assert [i.title for i in unscored] == ["approved-unscored"]


def test_list_ranked_sort_newest(db, product):
    add_idea(db, product, "old", (5, 5, 5, 1), created_at=datetime(2025, 1, 1))
    add_idea(db, product, "new", (1, 1, 1, 5), created_at=datetime(2026, 6, 1))

    ranked = IdeaPrioritizationService(db).list_ranked(product.id, sort=IdeaSort.NEWEST)
    assert [i.title for i in ranked] == ["new", "old"]


def test_list_ranked_unknown_product(db):
    with pytest.raises(ValueError):
        IdeaPrioritizationService(db).list_ranked(12345)
