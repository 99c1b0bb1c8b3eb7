# prioritykit/services/idea_service.py

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from prioritykit.db.models.idea import Idea
from prioritykit.db.models.product import Product
from prioritykit.schemas.idea import ScoredIdea
from prioritykit.services.filters import IdeaFilter, clauses
from prioritykit.services.scoring.ranking import IdeaSort, score_ideas

logger = logging.getLogger("prioritykit.services.ideas")


class IdeaPrioritizationService:
    """Loads a product's ideas and overlays read-time scores.

    Filtering happens in SQL; scoring and RICE ordering happen in Python since
    the score is never persisted.
    """

    def __init__(self, db: Session):
        self.db = db

    def _require_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if product is None or product.deleted_at is not None:
            raise ValueError(f"Product {product_id} not found")
        return product

    def load_ideas(self, product_id: int, filters: Optional[Sequence[IdeaFilter]] = None) -> List[Idea]:
        self._require_product(product_id)
        stmt = (
            select(Idea)
            .where(Idea.product_id == product_id, Idea.deleted_at.is_(None), *clauses(filters or []))
            .order_by(Idea.votes.desc(), Idea.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_ranked(
        self,
        product_id: int,
        filters: Optional[Sequence[IdeaFilter]] = None,
        sort: IdeaSort = IdeaSort.RICE,
    ) -> List[ScoredIdea]:
        ideas = self.load_ideas(product_id, filters)
        scored = score_ideas(ideas, sort)

        logger.info(
            "ideas.ranked",
            extra={
                "product_id": product_id,
                "count": len(scored),
                "total": sum(1 for s in scored if s.rice_score is not None),
                "sort": sort.value,
                "filters": [f.kind for f in (filters or [])],
            },
        )
        return scored


__all__ = ["IdeaPrioritizationService"]
