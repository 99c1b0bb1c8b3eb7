# prioritykit/services/release_service.py

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from prioritykit.config import settings
from prioritykit.db.models.feature import Feature
from prioritykit.db.models.product import Product
from prioritykit.db.models.release import Release
from prioritykit.schemas.enums import ChangeType, ReleaseStatus
from prioritykit.schemas.feature import FeatureRecord
from prioritykit.schemas.release import ReleaseCreate, ReleaseRollup, VersionSuggestion
from prioritykit.services.filters import clauses
from prioritykit.services.release_composer import compose_release, eligibility_filters
from prioritykit.services.versioning import coerce_change_type, is_increase, is_well_formed, next_version

logger = logging.getLogger("prioritykit.services.releases")


class ReleaseService:
    """Release assembly on top of the persistence layer.

    Responsibilities:
    - Suggest the next version from the product's latest release
    - List features eligible for a new release
    - Preview rollups for a selection of features
    - Create a release and bind the eligible part of a selection
    """

    def __init__(self, db: Session):
        self.db = db

    def _require_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if product is None or product.deleted_at is not None:
            raise ValueError(f"Product {product_id} not found")
        return product

    def latest_release(self, product_id: int) -> Optional[Release]:
        stmt = (
            select(Release)
            .where(Release.product_id == product_id)
            .order_by(Release.created_at.desc(), Release.id.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def suggest_next_version(
        self,
        product_id: int,
        change_type: Union[ChangeType, str, None] = None,
    ) -> VersionSuggestion:
        """Next version after the latest release, or the initial version if none exists."""
        self._require_product(product_id)
        kind = coerce_change_type(change_type or settings.RELEASE_DEFAULT_CHANGE_TYPE)

        latest = self.latest_release(product_id)
        if latest is None:
            suggestion = VersionSuggestion(
                previous_version=None,
                change_type=kind,
                suggested_version=settings.RELEASE_INITIAL_VERSION,
            )
        else:
            previous = str(latest.version)
            if not is_well_formed(previous):
                logger.warning(
                    "release.malformed_previous_version",
                    extra={"product_id": product_id, "release_id": latest.id, "version": previous},
                )
            suggestion = VersionSuggestion(
                previous_version=previous,
                change_type=kind,
                suggested_version=next_version(previous, kind),
            )

        logger.debug(
            "release.version_suggested",
            extra={
                "product_id": product_id,
                "previous_version": suggestion.previous_version,
                "suggested_version": suggestion.suggested_version,
                "change_type": kind.value,
            },
        )
        return suggestion

    def eligible_features(self, product_id: int) -> List[Feature]:
        self._require_product(product_id)
        stmt = (
            select(Feature)
            .options(selectinload(Feature.tasks))
            .where(Feature.product_id == product_id, *clauses(eligibility_filters()))
            .order_by(Feature.title.asc(), Feature.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def _load_features(self, product_id: int, feature_ids: Sequence[int]) -> List[Feature]:
        if not feature_ids:
            return []
        stmt = (
            select(Feature)
            .options(selectinload(Feature.tasks))
            .where(Feature.product_id == product_id, Feature.id.in_(list(feature_ids)))
            .order_by(Feature.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def preview_release(self, product_id: int, feature_ids: Sequence[int]) -> ReleaseRollup:
        """Rollup for the selected features of this product.

        Ids that do not belong to the product are ignored, as they would be
        when binding.
        """
        self._require_product(product_id)
        features = [FeatureRecord.model_validate(f) for f in self._load_features(product_id, feature_ids)]
        return compose_release(features)

    def create_release(self, product_id: int, payload: ReleaseCreate) -> Release:
        """Persist a PLANNED release and bind the eligible selected features.

        The version is taken as given. A version that does not increase on the
        latest release is logged, not rejected.
        """
        self._require_product(product_id)

        latest = self.latest_release(product_id)
        if latest is not None and not is_increase(str(latest.version), payload.version):
            logger.warning(
                "release.version_not_increasing",
                extra={
                    "product_id": product_id,
                    "previous_version": latest.version,
                    "version": payload.version,
                },
            )

        rollup = self.preview_release(product_id, payload.feature_ids)
        bind_ids = [fp.feature_id for fp in rollup.features if fp.feature_id is not None]

        release = Release(
            product_id=product_id,
            name=payload.name,
            version=payload.version,
            type=payload.type.value,
            status=ReleaseStatus.PLANNED.value,
            description=payload.description,
            release_date=payload.release_date,
        )
        try:
            self.db.add(release)
            self.db.flush()
            if bind_ids:
                self.db.execute(
                    update(Feature)
                    .where(Feature.product_id == product_id, Feature.id.in_(bind_ids), *clauses(eligibility_filters()))
                    .values(release_id=release.id)
                    .execution_options(synchronize_session="fetch")
                )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("release.create_failed", extra={"product_id": product_id, "version": payload.version})
            raise

        self.db.refresh(release)
        logger.info(
            "release.created",
            extra={
                "product_id": product_id,
                "release_id": release.id,
                "version": release.version,
                "change_type": release.type,
                "feature_count": len(bind_ids),
                "excluded": rollup.excluded_feature_ids,
                "total_effort": rollup.total_effort,
                "completion_pct": rollup.completion_pct,
            },
        )
        return release


__all__ = ["ReleaseService"]
