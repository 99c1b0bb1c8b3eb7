# prioritykit/api/routes/releases.py

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from prioritykit.api.deps import MANAGE_ROLES, READ_ROLES, get_db, require_role, require_shared_secret
from prioritykit.api.schemas.releases import (
    EligibleFeaturesResponse,
    NextVersionRequest,
    NextVersionResponse,
    PreviewRequest,
    ReleaseCreatedResponse,
)
from prioritykit.schemas.feature import FeatureRecord
from prioritykit.schemas.release import ReleaseCreate, ReleaseRollup, VersionSuggestion
from prioritykit.services.release_service import ReleaseService
from prioritykit.services.versioning import coerce_change_type, next_version

logger = logging.getLogger("prioritykit.api.releases")

router = APIRouter(
    tags=["releases"],
    dependencies=[Depends(require_shared_secret), Depends(require_role(*READ_ROLES))],
)


@router.post("/releases/next-version", response_model=NextVersionResponse)
def compute_next_version(req: NextVersionRequest) -> NextVersionResponse:
    return NextVersionResponse(
        current=req.current,
        change_type=coerce_change_type(req.change_type),
        version=next_version(req.current, req.change_type),
    )


@router.get("/products/{product_id}/releases/next-version", response_model=VersionSuggestion)
def suggest_version(
    product_id: int,
    change_type: Optional[str] = None,
    db: Session = Depends(get_db),
) -> VersionSuggestion:
    try:
        return ReleaseService(db).suggest_next_version(product_id, change_type)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/products/{product_id}/releases/eligible-features", response_model=EligibleFeaturesResponse)
def list_eligible_features(product_id: int, db: Session = Depends(get_db)) -> EligibleFeaturesResponse:
    try:
        features = ReleaseService(db).eligible_features(product_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    records = [FeatureRecord.model_validate(f) for f in features]
    return EligibleFeaturesResponse(count=len(records), features=records)


@router.post("/products/{product_id}/releases/preview", response_model=ReleaseRollup)
def preview_release(product_id: int, req: PreviewRequest, db: Session = Depends(get_db)) -> ReleaseRollup:
    try:
        return ReleaseService(db).preview_release(product_id, req.feature_ids)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post(
    "/products/{product_id}/releases",
    response_model=ReleaseCreatedResponse,
    status_code=201,
    dependencies=[Depends(require_role(*MANAGE_ROLES))],
)
def create_release(product_id: int, req: ReleaseCreate, db: Session = Depends(get_db)) -> ReleaseCreatedResponse:
    """
    Create a PLANNED release and bind the eligible selected features.
    """
    try:
        release = ReleaseService(db).create_release(product_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        logger.exception("release.create_failed", extra={"product_id": product_id})
        raise HTTPException(status_code=500, detail=f"Failed to create release: {e}") from e

    return ReleaseCreatedResponse(
        id=release.id,  # type: ignore[arg-type]
        name=release.name,  # type: ignore[arg-type]
        version=release.version,  # type: ignore[arg-type]
        type=release.type,  # type: ignore[arg-type]
        status=release.status,  # type: ignore[arg-type]
        release_date=release.release_date,  # type: ignore[arg-type]
        feature_ids=sorted(f.id for f in release.features),
    )
