# prioritykit/api/routes/ideas.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from prioritykit.api.deps import READ_ROLES, get_db, require_role, require_shared_secret
from prioritykit.api.schemas.ideas import RankedIdeasResponse, RankRequest, ScoreRequest, ScoreResponse
from prioritykit.schemas.enums import IdeaStatus, Priority
from prioritykit.schemas.idea import IdeaRecord
from prioritykit.services.filters import (
    IdeaFilter,
    IdeaPriorityFilter,
    IdeaStatusFilter,
    RiceScoredFilter,
    TitleSearchFilter,
)
from prioritykit.services.idea_service import IdeaPrioritizationService
from prioritykit.services.priority import classify
from prioritykit.services.scoring import ScoreInputs, ScoringFramework, ZeroEffortError, get_framework
from prioritykit.services.scoring.ranking import IdeaSort, score_ideas, wsjf_score_of


router = APIRouter(
    tags=["ideas"],
    dependencies=[Depends(require_shared_secret), Depends(require_role(*READ_ROLES))],
)


@router.post("/ideas/score", response_model=ScoreResponse)
def score(req: ScoreRequest) -> ScoreResponse:
    """
    Score a single set of RICE inputs without persisting anything.
    """
    rice = get_framework(ScoringFramework.RICE)
    record = IdeaRecord(
        reach_score=req.reach,
        impact_score=req.impact,
        confidence_score=req.confidence,
        effort_score=req.effort,
        priority=req.priority,
    )
    try:
        result = rice.engine.compute(
            ScoreInputs(reach=req.reach, impact=req.impact, confidence=req.confidence, effort=req.effort)
        )
        wsjf = wsjf_score_of(record)
    except ZeroEffortError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    display = classify(req.priority, result.overall_score)
    return ScoreResponse(
        rice_score=result.overall_score,
        rice_label=display.rice_label,
        wsjf_score=wsjf,
        priority=display.manual,
        required_fields=list(rice.required_fields),
        warnings=result.warnings,
    )


@router.post("/ideas/rank", response_model=RankedIdeasResponse)
def rank(req: RankRequest, sort: IdeaSort = IdeaSort.RICE) -> RankedIdeasResponse:
    try:
        ideas = score_ideas(req.ideas, sort)
    except ZeroEffortError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return RankedIdeasResponse(count=len(ideas), ideas=ideas)


@router.get("/products/{product_id}/ideas", response_model=RankedIdeasResponse)
def list_product_ideas(
    product_id: int,
    sort: IdeaSort = IdeaSort.RICE,
    status: List[IdeaStatus] = Query(default=[]),
    priority: List[Priority] = Query(default=[]),
    scored: Optional[bool] = None,
    q: Optional[str] = None,
    db: Session = Depends(get_db),
) -> RankedIdeasResponse:
    """
    Persisted ideas of a product with read-time scores, filtered and sorted.
    """
    filters: List[IdeaFilter] = []
    if status:
        filters.append(IdeaStatusFilter(statuses=status))
    if priority:
        filters.append(IdeaPriorityFilter(priorities=priority))
    if scored is not None:
        filters.append(RiceScoredFilter(scored=scored))
    if q:
        filters.append(TitleSearchFilter(query=q))

    try:
        ideas = IdeaPrioritizationService(db).list_ranked(product_id, filters, sort)
    except ZeroEffortError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return RankedIdeasResponse(count=len(ideas), ideas=ideas)
