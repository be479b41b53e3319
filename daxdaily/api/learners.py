"""Learner API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from ..content import ContentCatalog, TIERS, get_catalog
from ..db import get_db, Learner, Attempt
from ..grading.engine import percentage
from ..progress import SqlProgressStore
from .schemas import AttemptInfo, LearnerCreate, LearnerInfo, ProgressInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["learners"])


def get_learner_or_404(db: Session, learner_id: str) -> Learner:
    learner = db.query(Learner).filter(Learner.id == learner_id).first()
    if not learner:
        raise HTTPException(
            status_code=404,
            detail={"error_code": "LEARNER_NOT_FOUND", "message": f"Learner '{learner_id}' not found"},
        )
    return learner


def _learner_info(db: Session, learner: Learner) -> LearnerInfo:
    attempt_count = db.query(Attempt).filter(Attempt.learner_id == learner.id).count()
    return LearnerInfo(
        id=learner.id,
        display_name=learner.display_name,
        created_at=learner.created_at,
        last_submission_at=learner.last_submission_at,
        completed_count=len(SqlProgressStore(db, learner.id).completed()),
        attempt_count=attempt_count,
    )


@router.post("", response_model=LearnerInfo)
async def create_learner(learner: LearnerCreate, db: Session = Depends(get_db)):
    """Register a new learner."""
    existing = db.query(Learner).filter(Learner.id == learner.id).first()
    if existing:
        raise HTTPException(
            status_code=409,
            detail={"error_code": "LEARNER_EXISTS", "message": f"Learner '{learner.id}' already exists"},
        )

    db_learner = Learner(id=learner.id, display_name=learner.display_name)
    db.add(db_learner)
    db.commit()
    db.refresh(db_learner)

    return _learner_info(db, db_learner)


@router.get("/{learner_id}", response_model=LearnerInfo)
async def get_learner(learner_id: str, db: Session = Depends(get_db)):
    learner = get_learner_or_404(db, learner_id)
    return _learner_info(db, learner)


@router.get("/{learner_id}/progress", response_model=ProgressInfo)
async def get_progress(
    learner_id: str,
    db: Session = Depends(get_db),
    catalog: ContentCatalog = Depends(get_catalog),
):
    """Completed days, overall percentage and per-tier counts."""
    get_learner_or_404(db, learner_id)
    completed = sorted(SqlProgressStore(db, learner_id).completed())
    total = catalog.total_days()

    by_tier = {}
    for t in TIERS:
        tier_days = {d.day for d in catalog.days_in_tier(t.tier)}
        by_tier[t.tier.value] = len(tier_days.intersection(completed))

    return ProgressInfo(
        learner_id=learner_id,
        completed_days=completed,
        completed_count=len(completed),
        total_days=total,
        percent=percentage(len(completed), total),
        by_tier=by_tier,
    )


@router.delete("/{learner_id}/progress", response_model=ProgressInfo)
async def reset_progress(
    learner_id: str,
    db: Session = Depends(get_db),
    catalog: ContentCatalog = Depends(get_catalog),
):
    """Forget every completed day. Attempt history is kept."""
    get_learner_or_404(db, learner_id)
    SqlProgressStore(db, learner_id).clear()
    db.commit()
    logger.info(f"[Progress] Reset requested for learner {learner_id}")

    return ProgressInfo(
        learner_id=learner_id,
        completed_days=[],
        completed_count=0,
        total_days=catalog.total_days(),
        percent=0,
        by_tier={t.tier.value: 0 for t in TIERS},
    )


@router.get("/{learner_id}/attempts", response_model=list[AttemptInfo])
async def get_learner_attempts(
    learner_id: str,
    day: int = None,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Attempt history, newest first."""
    get_learner_or_404(db, learner_id)

    query = db.query(Attempt).filter(Attempt.learner_id == learner_id)
    if day is not None:
        query = query.filter(Attempt.day == day)

    return query.order_by(Attempt.created_at.desc()).limit(limit).all()
