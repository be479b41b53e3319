"""Submission API - grade a day's DAX and record progress."""

import logging
import uuid
from datetime import datetime, timedelta
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from ..config import SUBMISSIONS_PER_HOUR
from ..content import ContentCatalog, get_catalog
from ..db import get_db, Learner, Attempt
from ..grading import evaluate
from ..progress import SqlProgressStore
from .days import get_day_or_404
from .schemas import SubmissionCreate, VerdictResult, RuleDetailInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/days", tags=["submissions"])


# ============ Helper Functions ============

def get_or_create_learner(db: Session, learner_id: str) -> Learner:
    """Get existing learner or create a new one."""
    learner = db.query(Learner).filter(Learner.id == learner_id).first()
    if not learner:
        learner = Learner(id=learner_id, display_name=learner_id)
        db.add(learner)
        db.commit()
        db.refresh(learner)
        logger.info(f"[Submit] Registered learner {learner_id} on first submission")
    return learner


def check_rate_limit(db: Session, learner_id: str, day: int) -> None:
    """Check if learner has exceeded the hourly limit for this day."""
    one_hour_ago = datetime.utcnow() - timedelta(hours=1)

    recent_attempts = db.query(Attempt).filter(
        Attempt.learner_id == learner_id,
        Attempt.day == day,
        Attempt.created_at > one_hour_ago,
    ).count()

    if recent_attempts >= SUBMISSIONS_PER_HOUR:
        logger.warning(f"[Submit] Rate limit hit for learner {learner_id} on day {day}")
        raise HTTPException(
            status_code=429,
            detail={
                "error_code": "RATE_LIMITED",
                "message": f"Rate limit exceeded. Max {SUBMISSIONS_PER_HOUR} submissions per hour.",
                "retry_after_seconds": 3600,
            }
        )


# ============ Endpoints ============

@router.post("/{day}/submit", response_model=VerdictResult)
async def submit_answer(
    day: int,
    submission: SubmissionCreate,
    db: Session = Depends(get_db),
    catalog: ContentCatalog = Depends(get_catalog),
):
    """
    Grade a DAX answer for a day.

    A passing verdict marks the day complete for the learner. Completing a
    day twice is a no-op; a later failing attempt never un-completes it.
    """
    _, challenge = get_day_or_404(catalog, day)

    learner = get_or_create_learner(db, submission.learner_id)
    check_rate_limit(db, learner.id, day)

    verdict = evaluate(submission.code, challenge.solution, challenge.rules)

    progress = SqlProgressStore(db, learner.id)
    newly_completed = False
    if verdict.passed and not progress.has(day):
        progress.add(day)
        newly_completed = True

    attempt = Attempt(
        id=str(uuid.uuid4()),
        learner_id=learner.id,
        day=day,
        score=verdict.score,
        passed=verdict.passed,
        code_size_bytes=len(submission.code.encode("utf-8")),
    )
    db.add(attempt)
    learner.last_submission_at = datetime.utcnow()
    db.commit()

    logger.info(
        f"[Submit] learner={learner.id} day={day} score={verdict.score} "
        f"pass={verdict.passed} rules={verdict.rule_score} similarity={verdict.similarity}"
    )

    return VerdictResult(
        attempt_id=attempt.id,
        day=day,
        score=verdict.score,
        passed=verdict.passed,
        feedback=verdict.feedback,
        improvements=verdict.improvements,
        rule_details=[RuleDetailInfo(pattern=d.pattern, passed=d.passed) for d in verdict.rule_details],
        rule_score=verdict.rule_score,
        similarity=verdict.similarity,
        newly_completed=newly_completed,
        completed_count=len(progress.completed()),
    )
