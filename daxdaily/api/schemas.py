"""Pydantic schemas for API."""

from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_SUBMISSION_CHARS


# Curriculum schemas
class TierSummary(BaseModel):
    tier: str
    label: str
    description: str
    first_day: int
    last_day: int
    day_count: int


class DaySummary(BaseModel):
    day: int
    tier: str
    title: str
    concept_topic: str
    dax_focus: str
    concepts: List[str] = []

    model_config = ConfigDict(from_attributes=True)


class DayDetail(DaySummary):
    """A day's lesson and task. Hints and solution are served separately.

    Only the number of graded patterns is shown, never the patterns themselves.
    """
    concept_lesson: str
    key_takeaways: List[str] = []
    scenario: str
    instructions: str
    starter_code: str
    sample_model: str = ""
    notes: str = ""
    rule_count: int = 0
    hint_count: int = 0
    prev_day: Optional[int] = None
    next_day: Optional[int] = None


class DayHints(BaseModel):
    day: int
    hints: List[str]


class DaySolution(BaseModel):
    day: int
    solution: str
    expected_output: str = ""


# Submission schemas
class SubmissionCreate(BaseModel):
    learner_id: str = Field(..., min_length=1, max_length=64, pattern=r'^[a-zA-Z0-9_-]+$')
    code: str = Field("", max_length=MAX_SUBMISSION_CHARS, description="DAX text to grade")


class RuleDetailInfo(BaseModel):
    pattern: str
    passed: bool


class VerdictResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    attempt_id: str
    day: int
    score: int
    passed: bool = Field(..., alias="pass")
    feedback: str
    improvements: List[str] = []
    rule_details: List[RuleDetailInfo] = []
    rule_score: int
    similarity: int
    newly_completed: bool = False
    completed_count: int = 0


class AttemptInfo(BaseModel):
    id: str
    learner_id: str
    day: int
    score: int
    passed: bool
    code_size_bytes: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Learner schemas
class LearnerCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=64, pattern=r'^[a-zA-Z0-9_-]+$')
    display_name: str = Field(..., min_length=1, max_length=128)


class LearnerInfo(BaseModel):
    id: str
    display_name: str
    created_at: datetime
    last_submission_at: Optional[datetime] = None
    completed_count: int = 0
    attempt_count: int = 0


class ProgressInfo(BaseModel):
    learner_id: str
    completed_days: List[int]
    completed_count: int
    total_days: int
    percent: int
    by_tier: Dict[str, int] = {}


# Error schemas
class ErrorResponse(BaseModel):
    status: str = "error"
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
