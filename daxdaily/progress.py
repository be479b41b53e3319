"""
Progress stores: the set of days a learner has completed.

The grading engine never touches these. Callers add a day after a passing
verdict; add() is idempotent so re-passing a day changes nothing.
"""

import logging
from typing import Iterable, Optional, Protocol, Set

from sqlalchemy.orm import Session

from .db import CompletedDay

logger = logging.getLogger(__name__)


class ProgressStore(Protocol):
    def has(self, day: int) -> bool: ...

    def add(self, day: int) -> None: ...

    def completed(self) -> Set[int]: ...

    def clear(self) -> None: ...


class InMemoryProgressStore:
    """Set-backed store, for tests and single-process use."""

    def __init__(self, days: Optional[Iterable[int]] = None):
        self._days: Set[int] = set(days or ())

    def has(self, day: int) -> bool:
        return day in self._days

    def add(self, day: int) -> None:
        self._days.add(day)

    def completed(self) -> Set[int]:
        return set(self._days)

    def clear(self) -> None:
        self._days.clear()


class SqlProgressStore:
    """
    Completed days for one learner, stored in the completed_days table.

    Writes are flushed but not committed; the caller owns the transaction.
    """

    def __init__(self, db: Session, learner_id: str):
        self.db = db
        self.learner_id = learner_id

    def _query(self):
        return self.db.query(CompletedDay).filter(CompletedDay.learner_id == self.learner_id)

    def has(self, day: int) -> bool:
        return self._query().filter(CompletedDay.day == day).first() is not None

    def add(self, day: int) -> None:
        if self.has(day):
            return
        self.db.add(CompletedDay(learner_id=self.learner_id, day=day))
        self.db.flush()
        logger.info(f"[Progress] Learner {self.learner_id} completed day {day}")

    def completed(self) -> Set[int]:
        return {row.day for row in self._query().all()}

    def clear(self) -> None:
        removed = self._query().delete(synchronize_session=False)
        self.db.flush()
        logger.info(f"[Progress] Cleared {removed} completed days for learner {self.learner_id}")
