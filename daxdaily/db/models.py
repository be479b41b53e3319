"""SQLAlchemy models for DAX Daily."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, Index, UniqueConstraint
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


class Learner(Base):
    """Someone working through the course."""

    __tablename__ = "learners"

    id = Column(String(64), primary_key=True)  # Learner-chosen ID
    display_name = Column(String(128), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    last_submission_at = Column(DateTime, nullable=True)

    completed_days = relationship("CompletedDay", back_populates="learner", cascade="all, delete-orphan")
    attempts = relationship("Attempt", back_populates="learner", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Learner {self.id}>"


class CompletedDay(Base):
    """A day the learner has passed. One row per (learner, day)."""

    __tablename__ = "completed_days"

    id = Column(Integer, primary_key=True, autoincrement=True)
    learner_id = Column(String(64), ForeignKey("learners.id"), nullable=False)
    day = Column(Integer, nullable=False)
    completed_at = Column(DateTime, default=datetime.utcnow)

    learner = relationship("Learner", back_populates="completed_days")

    __table_args__ = (
        UniqueConstraint("learner_id", "day", name="uq_learner_day"),
    )

    def __repr__(self):
        return f"<CompletedDay {self.learner_id} day={self.day}>"


class Attempt(Base):
    """One graded submission. The submitted text itself is not kept."""

    __tablename__ = "attempts"

    id = Column(String(36), primary_key=True)  # UUID
    learner_id = Column(String(64), ForeignKey("learners.id"), nullable=False)
    day = Column(Integer, nullable=False)

    score = Column(Integer, nullable=False)
    passed = Column(Boolean, nullable=False, default=False)
    code_size_bytes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)

    learner = relationship("Learner", back_populates="attempts")

    __table_args__ = (
        Index("ix_attempts_learner_day", "learner_id", "day"),
    )

    def __repr__(self):
        return f"<Attempt {self.id[:8]} day={self.day} score={self.score}>"
