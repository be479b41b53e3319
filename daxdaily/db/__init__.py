"""Database module."""

from .database import get_db, init_db, SessionLocal
from .models import Base, Learner, CompletedDay, Attempt

__all__ = ["get_db", "init_db", "SessionLocal", "Base", "Learner", "CompletedDay", "Attempt"]
