"""API routes."""

from .days import router as days_router
from .submissions import router as submissions_router
from .learners import router as learners_router

__all__ = ["days_router", "submissions_router", "learners_router"]
