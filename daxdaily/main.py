"""
DAX Daily - Main FastAPI Application

30 days of Power BI concepts and DAX practice, with heuristic grading.
"""

import logging
import time

from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .config import LOG_LEVEL
from .db import get_db, init_db
from .api import days_router, submissions_router, learners_router
from .api.schemas import ErrorResponse
from . import __version__

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create app
app = FastAPI(
    title="DAX Daily",
    description="Daily Power BI lessons with DAX practice and instant feedback.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS - the editor front end may be served from anywhere
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_timing_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.3f}s"
    return response


# Exception handlers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"[API] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred",
        ).model_dump(exclude_none=True),
    )


# Include routers
app.include_router(days_router)
app.include_router(submissions_router)
app.include_router(learners_router)


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "DAX Daily",
        "version": __version__,
        "description": "Daily Power BI lessons with DAX practice",
        "docs": "/docs",
        "endpoints": {
            "tiers": "/tiers",
            "days": "/days",
            "day": "/days/{day}",
            "submit": "/days/{day}/submit",
            "progress": "/learners/{id}/progress",
        },
    }


# Health check
@app.get("/health")
async def health(db: Session = Depends(get_db)):
    """Health check endpoint for monitoring."""
    from datetime import datetime
    from sqlalchemy import text

    health_status = {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }

    # Check database connectivity
    try:
        db.execute(text("SELECT 1"))
        health_status["database"] = "connected"
    except Exception as e:
        health_status["status"] = "degraded"
        health_status["database"] = f"error: {str(e)}"

    return health_status


# Startup event
@app.on_event("startup")
async def startup():
    """Initialize database and load content on startup."""
    from .content import get_catalog

    init_db()
    get_catalog().list_days()
    logger.info(f"DAX Daily v{__version__} started")


# For direct running
if __name__ == "__main__":
    import uvicorn
    from .config import API_HOST, API_PORT

    uvicorn.run(app, host=API_HOST, port=API_PORT)
