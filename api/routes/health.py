"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("dailydiet.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok", service=settings.app_name, version=settings.app_version
    )


@router.get("/health-check/db", response_model=HealthResponse)
def database_health_check(db: Session = Depends(get_db)):
    """Check that the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception as e:
        logger.exception("Database health check failed")
        db_status = f"error: {e.__class__.__name__}"
    return HealthResponse(
        status=db_status, service=settings.app_name, version=settings.app_version
    )
