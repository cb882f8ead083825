"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("weekplanner.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": settings.app_name}


@router.get("/health-check/db")
def database_health(db: Session = Depends(get_db)):
    """Check that the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "reachable"}
    except SQLAlchemyError as e:
        logger.exception("Database health check failed")
        return {"status": "error", "database": "unreachable", "error": str(e)}
