"""
Health check endpoints.

Provides basic health and status information about the server.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from sqlalchemy import text
from datetime import datetime

from app.database import get_db

router = APIRouter()


def _database_status(db: Session):
    """Run a trivial query; returns (ok, detail)."""
    try:
        db.execute(text("SELECT 1"))
        return True, "ok"
    except Exception as e:
        return False, str(e)


@router.get("/health")
async def health_check(request: Request, db: Session = Depends(get_db)) -> dict:
    """
    Basic health check endpoint.

    Returns:
        dict: Server status information including version.

    Example response:
        {
            "status": "healthy",
            "app_name": "Bloglist",
            "version": "0.1.0",
            "timestamp": "2024-12-11T23:00:00Z",
            "database": "connected"
        }
    """
    settings = request.app.state.settings
    ok, detail = _database_status(db)

    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "database": "connected" if ok else f"error: {detail}",
    }


@router.get("/health/ready")
async def readiness_check(db: Session = Depends(get_db)) -> dict:
    """
    Readiness check for the service.

    Verifies that the database accepts queries.

    Returns:
        dict: Readiness status.
    """
    ok, detail = _database_status(db)
    return {
        "ready": ok,
        "checks": {
            "database": "ok" if ok else f"failed: {detail}",
        },
    }
