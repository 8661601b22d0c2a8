# app/routes/health.py
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from app.database import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", summary="Service health check")
async def health_check(database: Database = Depends(get_database)):
    """Report whether MongoDB answers a ping."""
    try:
        await database.ping()
    except PyMongoError as e:
        logger.warning("Health check: database unreachable: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "disconnected"},
        )
    return {"status": "healthy", "database": "connected"}
