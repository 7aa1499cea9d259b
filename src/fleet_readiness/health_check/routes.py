import logging
from http import HTTPStatus

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from src.fleet_readiness.database.database import DatabaseManager

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix="/health", tags=["Health Check"])


@health_router.get("")
async def health_check():
    """Check the health of the API and report the database connection state."""
    logger.info("Health check requested")
    database = "connected" if DatabaseManager.is_connected else "disconnected"
    return JSONResponse(
        status_code=HTTPStatus.OK, content={"status": "ok", "database": database}
    )
