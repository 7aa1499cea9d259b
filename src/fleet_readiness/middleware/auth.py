import logging
from typing import cast

from fastapi import Request
from src.fleet_readiness.config import get_settings
from src.fleet_readiness.middleware.exceptions import (
    InvalidAPIKeyError,
    MissingAPIKeyError,
    MissingCompanyIdError,
)

logger = logging.getLogger(__name__)


async def validate_api_key(request: Request) -> str:
    """Middleware to validate API key for incoming requests."""
    settings = get_settings()
    api_key = request.headers.get(settings.FASTAPI_API_KEY_HEADER)
    if not api_key:
        logger.warning("Missing API key in request")
        raise MissingAPIKeyError
    if api_key != settings.FASTAPI_API_KEY:
        logger.warning(f"Invalid API key: {api_key}")
        raise InvalidAPIKeyError(api_key)
    logger.info("API key validated successfully")
    return cast(str, api_key)


async def resolve_company_id(request: Request) -> str:
    """Resolve the tenant the request is scoped to."""
    header = get_settings().COMPANY_ID_HEADER
    company_id = (request.headers.get(header) or "").strip()
    if not company_id:
        logger.warning("Missing company id in request")
        raise MissingCompanyIdError(header)
    return company_id
