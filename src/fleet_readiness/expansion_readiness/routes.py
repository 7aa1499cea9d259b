import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fastapi import APIRouter, Depends
from src.fleet_readiness.database.dependencies import verify_database
from src.fleet_readiness.expansion_readiness.dependencies import (
    get_fleet_utilization_service,
)
from src.fleet_readiness.expansion_readiness.exceptions import (
    ExpansionReadinessCalculationException,
    FleetUtilizationException,
)
from src.fleet_readiness.expansion_readiness.schemas import (
    ExpansionReadinessResponseDTO,
    FleetUtilizationRequestDTO,
    FleetUtilizationResponseDTO,
)
from src.fleet_readiness.expansion_readiness.services import FleetUtilizationService
from src.fleet_readiness.middleware.auth import resolve_company_id, validate_api_key

logger = logging.getLogger(__name__)

expansion_readiness_router = APIRouter(
    prefix="/expansion-readiness",
    tags=["Expansion Readiness"],
    dependencies=[Depends(validate_api_key)],
)


@expansion_readiness_router.get("", response_model=ExpansionReadinessResponseDTO)
async def get_expansion_readiness(
    company_id: str = Depends(resolve_company_id),
    db_session: AsyncSession = Depends(verify_database),
    params: FleetUtilizationRequestDTO = Depends(),
    service: FleetUtilizationService = Depends(get_fleet_utilization_service),
):
    try:
        return await service.get_expansion_readiness(
            db_session, company_id, params.range_key
        )
    except RuntimeError as e:
        logger.error("Expansion readiness failed for %s: %s", company_id, e)
        raise ExpansionReadinessCalculationException()


@expansion_readiness_router.get(
    "/fleet-utilization", response_model=FleetUtilizationResponseDTO
)
async def get_fleet_utilization(
    company_id: str = Depends(resolve_company_id),
    db_session: AsyncSession = Depends(verify_database),
    params: FleetUtilizationRequestDTO = Depends(),
    service: FleetUtilizationService = Depends(get_fleet_utilization_service),
):
    try:
        return await service.get_fleet_utilization(
            db_session, company_id, params.range_key
        )
    except RuntimeError as e:
        logger.error("Fleet utilization failed for %s: %s", company_id, e)
        raise FleetUtilizationException()
