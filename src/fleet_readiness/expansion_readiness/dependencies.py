from src.fleet_readiness.config import get_settings
from src.fleet_readiness.expansion_readiness.services import FleetUtilizationService
from src.fleet_readiness.expansion_readiness.strategies.factory import (
    PillarScoringStrategyFactory,
)
from src.fleet_readiness.fleet.repositories.fleet import FleetRepository

fleet_repo = FleetRepository()
pillar_strategy = PillarScoringStrategyFactory.create(
    get_settings().PILLAR_SCORING_STRATEGY
)
fleet_utilization_service = FleetUtilizationService(fleet_repo, pillar_strategy)


def get_fleet_utilization_service() -> FleetUtilizationService:
    return fleet_utilization_service
