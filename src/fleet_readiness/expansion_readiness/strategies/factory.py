from src.fleet_readiness.expansion_readiness.strategies.interface import (
    IPillarScoringStrategy,
)
from src.fleet_readiness.expansion_readiness.strategies.placeholder import (
    PlaceholderPillarScoringStrategy,
)


class PillarScoringStrategyFactory:
    @staticmethod
    def create(name: str) -> IPillarScoringStrategy:
        if name == "placeholder":
            return PlaceholderPillarScoringStrategy()
        else:
            raise ValueError(f"Unsupported pillar scoring strategy: {name}")
