from src.fleet_readiness.expansion_readiness.strategies.interface import (
    MAX_PILLAR_POINTS,
    IPillarScoringStrategy,
)


class PlaceholderPillarScoringStrategy(IPillarScoringStrategy):
    """Awards full points to every pillar until real tiers are agreed on."""

    def __init__(self, points: int = MAX_PILLAR_POINTS):
        self.points = points

    def score_overall_utilization(self, utilization_rate: float) -> int:
        return self.points

    def score_revenue_days_per_truck(self, avg_revenue_days: float) -> int:
        return self.points

    def score_low_utilization(self, low_util_pct: float) -> int:
        return self.points
