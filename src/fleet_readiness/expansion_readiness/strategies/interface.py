from abc import ABC, abstractmethod

MAX_PILLAR_POINTS = 8


class IPillarScoringStrategy(ABC):
    """
    Maps the three headline utilization metrics to points.

    Each method returns an integer in [0, MAX_PILLAR_POINTS]. The composite
    fleet utilization score only ever sees these points, so a strategy can be
    swapped without touching the service.
    """

    @abstractmethod
    def score_overall_utilization(self, utilization_rate: float) -> int: ...

    @abstractmethod
    def score_revenue_days_per_truck(self, avg_revenue_days: float) -> int: ...

    @abstractmethod
    def score_low_utilization(self, low_util_pct: float) -> int: ...
