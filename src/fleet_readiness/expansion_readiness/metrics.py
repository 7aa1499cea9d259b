import math
from typing import Optional, Sequence

from src.fleet_readiness.expansion_readiness.enums import (
    ConsistencyBand,
    ReadinessTier,
    TrendMomentum,
)
from src.fleet_readiness.expansion_readiness.schemas import (
    ConsistencyScore,
    FleetMetrics,
    RevenueDayDistributionDTO,
    TrendScore,
)

MAX_FLEET_UTIL_SCORE = 25
VERY_HIGH_UTILIZATION_DAYS = 23


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_std_dev(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    avg = mean(values)
    return math.sqrt(mean([(v - avg) ** 2 for v in values]))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def low_util_threshold_days(truck_count: int) -> int:
    """Smaller fleets have less dispatch slack, so their bar is higher."""
    if truck_count < 10:
        return 18
    if truck_count <= 50:
        return 16
    return 15


def compute_fleet_metrics(
    revenue_days: Sequence[int], days_in_period: int
) -> FleetMetrics:
    truck_count = len(revenue_days)
    threshold = low_util_threshold_days(truck_count)

    total = sum(revenue_days)
    available = truck_count * days_in_period
    low_util_count = sum(1 for days in revenue_days if days < threshold)

    return FleetMetrics(
        truck_count=truck_count,
        low_util_threshold_days=threshold,
        total_revenue_days=total,
        available_days=available,
        utilization_rate=total / available if available > 0 else 0.0,
        avg_revenue_days_per_truck=mean(revenue_days),
        low_util_count=low_util_count,
        low_util_pct=low_util_count / truck_count if truck_count else 0.0,
    )


def coefficient_of_variation(std_dev: float, avg: float) -> Optional[float]:
    # Undefined without a positive mean; never report it as zero variance
    if avg > 0:
        return std_dev / avg
    return None


def score_consistency(cv: Optional[float]) -> ConsistencyScore:
    """Penalty-only scoring of per-truck dispersion."""
    if cv is None:
        return ConsistencyScore(penalty=0, band=ConsistencyBand.unknown)
    if cv <= 0.20:
        return ConsistencyScore(penalty=0, band=ConsistencyBand.strong)
    if cv <= 0.35:
        return ConsistencyScore(penalty=-2, band=ConsistencyBand.caution)
    if cv <= 0.50:
        return ConsistencyScore(penalty=-4, band=ConsistencyBand.poor)
    return ConsistencyScore(penalty=-5, band=ConsistencyBand.very_poor)


def trend_slope(first_month_avg: float, last_month_avg: float) -> float:
    """Change in days per truck per month across a three month span."""
    return (last_month_avg - first_month_avg) / 2


def score_trend(slope: float) -> TrendScore:
    if abs(slope) < 0.5:
        return TrendScore(points=0, momentum=TrendMomentum.flat)
    if slope >= 1.0:
        return TrendScore(points=3, momentum=TrendMomentum.improving_strong)
    if slope >= 0.5:
        return TrendScore(points=1, momentum=TrendMomentum.improving_mild)
    if slope <= -1.0:
        return TrendScore(points=-3, momentum=TrendMomentum.declining_strong)
    return TrendScore(points=-1, momentum=TrendMomentum.declining_mild)


def fleet_util_score(raw_score: int) -> int:
    return int(clamp(raw_score, 0, MAX_FLEET_UTIL_SCORE))


def readiness_tier(avg_revenue_days: float) -> ReadinessTier:
    if avg_revenue_days >= 20:
        return ReadinessTier.strong
    if avg_revenue_days >= 18:
        return ReadinessTier.healthy
    if avg_revenue_days >= 15:
        return ReadinessTier.caution
    return ReadinessTier.needs_work


def readiness_flags(avg_revenue_days: float) -> list[str]:
    if avg_revenue_days >= VERY_HIGH_UTILIZATION_DAYS:
        return ["VERY_HIGH_UTILIZATION"]
    return []


def revenue_day_distribution(
    revenue_days: Sequence[int],
) -> RevenueDayDistributionDTO:
    return RevenueDayDistributionDTO(
        ge20=sum(1 for d in revenue_days if d >= 20),
        between_18_and_19=sum(1 for d in revenue_days if 18 <= d <= 19),
        between_15_and_17=sum(1 for d in revenue_days if 15 <= d <= 17),
        lt15=sum(1 for d in revenue_days if d < 15),
    )
