import logging
from datetime import datetime
from typing import List, Optional

import pendulum
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.fleet_readiness.expansion_readiness.enums import RangeKey, ReadinessTier
from src.fleet_readiness.expansion_readiness.metrics import (
    MAX_FLEET_UTIL_SCORE,
    coefficient_of_variation,
    compute_fleet_metrics,
    fleet_util_score,
    mean,
    population_std_dev,
    readiness_flags,
    readiness_tier,
    revenue_day_distribution,
    score_consistency,
    score_trend,
    trend_slope,
)
from src.fleet_readiness.expansion_readiness.revenue_days import RevenueDayAggregator
from src.fleet_readiness.expansion_readiness.schemas import (
    ConsistencyDTO,
    ExpansionReadinessResponseDTO,
    FleetDTO,
    FleetUtilizationResponseDTO,
    LowUtilizationDTO,
    OverallUtilizationDTO,
    PillarsDTO,
    RevenueDaysPerTruckDTO,
    ScoreBreakdownDTO,
    ScoreDTO,
    TrendDTO,
    TrendMonthDTO,
    TruckRevenueDaysDTO,
    Window,
    WindowDTO,
)
from src.fleet_readiness.expansion_readiness.strategies.interface import (
    IPillarScoringStrategy,
)
from src.fleet_readiness.expansion_readiness.windows import (
    days_inclusive,
    month_window,
    resolve_range,
    to_utc,
    trailing_month_starts,
)
from src.fleet_readiness.fleet.repositories.interface import IFleetRepository
from src.fleet_readiness.fleet.schemas import Truck

logger = logging.getLogger(__name__)

TREND_MONTHS = 3


class FleetUtilizationService:
    def __init__(
        self,
        fleet_repo: IFleetRepository,
        pillar_strategy: IPillarScoringStrategy,
    ):
        self.fleet_repo = fleet_repo
        self.pillar_strategy = pillar_strategy

    async def get_fleet_utilization(
        self,
        db_session: AsyncSession,
        company_id: str,
        range_key: RangeKey,
        now: Optional[datetime] = None,
    ) -> FleetUtilizationResponseDTO:
        try:
            return await self._compute(db_session, company_id, range_key, now)

        except SQLAlchemyError as e:
            logger.error(
                "Database error while computing fleet utilization: %s",
                str(e),
                exc_info=True,
            )
            raise RuntimeError(
                "Database error during fleet utilization computation."
            ) from e

        except Exception as e:
            logger.error(
                "Unexpected error during fleet utilization computation: %s",
                str(e),
                exc_info=True,
            )
            raise RuntimeError(
                "Unexpected error during fleet utilization computation."
            ) from e

    async def get_expansion_readiness(
        self,
        db_session: AsyncSession,
        company_id: str,
        range_key: RangeKey,
        now: Optional[datetime] = None,
    ) -> ExpansionReadinessResponseDTO:
        utilization = await self.get_fleet_utilization(
            db_session, company_id, range_key, now
        )
        per_truck = utilization.pillars.revenue_days_per_truck
        revenue_days = [t.revenue_days for t in per_truck.by_truck]
        tier = readiness_tier(per_truck.avg_revenue_days_per_truck)

        return ExpansionReadinessResponseDTO(
            range=utilization.range,
            fleet_utilization=utilization,
            tier=tier,
            flags=readiness_flags(per_truck.avg_revenue_days_per_truck),
            distribution=revenue_day_distribution(revenue_days),
            overall_score=utilization.score.fleet_util_score,
            max_score=MAX_FLEET_UTIL_SCORE,
            ready_to_expand=tier == ReadinessTier.strong,
        )

    async def _compute(
        self,
        db_session: AsyncSession,
        company_id: str,
        range_key: RangeKey,
        now: Optional[datetime],
    ) -> FleetUtilizationResponseDTO:
        now = to_utc(now) if now is not None else pendulum.now("UTC")
        window = resolve_range(range_key, now)
        days_in_period = days_inclusive(window.start, window.end)
        logger.info(
            "Computing fleet utilization for company %s, range %s (%s to %s)",
            company_id,
            range_key.value,
            window.start,
            window.end,
        )

        trucks = await self.fleet_repo.list_trucks(db_session, company_id)
        aggregator = await self._aggregate(db_session, company_id, trucks, window)
        revenue_days = aggregator.counts
        metrics = compute_fleet_metrics(revenue_days, days_in_period)

        std_dev = population_std_dev(revenue_days)
        cv = coefficient_of_variation(std_dev, metrics.avg_revenue_days_per_truck)
        consistency = score_consistency(cv)

        months: List[TrendMonthDTO] = []
        for month_start in trailing_month_starts(now, TREND_MONTHS):
            avg = await self._average_revenue_days_for_month(
                db_session, company_id, month_start
            )
            months.append(
                TrendMonthDTO(month_start=month_start, avg_revenue_days_per_truck=avg)
            )
        slope = trend_slope(
            months[0].avg_revenue_days_per_truck,
            months[-1].avg_revenue_days_per_truck,
        )
        trend = score_trend(slope)

        pillar1 = self.pillar_strategy.score_overall_utilization(
            metrics.utilization_rate
        )
        pillar2 = self.pillar_strategy.score_revenue_days_per_truck(
            metrics.avg_revenue_days_per_truck
        )
        pillar3 = self.pillar_strategy.score_low_utilization(metrics.low_util_pct)
        raw_score = pillar1 + pillar2 + pillar3 + consistency.penalty + trend.points

        return FleetUtilizationResponseDTO(
            range=range_key,
            window=WindowDTO(
                start=window.start, end=window.end, days_in_period=days_in_period
            ),
            fleet=FleetDTO(
                truck_count=metrics.truck_count,
                low_util_threshold_days=metrics.low_util_threshold_days,
            ),
            pillars=PillarsDTO(
                overall_utilization=OverallUtilizationDTO(
                    total_revenue_days=metrics.total_revenue_days,
                    available_days=metrics.available_days,
                    utilization_rate=metrics.utilization_rate,
                ),
                revenue_days_per_truck=RevenueDaysPerTruckDTO(
                    avg_revenue_days_per_truck=metrics.avg_revenue_days_per_truck,
                    by_truck=[
                        TruckRevenueDaysDTO(
                            truck_id=truck.id,
                            unit_number=truck.unit_number,
                            status=truck.status,
                            revenue_days=days,
                            is_low_util=days < metrics.low_util_threshold_days,
                        )
                        for truck, days in zip(trucks, revenue_days)
                    ],
                ),
                low_utilization=LowUtilizationDTO(
                    low_util_count=metrics.low_util_count,
                    low_util_pct=metrics.low_util_pct,
                ),
                consistency=ConsistencyDTO(
                    std_dev=std_dev,
                    cv=cv,
                    penalty=consistency.penalty,
                    band=consistency.band,
                ),
                trend=TrendDTO(
                    months=months,
                    slope_days_per_month=slope,
                    points=trend.points,
                    momentum=trend.momentum,
                ),
            ),
            score=ScoreDTO(
                fleet_util_score=fleet_util_score(raw_score),
                breakdown=ScoreBreakdownDTO(
                    pillar1=pillar1,
                    pillar2=pillar2,
                    pillar3=pillar3,
                    pillar4=consistency.penalty,
                    pillar5=trend.points,
                ),
            ),
        )

    async def _aggregate(
        self,
        db_session: AsyncSession,
        company_id: str,
        trucks: List[Truck],
        window: Window,
    ) -> RevenueDayAggregator:
        loads = await self.fleet_repo.list_loads_overlapping(
            db_session, company_id, window.start, window.end
        )
        aggregator = RevenueDayAggregator((t.id for t in trucks), window)
        return aggregator.add_loads(loads)

    async def _average_revenue_days_for_month(
        self, db_session: AsyncSession, company_id: str, month_start: datetime
    ) -> float:
        trucks = await self.fleet_repo.list_trucks(db_session, company_id)
        aggregator = await self._aggregate(
            db_session, company_id, trucks, month_window(month_start)
        )
        return mean(aggregator.counts)
