from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.fleet_readiness.expansion_readiness.enums import (
    ConsistencyBand,
    RangeKey,
    ReadinessTier,
    TrendMomentum,
)
from src.fleet_readiness.fleet.enums import TruckStatus

MISSING_DATES_BEHAVIOR = (
    "Revenue days require pickupDate/deliveryDate. "
    "Loads missing both are ignored for utilization days."
)


class FleetUtilizationRequestDTO(BaseModel):
    range: Optional[str] = Field(None, description="month, 90d, 180d or 1y")

    @property
    def range_key(self) -> RangeKey:
        return RangeKey.parse(self.range)


# region Calculation results


class Window(BaseModel):
    start: datetime
    end: datetime


class FleetMetrics(BaseModel):
    truck_count: int
    low_util_threshold_days: int
    total_revenue_days: int
    available_days: int
    utilization_rate: float
    avg_revenue_days_per_truck: float
    low_util_count: int
    low_util_pct: float


class ConsistencyScore(BaseModel):
    penalty: int
    band: ConsistencyBand


class TrendScore(BaseModel):
    points: int
    momentum: TrendMomentum


# endregion

# region Response


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WindowDTO(CamelModel):
    start: datetime
    end: datetime
    days_in_period: int


class FleetDTO(CamelModel):
    truck_count: int
    low_util_threshold_days: int


class OverallUtilizationDTO(CamelModel):
    total_revenue_days: int
    available_days: int
    utilization_rate: float


class TruckRevenueDaysDTO(CamelModel):
    truck_id: str
    unit_number: str
    status: TruckStatus
    revenue_days: int
    is_low_util: bool


class RevenueDaysPerTruckDTO(CamelModel):
    avg_revenue_days_per_truck: float
    by_truck: List[TruckRevenueDaysDTO]


class LowUtilizationDTO(CamelModel):
    low_util_count: int
    low_util_pct: float


class ConsistencyDTO(CamelModel):
    std_dev: float
    cv: Optional[float]
    penalty: int
    band: ConsistencyBand


class TrendMonthDTO(CamelModel):
    month_start: datetime
    avg_revenue_days_per_truck: float


class TrendDTO(CamelModel):
    months: List[TrendMonthDTO]
    slope_days_per_month: float
    points: int
    momentum: TrendMomentum


class PillarsDTO(CamelModel):
    overall_utilization: OverallUtilizationDTO
    revenue_days_per_truck: RevenueDaysPerTruckDTO
    low_utilization: LowUtilizationDTO
    consistency: ConsistencyDTO
    trend: TrendDTO


class ScoreBreakdownDTO(CamelModel):
    pillar1: int
    pillar2: int
    pillar3: int
    pillar4: int
    pillar5: int


class ScoreDTO(CamelModel):
    fleet_util_score: int
    breakdown: ScoreBreakdownDTO


class NotesDTO(CamelModel):
    missing_dates_behavior: str = MISSING_DATES_BEHAVIOR


class FleetUtilizationResponseDTO(CamelModel):
    range: RangeKey
    window: WindowDTO
    fleet: FleetDTO
    pillars: PillarsDTO
    score: ScoreDTO
    notes: NotesDTO = Field(default_factory=NotesDTO)


class RevenueDayDistributionDTO(CamelModel):
    ge20: int
    between_18_and_19: int = Field(..., alias="between18And19")
    between_15_and_17: int = Field(..., alias="between15And17")
    lt15: int


class ExpansionReadinessResponseDTO(CamelModel):
    range: RangeKey
    fleet_utilization: FleetUtilizationResponseDTO
    tier: ReadinessTier
    flags: List[str]
    distribution: RevenueDayDistributionDTO
    overall_score: int
    max_score: int
    ready_to_expand: bool


# endregion
