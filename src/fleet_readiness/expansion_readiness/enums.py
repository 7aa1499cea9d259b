from enum import Enum
from typing import Optional


class RangeKey(str, Enum):
    month = "month"
    days_90 = "90d"
    days_180 = "180d"
    year = "1y"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RangeKey":
        """Unknown or missing range keywords fall back to the current month."""
        try:
            return cls(value)
        except ValueError:
            return cls.month


class ConsistencyBand(str, Enum):
    unknown = "unknown"
    strong = "strong"
    caution = "caution"
    poor = "poor"
    very_poor = "very_poor"


class TrendMomentum(str, Enum):
    flat = "FLAT"
    improving_strong = "IMPROVING_STRONG"
    improving_mild = "IMPROVING_MILD"
    declining_strong = "DECLINING_STRONG"
    declining_mild = "DECLINING_MILD"


class ReadinessTier(str, Enum):
    strong = "STRONG"
    healthy = "HEALTHY"
    caution = "CAUTION"
    needs_work = "NEEDS_WORK"
