"""
Calendar windows for utilization analytics.

All arithmetic is anchored to UTC so results never depend on the server's
local timezone. Window ends carry millisecond precision (23:59:59.999).
"""

from datetime import datetime
from typing import List

import pendulum
from pendulum import DateTime

from src.fleet_readiness.expansion_readiness.enums import RangeKey
from src.fleet_readiness.expansion_readiness.schemas import Window

ROLLING_RANGE_DAYS = {
    RangeKey.days_90: 90,
    RangeKey.days_180: 180,
    RangeKey.year: 365,
}


def to_utc(moment: datetime) -> DateTime:
    # Naive datetimes are read as UTC
    return pendulum.instance(moment, tz="UTC").in_timezone("UTC")


def start_of_day(moment: datetime) -> DateTime:
    return to_utc(moment).start_of("day")


def end_of_day(moment: datetime) -> DateTime:
    return start_of_day(moment).replace(
        hour=23, minute=59, second=59, microsecond=999000
    )


def days_inclusive(start: datetime, end: datetime) -> int:
    return to_utc(end).toordinal() - to_utc(start).toordinal() + 1


def month_window(moment: datetime) -> Window:
    start = to_utc(moment).start_of("month")
    end = end_of_day(start.end_of("month"))
    return Window(start=start, end=end)


def resolve_range(range_key: RangeKey, now: datetime) -> Window:
    if range_key == RangeKey.month:
        return month_window(now)

    days_back = ROLLING_RANGE_DAYS[range_key]
    end = end_of_day(now)
    start = end.subtract(days=days_back - 1)
    return Window(start=start, end=end)


def trailing_month_starts(now: datetime, count: int = 3) -> List[DateTime]:
    """First instants of the last `count` calendar months, oldest first."""
    current = to_utc(now).start_of("month")
    return [current.subtract(months=offset) for offset in range(count - 1, -1, -1)]
