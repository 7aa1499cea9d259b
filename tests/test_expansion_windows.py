import pendulum
import pytest

from src.fleet_readiness.expansion_readiness.enums import RangeKey
from src.fleet_readiness.expansion_readiness.windows import (
    days_inclusive,
    end_of_day,
    month_window,
    resolve_range,
    trailing_month_starts,
)
from tests.mocks.fleet_mocks import utc


@pytest.mark.parametrize(
    "value, expected",
    [
        ("month", RangeKey.month),
        ("90d", RangeKey.days_90),
        ("180d", RangeKey.days_180),
        ("1y", RangeKey.year),
        (None, RangeKey.month),
        ("365d", RangeKey.month),
        ("", RangeKey.month),
    ],
)
def test_range_key_parse(value, expected):
    assert RangeKey.parse(value) == expected


def test_month_window_covers_whole_calendar_month():
    window = resolve_range(RangeKey.month, utc(2025, 1, 15, 12))

    assert window.start == utc(2025, 1, 1)
    assert window.end == pendulum.datetime(2025, 1, 31, 23, 59, 59, 999000, tz="UTC")
    assert days_inclusive(window.start, window.end) == 31


def test_month_window_in_leap_february():
    window = month_window(utc(2024, 2, 10))

    assert window.end.day == 29
    assert days_inclusive(window.start, window.end) == 29


@pytest.mark.parametrize(
    "range_key, days",
    [(RangeKey.days_90, 90), (RangeKey.days_180, 180), (RangeKey.year, 365)],
)
def test_rolling_windows_contain_exact_day_count(range_key, days):
    now = utc(2025, 3, 31, 8)
    window = resolve_range(range_key, now)

    assert window.end == end_of_day(now)
    assert days_inclusive(window.start, window.end) == days


def test_rolling_window_start_keeps_end_of_day_time():
    window = resolve_range(RangeKey.days_90, utc(2025, 3, 31, 8))

    assert window.start == pendulum.datetime(
        2025, 1, 1, 23, 59, 59, 999000, tz="UTC"
    )


def test_window_uses_utc_calendar_not_local_time():
    # 20:00 in Chicago on Jan 31 is already Feb 1 in UTC
    now = pendulum.datetime(2025, 1, 31, 20, tz="America/Chicago")
    window = resolve_range(RangeKey.month, now)

    assert window.start == utc(2025, 2, 1)
    assert days_inclusive(window.start, window.end) == 28


def test_days_inclusive_ignores_time_of_day():
    assert days_inclusive(utc(2025, 1, 1, 23, 59), utc(2025, 1, 2, 0, 1)) == 2
    assert days_inclusive(utc(2025, 1, 1), utc(2025, 1, 1, 23)) == 1


def test_trailing_month_starts_cross_year_boundary():
    starts = trailing_month_starts(utc(2025, 1, 15, 12))

    assert starts == [utc(2024, 11, 1), utc(2024, 12, 1), utc(2025, 1, 1)]
