import logging
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional, Set

from pendulum import DateTime

from src.fleet_readiness.expansion_readiness.schemas import Window
from src.fleet_readiness.expansion_readiness.windows import start_of_day, to_utc
from src.fleet_readiness.fleet.schemas import Load

logger = logging.getLogger(__name__)


def day_key(day: datetime) -> str:
    return to_utc(day).to_date_string()


def load_span(load: Load) -> Optional[tuple[DateTime, DateTime]]:
    """
    First and last UTC day of a load. A missing date is borrowed from the
    other one; loads with neither date have no span.
    """
    first = load.pickup_date if load.pickup_date is not None else load.delivery_date
    last = load.delivery_date if load.delivery_date is not None else load.pickup_date
    if first is None or last is None:
        return None
    return start_of_day(first), start_of_day(last)


def iter_load_days(load: Load) -> Iterator[DateTime]:
    span = load_span(load)
    if span is None:
        return

    day, last = span
    # Reversed dates are walked backwards
    step = 1 if day <= last else -1
    while (day <= last) if step > 0 else (day >= last):
        yield day
        day = day.add(days=step)


class RevenueDayAggregator:
    """Collects the distinct calendar days each tracked truck spent under load."""

    def __init__(self, truck_ids: Iterable[str], window: Window):
        self.window = window
        self.truck_ids: List[str] = list(truck_ids)
        self._day_sets: Dict[str, Set[str]] = {tid: set() for tid in self.truck_ids}

    def add_load(self, load: Load) -> None:
        day_set = self._day_sets.get(load.truck_id) if load.truck_id else None
        if day_set is None:
            logger.debug(
                "Skipping load %s for untracked truck %s", load.id, load.truck_id
            )
            return

        if load_span(load) is None:
            logger.debug("Skipping load %s without pickup or delivery date", load.id)
            return

        for day in iter_load_days(load):
            if self.window.start <= day <= self.window.end:
                day_set.add(day_key(day))

    def add_loads(self, loads: Iterable[Load]) -> "RevenueDayAggregator":
        for load in loads:
            self.add_load(load)
        return self

    def days_for(self, truck_id: str) -> Set[str]:
        return set(self._day_sets.get(truck_id, ()))

    @property
    def by_truck(self) -> Dict[str, int]:
        return {tid: len(days) for tid, days in self._day_sets.items()}

    @property
    def counts(self) -> List[int]:
        return [len(self._day_sets[tid]) for tid in self.truck_ids]
