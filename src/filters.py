"""Record filtering by entity, season and explicit date range.

Typical use from a chart:

    criteria = FilterCriteria(entity="Germany", season=Season.SUMMER)
    series = filter_records(dataset.records, criteria)

An explicit ``date_range`` takes precedence over the season. Results are
always a new list sorted by calendar day; equal days keep their input order.
"""

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from src.dates import DayLike, coerce_day
from src.seasons import Season
from src.transform import FlightRecord

ALL_ENTITIES = "All"

EntitySelector = Union[str, Iterable[str]]


def _normalize_entities(entity: EntitySelector) -> Optional[FrozenSet[str]]:
    if isinstance(entity, str):
        if entity == ALL_ENTITIES:
            return None
        return frozenset([entity])
    return frozenset(entity)


@dataclass(frozen=True)
class FilterCriteria:
    """Selection applied to a year's records.

    Args:
        entity: ``"All"``, a single entity name, or a collection of names.
        season: Season to keep; ``Season.ALL`` keeps every day.
        date_range: Optional inclusive ``(start, end)`` as ``date`` objects or
            ``DD/MM/YYYY`` strings; overrides ``season`` when given.
    """

    entity: EntitySelector = ALL_ENTITIES
    season: Season = Season.ALL
    date_range: Optional[Tuple[DayLike, DayLike]] = None

    def __post_init__(self) -> None:
        if isinstance(self.season, str):
            object.__setattr__(self, "season", Season.parse(self.season))
        if not isinstance(self.entity, str):
            object.__setattr__(self, "entity", _normalize_entities(self.entity))
        if self.date_range is not None:
            start, end = (coerce_day(value) for value in self.date_range)
            if start > end:
                raise ValueError(f"date_range start {start} is after end {end}")
            object.__setattr__(self, "date_range", (start, end))

    @property
    def entities(self) -> Optional[FrozenSet[str]]:
        """Entities to keep, or None for no entity restriction."""
        return _normalize_entities(self.entity)

    def matches(self, record: FlightRecord) -> bool:
        entities = self.entities
        if entities is not None and record.entity not in entities:
            return False
        if self.date_range is not None:
            start, end = self.date_range
            return start <= record.date <= end
        return self.season.matches(record.date)


def filter_records(records: Iterable[FlightRecord], criteria: FilterCriteria) -> List[FlightRecord]:
    """Return the records passing ``criteria``, sorted ascending by day."""
    kept = [record for record in records if criteria.matches(record)]
    # list.sort is stable, so equal days keep input order
    kept.sort(key=lambda record: record.date)
    return kept


def default_date_range(year: Union[str, int]) -> Tuple[date, date]:
    """Full calendar span of ``year``."""
    year_number = int(year)
    return date(year_number, 1, 1), date(year_number, 12, 31)


def entities(records: Iterable[FlightRecord]) -> List[str]:
    """Distinct entity names in first-seen order."""
    seen = {}
    for record in records:
        seen.setdefault(record.entity, None)
    return list(seen)


__all__ = [
    "ALL_ENTITIES",
    "FilterCriteria",
    "default_date_range",
    "entities",
    "filter_records",
]
