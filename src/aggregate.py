"""Aggregations feeding the globe choropleth and the weekly heat map."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from src.seasons import Season
from src.transform import FlightRecord

# Alphabetical entity buckets offered by the heat map selector.
COUNTRY_GROUPS: Dict[str, Tuple[str, ...]] = {
    "A to B": ("Austria", "Armenia", "Belgium", "Bosnia Herzegovina", "Bulgaria"),
    "C to F": ("Croatia", "Cyprus", "Czech Republic", "Denmark", "Estonia", "Finland", "France"),
    "G to I": ("Georgia", "Germany", "Greece", "Hungary", "Ireland", "Israel", "Italy"),
    "L to M": ("Latvia", "Lithuania", "Luxembourg", "Malta", "Moldova", "Morocco"),
    "N to R": ("Netherlands", "North Macedonia", "Norway", "Poland", "Portugal", "Romania"),
    "S": ("Serbia & Montenegro", "Slovakia", "Slovenia", "Spain", "Sweden", "Switzerland"),
    "T to Z": ("Turkey", "Ukraine", "United Kingdom", "Total Network Manager Area"),
}


@dataclass(frozen=True)
class WeeklyTotal:
    entity: str
    week: int
    flights: int
    flights_2019: int

    @property
    def ratio(self) -> Optional[float]:
        """Flights relative to the 2019 reference, or None without a baseline."""
        if not self.flights_2019:
            return None
        return self.flights / self.flights_2019

    def to_cell(self) -> Dict[str, object]:
        return {
            "entity": self.entity,
            "week": self.week,
            "flights": self.flights,
            "flights_2019": self.flights_2019,
            "ratio": self.ratio,
        }


def flights_by_entity(records: Iterable[FlightRecord]) -> Dict[str, int]:
    """Total flights per entity, keyed in first-seen order."""
    totals: Dict[str, int] = {}
    for record in records:
        totals[record.entity] = totals.get(record.entity, 0) + record.flights
    return totals


def weekly_totals(records: Iterable[FlightRecord]) -> List[WeeklyTotal]:
    """Sum flights and 2019 reference flights per (entity, week).

    Entities appear in first-seen order, weeks ascending within an entity.
    """
    sums: Dict[str, Dict[int, List[int]]] = {}
    for record in records:
        weeks = sums.setdefault(record.entity, {})
        bucket = weeks.setdefault(record.week, [0, 0])
        bucket[0] += record.flights
        bucket[1] += record.flights_2019 or 0

    return [
        WeeklyTotal(entity=entity, week=week, flights=flights, flights_2019=reference)
        for entity, weeks in sums.items()
        for week, (flights, reference) in sorted(weeks.items())
    ]


def heat_map_cells(
    records: Iterable[FlightRecord],
    season: Season = Season.ALL,
    group: Optional[str] = None,
    groups: Mapping[str, Iterable[str]] = COUNTRY_GROUPS,
) -> List[WeeklyTotal]:
    """Weekly totals inside ``season``'s week span, optionally limited to a country group."""
    members = None
    if group is not None and group != "All":
        if group not in groups:
            raise ValueError(f"unknown country group: {group!r}")
        members = frozenset(groups[group])

    return [
        total
        for total in weekly_totals(records)
        if season.matches_week(total.week) and (members is None or total.entity in members)
    ]


def legend_steps(totals: Mapping[str, int], buckets: int) -> List[int]:
    """Evenly spaced legend values from 0 up to the largest entity total."""
    if buckets < 2:
        raise ValueError("buckets must be at least 2")
    maximum = max(totals.values(), default=0)
    step = maximum / (buckets - 1)
    return [round(index * step) for index in range(buckets)]


__all__ = [
    "COUNTRY_GROUPS",
    "WeeklyTotal",
    "flights_by_entity",
    "heat_map_cells",
    "legend_steps",
    "weekly_totals",
]
