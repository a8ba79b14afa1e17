"""Season definitions used to bucket days and weeks for filtering.

Each concrete season covers an inclusive (month, day) span inside a single
calendar year; Winter is October through December and does not wrap into
January. Classification checks every season explicitly and raises when no
span matches.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Tuple


@dataclass(frozen=True)
class SeasonRange:
    start_month: int
    start_day: int
    end_month: int
    end_day: int

    @property
    def start_key(self) -> int:
        return self.start_month * 100 + self.start_day

    @property
    def end_key(self) -> int:
        return self.end_month * 100 + self.end_day

    def contains(self, value: date) -> bool:
        key = value.month * 100 + value.day
        return self.start_key <= key <= self.end_key


class Season(Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"
    ALL = "All"

    @classmethod
    def parse(cls, text: str) -> "Season":
        """Return the season named ``text`` (case-insensitive)."""
        normalized = (text or "").strip().lower()
        for season in cls:
            if season.value.lower() == normalized:
                return season
        raise ValueError(f"unknown season: {text!r}")

    @property
    def date_range(self) -> SeasonRange:
        return SEASON_RANGES[self]

    @property
    def week_range(self) -> Tuple[int, int]:
        return SEASON_WEEKS[self]

    def matches(self, value: date) -> bool:
        if self is Season.ALL:
            return True
        return season_of(value) is self

    def matches_week(self, week: int) -> bool:
        first, last = self.week_range
        return first <= week <= last


SEASON_RANGES: Dict[Season, SeasonRange] = {
    Season.ALL: SeasonRange(1, 1, 12, 31),
    Season.SPRING: SeasonRange(1, 1, 3, 31),
    Season.SUMMER: SeasonRange(4, 1, 6, 30),
    Season.FALL: SeasonRange(7, 1, 9, 30),
    Season.WINTER: SeasonRange(10, 1, 12, 31),
}

# Week spans used by the weekly heat map; ISO week 53 belongs to Winter.
SEASON_WEEKS: Dict[Season, Tuple[int, int]] = {
    Season.ALL: (1, 53),
    Season.SPRING: (1, 13),
    Season.SUMMER: (14, 26),
    Season.FALL: (27, 39),
    Season.WINTER: (40, 53),
}

CALENDAR_SEASONS: Tuple[Season, ...] = (Season.SPRING, Season.SUMMER, Season.FALL, Season.WINTER)


def season_of(value: date) -> Season:
    """Classify a calendar date into Spring, Summer, Fall or Winter."""
    for season in CALENDAR_SEASONS:
        if SEASON_RANGES[season].contains(value):
            return season
    raise ValueError(f"{value.isoformat()} is not covered by any season range")


__all__ = [
    "CALENDAR_SEASONS",
    "SEASON_RANGES",
    "SEASON_WEEKS",
    "Season",
    "SeasonRange",
    "season_of",
]
