"""Transform year-scoped flight-count CSV text into structured records."""

import csv
import datetime
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from src.dates import parse_day

LOGGER = logging.getLogger(__name__)

DELIMITER = ","
REQUIRED_FIELDS = 4
MAX_WEEK = 53

# Column positions in the source files.
ENTITY, WEEK, DAY, FLIGHTS = 0, 1, 2, 3
DAY_2019, FLIGHTS_2019, PERCENT_VS_2019 = 4, 5, 6
DAY_PREVIOUS_YEAR, FLIGHTS_PREVIOUS_YEAR = 7, 8


def _field(row: List[str], index: int) -> Optional[str]:
    if index >= len(row):
        return None
    value = row[index].strip()
    return value or None


def _to_optional_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        # exports occasionally write counts as "123.0"
        try:
            number = float(value)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None


def _to_optional_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.rstrip("%"))
    except ValueError:
        return None


@dataclass(frozen=True)
class FlightRecord:
    """One entity/day observation of flights flown."""

    entity: str
    week: int
    day: str
    flights: int
    day_2019: Optional[str] = None
    flights_2019: Optional[int] = None
    percent_vs_2019: Optional[float] = None
    day_previous_year: Optional[str] = None
    flights_previous_year: Optional[int] = None
    date: datetime.date = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", parse_day(self.day))

    def to_point(self) -> Dict[str, Any]:
        return {
            "entity": self.entity,
            "week": self.week,
            "day": self.day,
            "flights": self.flights,
        }


@dataclass(frozen=True)
class FlightDataset:
    """Immutable set of records loaded for a single year."""

    year: str
    records: Tuple[FlightRecord, ...] = ()
    dropped: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


def _reject(line_number: int, reason: str, row: List[str]) -> None:
    LOGGER.debug("Dropping line %s (%s): %r", line_number, reason, row)


def parse_row(row: List[str], line_number: int = 0) -> Optional[FlightRecord]:
    """Build a record from one CSV row, or return None if the row is unusable."""
    if len(row) < REQUIRED_FIELDS:
        _reject(line_number, f"expected {REQUIRED_FIELDS} fields, got {len(row)}", row)
        return None

    entity = _field(row, ENTITY)
    if not entity:
        _reject(line_number, "empty entity", row)
        return None

    day = _field(row, DAY) or ""
    try:
        parse_day(day)
    except ValueError:
        _reject(line_number, "invalid date", row)
        return None

    week = _to_optional_int(_field(row, WEEK))
    if week is None or not 1 <= week <= MAX_WEEK:
        _reject(line_number, "invalid week", row)
        return None

    flights = _to_optional_int(_field(row, FLIGHTS))
    if flights is None or flights < 0:
        _reject(line_number, "invalid flights", row)
        return None

    return FlightRecord(
        entity=entity,
        week=week,
        day=day,
        flights=flights,
        day_2019=_field(row, DAY_2019),
        flights_2019=_to_optional_int(_field(row, FLIGHTS_2019)),
        percent_vs_2019=_to_optional_float(_field(row, PERCENT_VS_2019)),
        day_previous_year=_field(row, DAY_PREVIOUS_YEAR),
        flights_previous_year=_to_optional_int(_field(row, FLIGHTS_PREVIOUS_YEAR)),
    )


def _split_line(line: str) -> List[str]:
    return next(csv.reader([line], delimiter=DELIMITER, strict=True))


def parse_flight_csv(text: str, *, year: str = "") -> FlightDataset:
    """Parse CSV text (header line first) into a ``FlightDataset``.

    Each physical line is one row; quoting is honoured within a line but never
    spans lines. Rows with fewer than four fields, broken quoting, an invalid
    day, an empty entity or a non-numeric week/flights value are dropped and
    logged; they never abort the parse.
    """
    records: List[FlightRecord] = []
    dropped = 0

    for line_number, line in enumerate(text.splitlines(), start=1):
        if line_number == 1 or not line.strip():
            continue
        try:
            row = _split_line(line)
        except csv.Error as exc:
            _reject(line_number, f"malformed csv: {exc}", [line[:200]])
            dropped += 1
            continue
        record = parse_row(row, line_number)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    LOGGER.info("Parsed year=%s kept=%s dropped=%s", year or "?", len(records), dropped)
    return FlightDataset(year=year, records=tuple(records), dropped=dropped)


__all__ = ["FlightDataset", "FlightRecord", "parse_flight_csv", "parse_row"]
