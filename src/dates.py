"""Helpers for the ``DD/MM/YYYY`` day strings used throughout the datasets."""

import logging
from datetime import date
from typing import Union

LOGGER = logging.getLogger(__name__)

DayLike = Union[str, date]


def parse_day(text: str) -> date:
    """Parse ``DD/MM/YYYY`` into a ``date``.

    Raises:
        ValueError: If the text is not three ``/``-separated integers or does
            not denote a real calendar date (e.g. ``31/02/2020``).
    """
    parts = text.strip().split("/")
    if len(parts) != 3 or not all(part.strip().isdigit() for part in parts):
        raise ValueError(f"expected DD/MM/YYYY, got {text!r}")
    day, month, year = (int(part) for part in parts)
    # date() rejects day-of-month overflow instead of rolling into the next month
    return date(year, month, day)


def is_valid_date(text: str) -> bool:
    """Return True when ``text`` is a ``DD/MM/YYYY`` string naming a real date."""
    try:
        parse_day(text)
    except ValueError:
        LOGGER.debug("Rejected date %r", text)
        return False
    return True


def format_day(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def coerce_day(value: DayLike) -> date:
    """Accept either a ``date`` or a ``DD/MM/YYYY`` string."""
    if isinstance(value, date):
        return value
    return parse_day(value)


__all__ = ["DayLike", "coerce_day", "format_day", "is_valid_date", "parse_day"]
