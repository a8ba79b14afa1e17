"""Year loader: fetch one year's CSV and parse it into a dataset."""

import logging
from typing import Iterable

import requests

from src.api import DatasetClient
from src.logging_utils import perf, perf_span
from src.transform import FlightDataset, parse_flight_csv

LOGGER = logging.getLogger(__name__)


class YearLoader:
    """Loads a ``FlightDataset`` for a supported year.

    Fetch failures are reported as an empty dataset; they are logged, not raised.
    """

    def __init__(self, client: DatasetClient, supported_years: Iterable[str]) -> None:
        self._client = client
        self._supported_years = tuple(supported_years)
        if not self._supported_years:
            raise ValueError("supported_years must not be empty")

    @property
    def supported_years(self):
        return self._supported_years

    def check_year(self, year: str) -> str:
        normalized = str(year).strip()
        if normalized not in self._supported_years:
            raise ValueError(
                f"unsupported year {year!r}; expected one of {', '.join(self._supported_years)}"
            )
        return normalized

    @perf("jobs.load_year", tags={"component": "jobs"})
    def load(self, year: str) -> FlightDataset:
        year = self.check_year(year)
        try:
            text = self._client.fetch_csv(year)
        except (requests.RequestException, OSError, UnicodeDecodeError) as exc:
            LOGGER.error(
                "Failed to load data for year %s from %s: %s",
                year,
                self._client.resource_for(year),
                exc,
            )
            return FlightDataset(year=year)

        with perf_span("jobs.parse_csv", tags={"year": year}, logger=LOGGER):
            dataset = parse_flight_csv(text, year=year)

        if dataset.is_empty:
            LOGGER.warning("No valid rows for year %s (dropped=%s)", year, dataset.dropped)
        return dataset


__all__ = ["YearLoader"]
