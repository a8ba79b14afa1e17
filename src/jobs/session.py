"""Current-selection state for the dashboard: one dataset slot, latest year wins.

Each ``select_year`` call is tagged with a generation number. Loading runs in
a worker thread and is the only suspension point; when it completes, the
result is installed only if no newer selection has been made in the meantime.
"""

import asyncio
import logging
from typing import List, Optional

from src.filters import FilterCriteria, filter_records
from src.jobs.loader import YearLoader
from src.logging_utils import perf
from src.transform import FlightDataset, FlightRecord

LOGGER = logging.getLogger(__name__)


class DatasetSession:
    def __init__(self, loader: YearLoader) -> None:
        self._loader = loader
        self._generation = 0
        self._requested_year: Optional[str] = None
        self._dataset: Optional[FlightDataset] = None

    @property
    def requested_year(self) -> Optional[str]:
        return self._requested_year

    @property
    def dataset(self) -> Optional[FlightDataset]:
        return self._dataset

    @property
    def year(self) -> Optional[str]:
        return self._dataset.year if self._dataset is not None else None

    @perf("jobs.select_year", tags={"component": "jobs"})
    async def select_year(self, year: str) -> bool:
        """Load ``year`` and make it current unless superseded.

        Returns True when this call's result was installed, False when a newer
        selection made it stale.
        """
        year = self._loader.check_year(year)
        self._generation += 1
        generation = self._generation
        self._requested_year = year

        dataset = await asyncio.to_thread(self._loader.load, year)

        if generation != self._generation:
            LOGGER.debug(
                "Discarding stale dataset for year %s (generation %s, current %s)",
                year,
                generation,
                self._generation,
            )
            return False

        self._dataset = dataset
        LOGGER.info("Selected year %s with %s records", year, len(dataset))
        return True

    def filtered(self, criteria: FilterCriteria) -> List[FlightRecord]:
        if self._dataset is None:
            return []
        return filter_records(self._dataset.records, criteria)


__all__ = ["DatasetSession"]
