"""Client for the static per-year flight-count CSV files.

The data source is either an ``http(s)://`` base URL, fetched through a
Requests session, or a local directory holding the same ``csv<year>.csv``
files.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from src.logging_utils import perf

LOGGER = logging.getLogger(__name__)

FILE_TEMPLATE = "csv{year}.csv"
HEADERS = {"accept": "text/csv, text/plain;q=0.9, */*;q=0.1"}


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class DatasetClient:
    """Fetches the raw CSV text for a given year."""

    def __init__(
        self,
        source: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the client.

        Args:
            source: Base URL or directory containing ``csv<year>.csv`` files.
            session: Optional pre-configured Requests session (remote sources only).
            timeout: Per-request timeout in seconds.
        """
        if not source:
            raise ValueError("source must be provided")
        self._source = source.rstrip("/") if _is_remote(source) else source
        self._session: Optional[requests.Session] = session
        if self._session is None and _is_remote(self._source):
            self._session = requests.Session()
        self._timeout = timeout

    @property
    def source(self) -> str:
        return self._source

    def resource_for(self, year: str) -> str:
        file_name = FILE_TEMPLATE.format(year=year)
        if _is_remote(self._source):
            return f"{self._source}/{file_name}"
        return str(Path(self._source) / file_name)

    @perf("api.fetch_csv", tags={"component": "api"})
    def fetch_csv(self, year: str) -> str:
        """Return the CSV text for ``year``.

        Raises:
            ValueError: If ``year`` is empty.
            requests.RequestException: On transport errors or non-2xx responses.
            OSError: If a local file cannot be read.
        """
        if not year:
            raise ValueError("year must be provided")

        resource = self.resource_for(year)
        LOGGER.debug("api.fetch_csv year=%s resource=%s", year, resource)

        if not _is_remote(self._source):
            return Path(resource).read_text(encoding="utf-8-sig")

        response = self._session.get(resource, headers=HEADERS, timeout=self._timeout)
        response.raise_for_status()
        # Static hosts often omit the charset; CSV exports are UTF-8.
        if not response.encoding or response.encoding.lower() == "iso-8859-1":
            response.encoding = "utf-8"
        return response.text.lstrip("\ufeff")

    def close(self) -> None:
        if self._session is not None:
            self._session.close()

    def __enter__(self) -> "DatasetClient":
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()


__all__ = ["DatasetClient", "FILE_TEMPLATE", "HEADERS"]
