"""Loading and selection of per-year datasets."""

from src.jobs.loader import YearLoader
from src.jobs.session import DatasetSession

__all__ = ["DatasetSession", "YearLoader"]
