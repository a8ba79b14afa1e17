"""Clients for retrieving the raw flight-count datasets."""

from src.api.dataset_client import DatasetClient

__all__ = ["DatasetClient"]
