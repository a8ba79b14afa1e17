"""Transformation helpers for flight-count datasets."""

from src.transform.flights import FlightDataset, FlightRecord, parse_flight_csv, parse_row

__all__ = ["FlightDataset", "FlightRecord", "parse_flight_csv", "parse_row"]
