#!/usr/bin/env python3
"""Command-line entrypoint exporting a year's filtered flight data as JSON."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from src.aggregate import COUNTRY_GROUPS, flights_by_entity, heat_map_cells, legend_steps
from src.api import DatasetClient
from src.config import AppConfig, REPO_ROOT, load_config
from src.filters import ALL_ENTITIES, FilterCriteria
from src.jobs import DatasetSession, YearLoader
from src.logging_utils import configure_logging, perf_span
from src.seasons import Season

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_NO_DATA = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export filtered flight counts for one year.")
    parser.add_argument("year", help="Dataset year (e.g., 2021).")
    parser.add_argument(
        "--entity",
        action="append",
        default=None,
        help="Entity to keep; repeat for comparison mode (default: all entities).",
    )
    parser.add_argument(
        "--season",
        default="All",
        help="Spring, Summer, Fall, Winter or All (default: All).",
    )
    parser.add_argument("--start", default=None, help="Inclusive start day, DD/MM/YYYY.")
    parser.add_argument("--end", default=None, help="Inclusive end day, DD/MM/YYYY.")
    parser.add_argument(
        "--summary",
        choices=("series", "totals", "heatmap"),
        default="series",
        help="Output shape: daily series, per-entity totals, or weekly heat-map cells.",
    )
    parser.add_argument("--group", default=None, help="Country group for --summary heatmap.")
    parser.add_argument(
        "--legend-buckets",
        type=int,
        default=6,
        help="Legend steps included with --summary totals (default: 6).",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not echo logs to stderr.")
    return parser.parse_args(argv)


def build_criteria(args: argparse.Namespace) -> FilterCriteria:
    if (args.start is None) != (args.end is None):
        raise ValueError("--start and --end must be given together")
    date_range = (args.start, args.end) if args.start is not None else None
    entity = args.entity if args.entity else ALL_ENTITIES
    if args.summary == "heatmap" and args.group not in (None, "All") and args.group not in COUNTRY_GROUPS:
        raise ValueError(f"unknown country group: {args.group!r}")
    if isinstance(entity, list) and len(entity) == 1:
        entity = entity[0]
    return FilterCriteria(entity=entity, season=Season.parse(args.season), date_range=date_range)


def render(
    session: DatasetSession, args: argparse.Namespace, criteria: FilterCriteria
) -> Dict[str, Any]:
    records = session.filtered(criteria)
    payload: Dict[str, Any] = {"year": session.year, "count": len(records)}

    if args.summary == "series":
        payload["series"] = [record.to_point() for record in records]
    elif args.summary == "totals":
        totals = flights_by_entity(records)
        payload["totals"] = totals
        payload["legend"] = legend_steps(totals, args.legend_buckets)
    else:
        # Season applies to weeks here, so filter only by entity/date.
        unseasoned = FilterCriteria(entity=criteria.entity, date_range=criteria.date_range)
        cells: List[Dict[str, Any]] = [
            cell.to_cell()
            for cell in heat_map_cells(session.filtered(unseasoned), criteria.season, args.group)
        ]
        payload["cells"] = cells
        payload["count"] = len(cells)
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config()
    except ValueError as exc:
        fallback = AppConfig(
            data_source=str(REPO_ROOT / "dataset"),
            log_directory=REPO_ROOT / "logs",
            log_level="INFO",
        )
        configure_logging(fallback, include_console=not args.quiet, stream=sys.stderr)
        LOGGER.error("Failed to load configuration: %s", exc)
        return EXIT_CONFIG

    configure_logging(config, include_console=not args.quiet, stream=sys.stderr)

    with DatasetClient(config.data_source, timeout=config.request_timeout) as client:
        session = DatasetSession(YearLoader(client, config.supported_years))
        try:
            criteria = build_criteria(args)
            with perf_span("export.total", tags={"year": args.year}, logger=LOGGER):
                asyncio.run(session.select_year(args.year))
                payload = render(session, args, criteria)
        except ValueError as exc:
            LOGGER.error("Invalid selection: %s", exc)
            return EXIT_CONFIG

    if session.dataset is None or session.dataset.is_empty:
        LOGGER.warning("No data available for year %s", args.year)
        return EXIT_NO_DATA

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
