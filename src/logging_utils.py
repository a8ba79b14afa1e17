"""Centralized logging utilities for dashboard data runs.

This module also provides lightweight performance monitoring helpers:

- ``perf``: a decorator to time sync/async functions and log one structured line
  with the duration and success state.
- ``perf_span``: a context manager to time arbitrary code blocks and log the
  same structured line.

Both helpers write to the logger hierarchy configured by ``configure_logging``
so fetch and parse timings land in the per-run log file under ``logs/``.
"""

import functools
import inspect
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TextIO

from src.config import AppConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [run=%(run_id)s] %(message)s"
PERF_MESSAGE = "event=perf name=%s duration_ms=%.3f success=%s tags=%s"


class _RunContextFilter(logging.Filter):
    """Stamp every log record with the current run identifier."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self._run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self._run_id
        return True


def _sanitize_run_id(run_id: str) -> str:
    return "".join(ch if ch.isalnum() or ch in ("-", "_") else "-" for ch in run_id)


def generate_run_id() -> str:
    """Return a default run identifier based on the current UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def configure_logging(
    config: AppConfig,
    run_id: Optional[str] = None,
    include_console: bool = True,
    fmt: str = DEFAULT_LOG_FORMAT,
    stream: Optional[TextIO] = None,
) -> Path:
    """Install a run-scoped file handler (and optionally a console stream) on the root logger.

    Returns the path of the log file for this run.
    """
    resolved_run_id = run_id or generate_run_id()

    log_dir = config.log_directory
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{config.app_name}-{_sanitize_run_id(resolved_run_id)}.log"

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.FileHandler(log_path, encoding="utf-8")]
    if include_console:
        handlers.append(logging.StreamHandler(stream or sys.stdout))

    run_filter = _RunContextFilter(resolved_run_id)
    for handler in handlers:
        handler.setFormatter(logging.Formatter(fmt))
        handler.addFilter(run_filter)
        root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    return log_path


def _format_tags(tags: Optional[Mapping[str, Any]]) -> str:
    if not tags:
        return "{}"
    items = ", ".join(f"{k}={tags[k]!r}" for k in sorted(tags))
    return "{" + items + "}"


def _elapsed_ms(start_ns: int) -> float:
    return (time.monotonic_ns() - start_ns) / 1_000_000.0


def perf(
    name: Optional[str] = None,
    *,
    tags: Optional[Mapping[str, Any]] = None,
    level: int = logging.INFO,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that logs execution time of a function or coroutine function.

    Args:
        name: Optional span name; defaults to ``<module>.<func>``.
        tags: Optional mapping of additional metadata to include in the log.
        level: Logging level to use (defaults to ``logging.INFO``).
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        span_name = name or f"{func.__module__}.{func.__qualname__}"
        logger = logging.getLogger(func.__module__)

        def _log(duration_ms: float, success: bool) -> None:
            logger.log(level, PERF_MESSAGE, span_name, duration_ms, str(success).lower(), _format_tags(tags))

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start_ns = time.monotonic_ns()
                try:
                    result = await func(*args, **kwargs)
                except Exception:
                    _log(_elapsed_ms(start_ns), False)
                    raise
                _log(_elapsed_ms(start_ns), True)
                return result

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_ns = time.monotonic_ns()
            try:
                result = func(*args, **kwargs)
            except Exception:
                _log(_elapsed_ms(start_ns), False)
                raise
            _log(_elapsed_ms(start_ns), True)
            return result

        return sync_wrapper

    return decorator


class perf_span:
    """Context manager to time an arbitrary code block and log its duration.

    Example:
        with perf_span("parse.csv", tags={"year": "2021"}):
            records = parse_flight_csv(text)
    """

    def __init__(
        self,
        name: str,
        *,
        tags: Optional[Mapping[str, Any]] = None,
        level: int = logging.INFO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._tags = tags or {}
        self._level = level
        self._logger = logger or logging.getLogger(__name__)
        self._start_ns: Optional[int] = None

    def __enter__(self) -> "perf_span":
        self._start_ns = time.monotonic_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        start_ns = self._start_ns if self._start_ns is not None else time.monotonic_ns()
        self._logger.log(
            self._level,
            PERF_MESSAGE,
            self._name,
            _elapsed_ms(start_ns),
            str(exc_type is None).lower(),
            _format_tags(self._tags),
        )
        return False


__all__ = [
    "configure_logging",
    "generate_run_id",
    "DEFAULT_LOG_FORMAT",
    "perf",
    "perf_span",
]
