"""Configuration utilities for the air-traffic statistics pipeline.

This module reads environment variables (optionally from an `.env` file) and
produces an application configuration object consumed across the project.

See `.env.example` for supported keys: `DATA_SOURCE`, `SUPPORTED_YEARS`,
`REQUEST_TIMEOUT`, `LOG_DIR`, `LOG_LEVEL`, and optional `APP_NAME`.

Usage example:

    from src.config import load_config

    config = load_config()
    client = DatasetClient(config.data_source, timeout=config.request_timeout)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_ENV_FILE = REPO_ROOT / ".env"
DEFAULT_DATA_DIR = REPO_ROOT / "dataset"
DEFAULT_YEARS: Tuple[str, ...] = ("2020", "2021", "2022", "2023")


def _load_env_file(path: Path) -> Dict[str, str]:
    """Parse a dotenv-style file into a dictionary."""
    if not path.exists():
        return {}

    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip("\"'")
    return data


def _merge_envs(dotenv_values: Mapping[str, str], env: MutableMapping[str, str]) -> Dict[str, str]:
    """Merge dotenv values with the current environment, preferring os.environ."""
    merged = dict(dotenv_values)
    merged.update(env)  # os.environ wins
    return merged


def load_environment(env_file: Optional[Path] = None) -> Dict[str, str]:
    """Return the dotenv file merged with ``os.environ``."""
    return _merge_envs(_load_env_file(env_file or DEFAULT_ENV_FILE), os.environ)


def _parse_years(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_YEARS
    years = tuple(part.strip() for part in raw.split(",") if part.strip())
    for year in years:
        if not (len(year) == 4 and year.isdigit()):
            raise ValueError(f"SUPPORTED_YEARS contains an invalid year: {year!r}")
    return years or DEFAULT_YEARS


def _resolve_data_source(raw: Optional[str]) -> str:
    if not raw:
        return str(DEFAULT_DATA_DIR)
    if raw.startswith(("http://", "https://")):
        return raw.rstrip("/")
    path = Path(raw)
    if not path.is_absolute():
        path = REPO_ROOT / path
    return str(path)


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration values."""

    data_source: str
    log_directory: Path
    log_level: str
    supported_years: Tuple[str, ...] = DEFAULT_YEARS
    request_timeout: float = 10.0
    app_name: str = "air-traffic-stats"


def load_config(env_file: Optional[Path] = None) -> AppConfig:
    """Load configuration values using environment defaults."""
    merged = load_environment(env_file)

    timeout_text = merged.get("REQUEST_TIMEOUT", "10")
    try:
        request_timeout = float(timeout_text)
    except ValueError:
        raise ValueError(f"REQUEST_TIMEOUT must be a number, got {timeout_text!r}") from None
    if request_timeout <= 0:
        raise ValueError("REQUEST_TIMEOUT must be positive")

    log_directory = Path(merged.get("LOG_DIR", REPO_ROOT / "logs"))
    if not log_directory.is_absolute():
        log_directory = REPO_ROOT / log_directory

    log_level = merged.get("LOG_LEVEL", "INFO").upper()

    return AppConfig(
        data_source=_resolve_data_source(merged.get("DATA_SOURCE")),
        log_directory=log_directory,
        log_level=log_level,
        supported_years=_parse_years(merged.get("SUPPORTED_YEARS")),
        request_timeout=request_timeout,
        app_name=merged.get("APP_NAME", "air-traffic-stats"),
    )


__all__ = ["AppConfig", "load_config", "load_environment", "REPO_ROOT", "DEFAULT_YEARS"]
