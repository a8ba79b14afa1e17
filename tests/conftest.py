"""Shared pytest fixtures for the air-traffic statistics tests.

Provides configuration objects and small CSV datasets written to temporary
directories so tests stay deterministic and never touch the network.
"""

from pathlib import Path
from typing import Dict

import pytest

from src.config import AppConfig

HEADER = (
    "Entity,Week,Day,Flights,Day 2019,Flights 2019 (Reference),"
    "% vs 2019 (Daily),Day Previous Year,Flights Previous Year"
)

CSV_2020 = "\n".join(
    [
        HEADER,
        "Germany,14,01/04/2020,900,03/04/2019,2800,-0.68,,",
        "France,1,02/01/2020,2500,03/01/2019,2400,0.04,,",
        "Germany,1,01/01/2020,3000,02/01/2019,2900,0.03,,",
        "France,27,15/07/2020,1200,17/07/2019,3100,-0.61,,",
        "Germany,40,31/12/2020,1500,02/01/2020,3000,-0.5,,",
        "Germany,11,15/03/2020,2000,14/03/2019,3000,-0.33,,",
        "",
    ]
)

CSV_2021 = "\n".join(
    [
        HEADER,
        "Spain,1,04/01/2021,1100,07/01/2019,2000,-0.45,04/01/2020,1900",
        "Spain,1,05/01/2021,1000,08/01/2019,2000,-0.5,05/01/2020,1950",
        "",
    ]
)


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Application config fixture pointing logs and data at temp directories."""
    return AppConfig(
        data_source=str(tmp_path / "dataset"),
        log_directory=tmp_path / "logs",
        log_level="INFO",
    )


@pytest.fixture
def csv_texts() -> Dict[str, str]:
    return {"2020": CSV_2020, "2021": CSV_2021}


@pytest.fixture
def data_dir(tmp_path: Path, csv_texts: Dict[str, str]) -> Path:
    """Directory laid out like the static dataset folder (``csv<year>.csv``)."""
    directory = tmp_path / "dataset"
    directory.mkdir()
    for year, text in csv_texts.items():
        (directory / f"csv{year}.csv").write_text(text, encoding="utf-8")
    return directory
