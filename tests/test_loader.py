import logging
from unittest.mock import MagicMock

import pytest
import requests

from src.api import DatasetClient
from src.jobs import YearLoader


def test_load_parses_year_from_directory(data_dir):
    loader = YearLoader(DatasetClient(str(data_dir)), ["2020", "2021"])

    dataset = loader.load("2021")

    assert dataset.year == "2021"
    assert [r.day for r in dataset.records] == ["04/01/2021", "05/01/2021"]


def test_load_rejects_unsupported_year(data_dir):
    loader = YearLoader(DatasetClient(str(data_dir)), ["2020"])

    with pytest.raises(ValueError):
        loader.load("1999")


def test_load_returns_empty_dataset_on_fetch_failure(caplog):
    client = MagicMock(spec=DatasetClient)
    client.fetch_csv.side_effect = requests.ConnectionError("unreachable")
    client.resource_for.return_value = "https://example.org/csv2022.csv"
    loader = YearLoader(client, ["2022"])

    with caplog.at_level(logging.ERROR, logger="src.jobs.loader"):
        dataset = loader.load("2022")

    assert dataset.year == "2022"
    assert dataset.is_empty
    assert "Failed to load data for year 2022" in caplog.text


def test_load_returns_empty_dataset_for_missing_file(tmp_path):
    loader = YearLoader(DatasetClient(str(tmp_path)), ["2023"])

    assert loader.load("2023").is_empty


def test_loader_requires_supported_years(data_dir):
    with pytest.raises(ValueError):
        YearLoader(DatasetClient(str(data_dir)), [])


def test_load_survives_unterminated_quote_before_large_file(tmp_path):
    rows = ["Entity,Week,Day,Flights", '"Germany,1,01/01/2020,1']
    rows += ["Germany,1,02/01/2020,%d" % index for index in range(8000)]
    (tmp_path / "csv2020.csv").write_text("\n".join(rows), encoding="utf-8")
    loader = YearLoader(DatasetClient(str(tmp_path)), ["2020"])

    dataset = loader.load("2020")

    assert len(dataset) == 8000
    assert dataset.dropped == 1
