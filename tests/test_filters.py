from datetime import date

import pytest

from src.filters import FilterCriteria, default_date_range, entities, filter_records
from src.seasons import Season
from src.transform import FlightRecord, parse_flight_csv


@pytest.fixture
def records(csv_texts):
    return parse_flight_csv(csv_texts["2020"], year="2020").records


def _days(result):
    return [r.day for r in result]


def test_all_all_returns_every_record_sorted(records):
    result = filter_records(records, FilterCriteria())

    assert sorted(result, key=id) == sorted(records, key=id)
    assert _days(result) == [
        "01/01/2020",
        "02/01/2020",
        "15/03/2020",
        "01/04/2020",
        "15/07/2020",
        "31/12/2020",
    ]


def test_entity_and_season_are_conjunctive(records):
    result = filter_records(records, FilterCriteria(entity="Germany", season=Season.SPRING))

    assert _days(result) == ["01/01/2020", "15/03/2020"]
    assert {r.entity for r in result} == {"Germany"}


def test_multi_entity_selection(records):
    result = filter_records(records, FilterCriteria(entity=["France", "Spain"]))

    assert _days(result) == ["02/01/2020", "15/07/2020"]


def test_season_name_strings_are_accepted(records):
    result = filter_records(records, FilterCriteria(season="winter"))

    assert _days(result) == ["31/12/2020"]


def test_date_range_overrides_season(records):
    criteria = FilterCriteria(season=Season.WINTER, date_range=("01/03/2020", "01/04/2020"))

    assert _days(filter_records(records, criteria)) == ["15/03/2020", "01/04/2020"]


def test_date_range_accepts_date_objects(records):
    criteria = FilterCriteria(entity="France", date_range=(date(2020, 7, 15), date(2020, 7, 15)))

    assert _days(filter_records(records, criteria)) == ["15/07/2020"]


def test_inverted_or_invalid_date_range_is_rejected():
    with pytest.raises(ValueError):
        FilterCriteria(date_range=("31/12/2020", "01/01/2020"))
    with pytest.raises(ValueError):
        FilterCriteria(date_range=("31/02/2020", "01/03/2020"))


def test_filtering_is_idempotent(records):
    criteria = FilterCriteria(entity="Germany", season=Season.ALL)
    once = filter_records(records, criteria)

    assert filter_records(once, criteria) == once


def test_sort_is_stable_for_equal_days():
    first = FlightRecord(entity="Malta", week=1, day="02/01/2021", flights=1)
    second = FlightRecord(entity="Cyprus", week=1, day="02/01/2021", flights=2)
    earlier = FlightRecord(entity="Malta", week=1, day="01/01/2021", flights=3)

    result = filter_records([first, second, earlier], FilterCriteria())

    assert [r.entity for r in result] == ["Malta", "Malta", "Cyprus"]
    assert result[1] is first and result[2] is second


def test_input_is_not_mutated(records):
    original = list(records)
    as_list = list(records)

    result = filter_records(as_list, FilterCriteria())

    assert as_list == original
    assert result is not as_list


def test_unknown_entity_yields_empty_list(records):
    assert filter_records(records, FilterCriteria(entity="Atlantis")) == []


def test_default_date_range_and_entities(records):
    assert default_date_range("2022") == (date(2022, 1, 1), date(2022, 12, 31))
    assert entities(records) == ["Germany", "France"]
