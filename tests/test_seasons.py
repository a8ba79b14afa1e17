from datetime import date

import pytest

from src.dates import parse_day
from src.seasons import CALENDAR_SEASONS, SEASON_RANGES, Season, season_of


@pytest.mark.parametrize(
    "day,expected",
    [
        ("15/03/2020", Season.SPRING),
        ("01/04/2020", Season.SUMMER),
        ("31/12/2020", Season.WINTER),
        ("01/01/2020", Season.SPRING),
        ("31/03/2021", Season.SPRING),
        ("30/06/2021", Season.SUMMER),
        ("01/07/2021", Season.FALL),
        ("30/09/2021", Season.FALL),
        ("01/10/2021", Season.WINTER),
    ],
)
def test_season_of_boundaries(day, expected):
    assert season_of(parse_day(day)) is expected


def test_every_day_belongs_to_exactly_one_season():
    current = date(2020, 1, 1)
    while current.year == 2020:
        matching = [s for s in CALENDAR_SEASONS if SEASON_RANGES[s].contains(current)]
        assert len(matching) == 1, current
        current = date.fromordinal(current.toordinal() + 1)


def test_all_matches_every_day():
    assert Season.ALL.matches(date(2022, 2, 14))
    assert Season.ALL.matches(date(2022, 11, 30))


def test_season_matches_only_its_days():
    assert Season.SUMMER.matches(date(2022, 5, 20))
    assert not Season.SUMMER.matches(date(2022, 7, 1))


@pytest.mark.parametrize(
    "season,week,expected",
    [
        (Season.SPRING, 13, True),
        (Season.SPRING, 14, False),
        (Season.SUMMER, 14, True),
        (Season.FALL, 39, True),
        (Season.WINTER, 40, True),
        (Season.WINTER, 53, True),
        (Season.WINTER, 54, False),
        (Season.ALL, 53, True),
    ],
)
def test_matches_week(season, week, expected):
    assert season.matches_week(week) is expected


def test_parse_is_case_insensitive():
    assert Season.parse("fall") is Season.FALL
    assert Season.parse(" All ") is Season.ALL
    with pytest.raises(ValueError):
        Season.parse("Monsoon")


def test_every_week_has_exactly_one_calendar_season():
    for week in range(1, 54):
        owners = [season for season in CALENDAR_SEASONS if season.matches_week(week)]
        assert len(owners) == 1, week
