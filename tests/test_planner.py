"""
Tests for QueryPlanner — which index answers which query, and how limits apply.
"""
from datetime import date

import pytest

from conftest import JUNE_3, JUNE_4, TWO_DAY_CSV
from weather_api.indexes import IndexBuilder
from weather_api.models.query import WeatherQuery
from weather_api.models.weather import WeatherKind
from weather_api.planner import QueryPlanner
from weather_api.store import WeatherDataStore


@pytest.fixture
def planner():
    return QueryPlanner(IndexBuilder(WeatherDataStore.from_text(TWO_DAY_CSV)).build())


@pytest.mark.parametrize("query, expected", [
    (WeatherQuery(date=date(2012, 6, 3)), [JUNE_3]),
    (WeatherQuery(date=date(2012, 6, 3), weather=WeatherKind.RAIN), []),
    (WeatherQuery(weather=WeatherKind.RAIN), [JUNE_4]),
    (WeatherQuery(limit=1), [JUNE_3]),
    (WeatherQuery(limit=0), []),
    (WeatherQuery(date=date(2099, 1, 1)), []),
])
def test_two_day_scenarios(planner, query, expected):
    """Each planner path against the June 3 (sun) and June 4 (rain) dataset."""
    assert planner.execute(query) == expected


def test_full_scan_returns_everything_in_date_order(planner):
    """No constraints returns the whole dataset, oldest first."""
    assert planner.execute(WeatherQuery()) == [JUNE_3, JUNE_4]


def test_zero_limit_wins_over_everything(planner):
    """limit=0 is empty even when the date and weather would match."""
    query = WeatherQuery(limit=0, date=date(2012, 6, 3), weather=WeatherKind.SUN)
    assert planner.execute(query) == []


def test_date_with_matching_weather(planner):
    """A date lookup whose weather matches returns the one entry; the limit is irrelevant."""
    query = WeatherQuery(date=date(2012, 6, 4), weather=WeatherKind.RAIN, limit=5)
    assert planner.execute(query) == [JUNE_4]


def test_kind_with_no_entries(planner):
    """A kind absent from the data gives an empty result, not a KeyError."""
    assert planner.execute(WeatherQuery(weather=WeatherKind.SNOW)) == []


def test_results_are_the_indexed_objects(planner):
    """Results are the same entry objects whichever path produced them."""
    assert planner.execute(WeatherQuery(date=date(2012, 6, 3)))[0] is \
        planner.execute(WeatherQuery(limit=1))[0]


def test_same_query_twice_gives_same_result(planner):
    """Executing the same query twice gives equal results."""
    query = WeatherQuery(limit=1, weather=WeatherKind.SUN)
    assert planner.execute(query) == planner.execute(query)


@pytest.fixture
def bundled_planner():
    from weather_api.config import settings
    return QueryPlanner(IndexBuilder(WeatherDataStore(settings.data_path)).build())


@pytest.mark.parametrize("limit", [0, 1, 3, 7, 100])
@pytest.mark.parametrize("weather", [None, WeatherKind.SNOW, WeatherKind.RAIN, WeatherKind.FOG])
def test_limit_is_min_of_n_and_matches(bundled_planner, limit, weather):
    """Limited results are the first N of the unlimited ones."""
    unlimited = bundled_planner.execute(WeatherQuery(weather=weather))
    limited = bundled_planner.execute(WeatherQuery(weather=weather, limit=limit))
    assert len(limited) == min(limit, len(unlimited))
    assert limited == unlimited[:limit]


def test_kind_results_are_date_sorted(bundled_planner):
    """A kind lookup returns only that kind, in ascending date order."""
    result = bundled_planner.execute(WeatherQuery(weather=WeatherKind.RAIN))
    assert result
    assert all(e.weather is WeatherKind.RAIN for e in result)
    assert [e.date for e in result] == sorted(e.date for e in result)
