"""
Shared fixtures: a small two-day dataset and a TestClient running the full
app (lifespan included) against a data file of the test's choosing.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from weather_api.models.weather import WeatherEntry, WeatherKind

HEADER = "date,precipitation,temp_max,temp_min,wind,weather"

TWO_DAY_CSV = f"""{HEADER}
2012-06-04,1.3,12.8,8.9,3.1,rain
2012-06-03,0.0,17.2,9.4,2.9,sun
"""

JUNE_3 = WeatherEntry(
    date=date(2012, 6, 3),
    precipitation=0.0,
    temp_max=17.2,
    temp_min=9.4,
    wind=2.9,
    weather=WeatherKind.SUN,
)
JUNE_4 = WeatherEntry(
    date=date(2012, 6, 4),
    precipitation=1.3,
    temp_max=12.8,
    temp_min=8.9,
    wind=3.1,
    weather=WeatherKind.RAIN,
)


@pytest.fixture
def data_file(tmp_path):
    """Write CSV text to a temp file and return its path."""
    def _write(text: str):
        path = tmp_path / "weather.csv"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def client():
    """TestClient over the bundled dataset."""
    from weather_api.main import app
    with TestClient(app) as c:
        yield c
