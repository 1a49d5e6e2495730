"""
Query router — the endpoint that searches the weather data.

Query parameters are taken as raw strings so bad values produce a 400 with a
message the caller can fix (see WeatherQuery.from_params), instead of
FastAPI's generic 422. Validated queries go straight to the planner built at
startup.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Request

from weather_api.models.query import WeatherQuery
from weather_api.models.weather import WeatherEntry
from weather_api.planner import QueryPlanner

logger = logging.getLogger("weather-api.query")

router = APIRouter()


def get_planner(request: Request) -> QueryPlanner:
    return request.app.state.planner


@router.get("", response_model=list[WeatherEntry])
def weather_query(
    request: Request,
    limit: Optional[str] = None,
    date: Optional[str] = None,
    weather: Optional[str] = None,
):
    """Return every weather entry matching all of the given parameters."""
    logger.info("Handling raw weather query: limit=%r date=%r weather=%r", limit, date, weather)

    # QueryError propagates to the 400 handler in main
    query = WeatherQuery.from_params(limit=limit, date=date, weather=weather)
    logger.info("Successfully parsed weather query as: %r", query)

    result = get_planner(request).execute(query)
    logger.info("Query returned %d weather entries", len(result))
    return result
