"""
Query models for the /query endpoint.

Requests arrive as loose strings. WeatherQuery.from_params turns them into a
validated, typed query, raising QueryError with a message the caller can act
on. Everything past this point can trust the query's types.
"""
from datetime import date as Date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_api.models.weather import WeatherKind, parse_date


class QueryError(ValueError):
    """Raised when raw query parameters can't be converted to a WeatherQuery."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WeatherQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Max number of entries to return
    limit: Optional[int] = Field(default=None, ge=0)
    # At most one entry exists for any date
    date: Optional[Date] = None
    weather: Optional[WeatherKind] = None

    @classmethod
    def from_params(
        cls,
        limit: Optional[str] = None,
        date: Optional[str] = None,
        weather: Optional[str] = None,
    ) -> "WeatherQuery":
        """Convert raw query-string values, reporting the first invalid one."""
        return cls(
            limit=_parse_limit(limit),
            date=_parse_query_date(date),
            weather=_parse_weather(weather),
        )


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    # int() would accept "+5" and " 5 "; only plain digits are a valid limit
    if not (raw.isascii() and raw.isdigit()):
        raise QueryError(
            f"Invalid limit value in query parameters: {raw} "
            "- Expected a non-negative integer"
        )
    return int(raw)


def _parse_query_date(raw: Optional[str]) -> Optional[Date]:
    if raw is None:
        return None
    try:
        return parse_date(raw)
    except ValueError:
        raise QueryError(
            f"Invalid date value in query parameters: {raw} "
            "- Expected a date of the form YYYY-MM-DD"
        ) from None


def _parse_weather(raw: Optional[str]) -> Optional[WeatherKind]:
    if raw is None:
        return None
    try:
        return WeatherKind(raw)
    except ValueError:
        raise QueryError(
            f"Invalid weather kind: {raw} "
            f"- Expected one of the following: {', '.join(WeatherKind.choices())}"
        ) from None
