"""
Pydantic models for daily weather observations.

WeatherEntry is one row of the dataset. It is frozen so the store, both
indexes and every query result can share the same objects safely across
request threads.
"""
from datetime import date as Date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class WeatherKind(str, Enum):
    """Human description of the day's weather.

    Not exhaustive: new kinds may show up in future data, so nothing should
    match on the full set of members.
    """

    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SUN = "sun"
    FOG = "fog"

    @classmethod
    def _missing_(cls, value):
        # Case-insensitive lookup: "Sun" and "SUN" both resolve to SUN
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


def parse_date(text: str) -> Date:
    """Parse a simple year-month-day date like 2012-06-03."""
    return datetime.strptime(text, "%Y-%m-%d").date()


class WeatherEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: Date
    # Amount of precipitation in mm
    precipitation: float
    # Daily high / low temperature in ºC
    temp_max: float
    temp_min: float
    # Average wind speed over the day in m/s
    wind: float
    weather: WeatherKind

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date_string(cls, value):
        # pydantic would also accept unix timestamps here; the data file only
        # ever uses YYYY-MM-DD
        if isinstance(value, str):
            return parse_date(value)
        return value


class WeatherEntryParseError(BaseModel):
    """A line of the data file that could not be turned into a WeatherEntry."""

    model_config = ConfigDict(frozen=True)

    line_num: int
    line: str
    parse_error: str

    def __str__(self) -> str:
        return f"Failed to parse line {self.line_num}: {self.line}\nParse Error: {self.parse_error}"
