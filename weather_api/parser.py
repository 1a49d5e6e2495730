"""
Line parser for the weather CSV.

Expected layout (header line first, then one day per line):

    date,precipitation,temp_max,temp_min,wind,weather
    2012-06-03,0.0,17.2,9.4,2.9,sun

Every data line becomes either a WeatherEntry or a WeatherEntryParseError
carrying enough context to fix the input file. Nothing here decides whether
errors are fatal; that is the store's call.
"""
import csv
from typing import Iterator, Union

from pydantic import ValidationError

from weather_api.models.weather import WeatherEntry, WeatherEntryParseError, WeatherKind

COLUMNS = ("date", "precipitation", "temp_max", "temp_min", "wind", "weather")


def parse_weather_row(line: str) -> WeatherEntry:
    """Parse one CSV line into a WeatherEntry. Raises ValueError on bad input."""
    fields = next(csv.reader([line]))
    if len(fields) != len(COLUMNS):
        raise ValueError(
            f"Expected {len(COLUMNS)} comma-separated fields "
            f"({','.join(COLUMNS)}), found {len(fields)}"
        )

    row = dict(zip(COLUMNS, fields))
    try:
        row["weather"] = WeatherKind(row["weather"])
    except ValueError:
        raise ValueError(
            f"Unknown weather kind {row['weather']!r}, "
            f"expected one of: {', '.join(WeatherKind.choices())}"
        ) from None

    return WeatherEntry.model_validate(row)


def _describe(error: ValueError) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
        )
    return str(error)


def parse_weather_file_contents(
    raw_weather_data: str,
) -> Iterator[Union[WeatherEntry, WeatherEntryParseError]]:
    """
    Lazily parse every data line of the file.

    The first line is a header and is skipped, as are blank lines. Line
    numbers in errors are 1-based positions in the input text.
    """
    lines = raw_weather_data.splitlines()
    for line_num, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            yield parse_weather_row(line)
        except ValueError as e:
            yield WeatherEntryParseError(line_num=line_num, line=line, parse_error=_describe(e))
