"""
Startup-time failures for the weather dataset.

None of these are reachable from request input. WeatherDataError and its
subclasses abort startup; IndexesAlreadyBuiltError means a broken caller.
"""
from datetime import date


class WeatherDataError(Exception):
    """The weather dataset could not be loaded."""


class DuplicateDateError(WeatherDataError):
    """More than one entry shares a date, so the date index would be ambiguous."""

    def __init__(self, dates: list[date]):
        self.dates = dates
        listed = ", ".join(d.isoformat() for d in dates)
        super().__init__(f"Weather data contains {len(dates)} duplicated date(s): {listed}")


class IndexesAlreadyBuiltError(RuntimeError):
    """build() was called twice on the same IndexBuilder."""
