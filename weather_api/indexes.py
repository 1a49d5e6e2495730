"""
Search indexes over the weather data.

Built once, right after the store is loaded, so queries never scan the full
dataset unless they have nothing selective to go on:
- by_date: date -> the single entry for that day
- by_kind: weather kind -> every entry of that kind, oldest first

Both hold references to the store's entry objects, not copies.
"""
import logging
import threading
from collections import Counter, defaultdict
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping

from weather_api.exceptions import DuplicateDateError, IndexesAlreadyBuiltError
from weather_api.models.weather import WeatherEntry, WeatherKind
from weather_api.store import WeatherDataStore

logger = logging.getLogger("weather-api.indexes")


@dataclass(frozen=True)
class WeatherIndexes:
    entries: tuple[WeatherEntry, ...]
    by_date: Mapping[date, WeatherEntry]
    by_kind: Mapping[WeatherKind, tuple[WeatherEntry, ...]]


class IndexBuilder:
    """Builds WeatherIndexes from a store. build() may only run once."""

    def __init__(self, store: WeatherDataStore):
        self._store = store
        self._built = False
        self._lock = threading.Lock()

    def build(self) -> WeatherIndexes:
        with self._lock:
            if self._built:
                raise IndexesAlreadyBuiltError("build() should only be called once")
            self._built = True

        logger.info("Populating search indexes")
        entries = self._store.entries()

        duplicates = sorted(d for d, n in Counter(e.date for e in entries).items() if n > 1)
        if duplicates:
            raise DuplicateDateError(duplicates)

        by_date = {e.date: e for e in entries}
        logger.info("Populated weather-by-day index (%d dates)", len(by_date))

        # entries are date-sorted, so each kind's list is too
        by_kind: dict[WeatherKind, list[WeatherEntry]] = defaultdict(list)
        for entry in entries:
            by_kind[entry.weather].append(entry)
        logger.info("Populated weather-by-kind index (%d kinds)", len(by_kind))

        return WeatherIndexes(
            entries=entries,
            by_date=MappingProxyType(by_date),
            by_kind=MappingProxyType({kind: tuple(group) for kind, group in by_kind.items()}),
        )
