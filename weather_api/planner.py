"""
Query planner — picks the cheapest index that can answer a WeatherQuery.

Paths are checked from most to least selective:
1. limit == 0        -> nothing to do
2. a specific date   -> date index, at most one entry
3. a weather kind    -> kind index, truncated to the limit
4. neither           -> full scan of the sorted data, truncated to the limit

Truncation always keeps the earliest dates; results are never reordered.
"""
from typing import Optional, Sequence

from weather_api.indexes import WeatherIndexes
from weather_api.models.query import WeatherQuery
from weather_api.models.weather import WeatherEntry, WeatherKind


def _take(entries: Sequence[WeatherEntry], limit: Optional[int]) -> list[WeatherEntry]:
    if limit is None:
        return list(entries)
    return list(entries[:limit])


class QueryPlanner:
    """Answers validated queries from prebuilt indexes.

    Taking the indexes in the constructor means a planner can't exist
    before the indexes do. Safe to share across threads: nothing here
    writes after construction.
    """

    def __init__(self, indexes: WeatherIndexes):
        self._indexes = indexes

    def execute(self, query: WeatherQuery) -> list[WeatherEntry]:
        if query.limit == 0:
            return []
        if query.date is not None:
            return self._by_date(query)
        if query.weather is not None:
            return self._by_kind(query.weather, query.limit)
        return _take(self._indexes.entries, query.limit)

    def _by_date(self, query: WeatherQuery) -> list[WeatherEntry]:
        # The limit can't matter here: it's non-zero and at most one entry matches
        entry = self._indexes.by_date.get(query.date)
        if entry is None:
            return []
        if query.weather is not None and entry.weather != query.weather:
            return []
        return [entry]

    def _by_kind(self, kind: WeatherKind, limit: Optional[int]) -> list[WeatherEntry]:
        return _take(self._indexes.by_kind.get(kind, ()), limit)
