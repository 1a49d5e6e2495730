"""
Dataset store — the parsed, date-sorted weather data.

The file is read and parsed on the first call to entries() and cached for
the life of the process. A lock guards the first load so concurrent callers
at startup parse once and all see the same tuple.
"""
import logging
import threading
from pathlib import Path
from typing import Optional

from weather_api.exceptions import WeatherDataError
from weather_api.models.weather import WeatherEntry, WeatherEntryParseError
from weather_api.parser import parse_weather_file_contents

logger = logging.getLogger("weather-api.store")


class WeatherDataStore:
    def __init__(self, source_path: Optional[Path] = None, *, raw_text: Optional[str] = None):
        if (source_path is None) == (raw_text is None):
            raise ValueError("Provide exactly one of source_path or raw_text")
        self._source_path = Path(source_path) if source_path is not None else None
        self._raw_text = raw_text
        self._entries: Optional[tuple[WeatherEntry, ...]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_text(cls, raw_text: str) -> "WeatherDataStore":
        """Build a store over CSV text already in memory."""
        return cls(raw_text=raw_text)

    @property
    def is_loaded(self) -> bool:
        return self._entries is not None

    def entries(self) -> tuple[WeatherEntry, ...]:
        """Return every entry sorted by date, loading the data on first use.

        Raises WeatherDataError if the source can't be read or any line
        fails to parse. A failed load leaves the store empty, so nothing
        partial is ever served.
        """
        if self._entries is None:
            with self._lock:
                if self._entries is None:
                    self._entries = self._load()
        return self._entries

    def _read_source(self) -> str:
        if self._raw_text is not None:
            return self._raw_text
        try:
            return self._source_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise WeatherDataError(f"Could not read weather data from {self._source_path}: {e}") from e

    def _load(self) -> tuple[WeatherEntry, ...]:
        logger.info("Parsing weather data")

        entries: list[WeatherEntry] = []
        errors: list[WeatherEntryParseError] = []
        for result in parse_weather_file_contents(self._read_source()):
            if isinstance(result, WeatherEntryParseError):
                logger.error(str(result))
                errors.append(result)
            else:
                entries.append(result)

        if errors:
            details = "\n".join(str(e) for e in errors)
            raise WeatherDataError(f"Exiting because of {len(errors)} parse error(s)\n{details}")

        if not entries:
            logger.warning(
                "The weather data contained no entries. Not an error, "
                "but every query will come back empty"
            )
            return ()

        logger.info("Successfully parsed %d weather entries", len(entries))
        # sort() is stable, so same-date rows keep their file order
        entries.sort(key=lambda e: e.date)
        logger.info(
            "Sorted weather entries by date. The range covered is %s to %s",
            entries[0].date,
            entries[-1].date,
        )
        return tuple(entries)
