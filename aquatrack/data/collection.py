"""
aquatrack/data/collection.py
────────────────────────────
Insertion-ordered collection of readings of a single schema.

Provides:
  - insert_front() / insert_back()  : add at either end
  - remove_where()                  : drop every reading matching a predicate
  - find_first()                    : first match in order
  - average_of() / min_by() / max_by() : linear aggregates over a key
  - save_all() / load_all()         : one CSV line per reading
  - to_frame()                      : pandas view for analytics

All operations are linear scans over a plain list.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from pathlib import Path

import pandas as pd

from aquatrack.data.errors import ReadingParseError, SchemaMismatchError, StorageError
from aquatrack.data.models import ReadingSchema, SensorReading

logger = logging.getLogger(__name__)

Predicate = Callable[[SensorReading], bool]
KeyFunc = Callable[[SensorReading], float]


class ReadingCollection:
    def __init__(self, schema: ReadingSchema = ReadingSchema.CONTAMINATION) -> None:
        self.schema = schema
        self._readings: list[SensorReading] = []

    # ── Mutation ──────────────────────────────────────────────────────────────

    def _check_schema(self, reading: SensorReading) -> None:
        if not isinstance(reading, self.schema.model):
            raise SchemaMismatchError(
                f"{type(reading).__name__} does not belong to the {self.schema.value} schema"
            )

    def insert_front(self, reading: SensorReading) -> None:
        self._check_schema(reading)
        self._readings.insert(0, reading)

    def insert_back(self, reading: SensorReading) -> None:
        self._check_schema(reading)
        self._readings.append(reading)

    def remove_where(self, predicate: Predicate) -> bool:
        """Remove every matching reading, keeping survivors in order."""
        kept = [r for r in self._readings if not predicate(r)]
        removed = len(kept) != len(self._readings)
        self._readings = kept
        return removed

    # ── Queries ───────────────────────────────────────────────────────────────

    def find_first(self, predicate: Predicate) -> SensorReading | None:
        return next((r for r in self._readings if predicate(r)), None)

    def size(self) -> int:
        return len(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[SensorReading]:
        return iter(self._readings)

    def average_of(self, key: KeyFunc) -> float:
        """Arithmetic mean of key(r); NaN when the collection is empty."""
        if not self._readings:
            return math.nan
        return sum(key(r) for r in self._readings) / len(self._readings)

    def min_by(self, key: KeyFunc) -> SensorReading | None:
        # min()/max() keep the first of equal elements
        return min(self._readings, key=key, default=None)

    def max_by(self, key: KeyFunc) -> SensorReading | None:
        return max(self._readings, key=key, default=None)

    # ── Persistence ───────────────────────────────────────────────────────────

    def save_all(self, path: str | Path) -> None:
        """Overwrite `path` with one CSV line per reading, in order."""
        path = Path(path)
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for reading in self._readings:
                    f.write(reading.to_csv() + "\n")
        except OSError as exc:
            raise StorageError(path, exc.strerror or str(exc)) from exc
        logger.debug("Saved %d readings to %s", len(self._readings), path)

    def load_all(self, path: str | Path) -> None:
        """
        Replace the content with the readings stored in `path`.

        Blank lines are skipped. The first malformed line aborts the load
        with its ReadingParseError (line number attached); the current
        content is only replaced once the whole file has parsed.
        """
        path = Path(path)
        model = self.schema.model
        loaded: list[SensorReading] = []
        try:
            with open(path, encoding="utf-8") as f:
                for number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    try:
                        loaded.append(model.from_csv(line))
                    except ReadingParseError as exc:
                        exc.line_number = number
                        raise
        except OSError as exc:
            raise StorageError(path, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise StorageError(path, "not a UTF-8 text file") from exc

        self._readings = loaded
        logger.debug("Loaded %d readings from %s", len(loaded), path)

    # ── Analytics view ────────────────────────────────────────────────────────

    def to_frame(self) -> pd.DataFrame:
        """One row per reading; derived risk columns included where defined."""
        if not self._readings:
            return pd.DataFrame(columns=list(self.schema.model.csv_columns()))
        df = pd.DataFrame([r.model_dump(mode="json") for r in self._readings])
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
        return df
