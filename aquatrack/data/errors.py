"""
aquatrack/data/errors.py
────────────────────────
Exceptions raised by the reading model, collection, and store.

All of them inherit from ``AquaTrackError`` so the shell can report any
failure of a single action with one ``except`` clause.
"""
from __future__ import annotations

from pathlib import Path


class AquaTrackError(Exception):
    """Base exception for AquaTrack domain errors."""


class ReadingParseError(AquaTrackError, ValueError):
    """A CSV line or user input could not be turned into a reading."""

    def __init__(self, message: str, line: str | None = None, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.line_number = line_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class ColumnCountError(ReadingParseError):
    """The CSV line has a column count the schema does not accept."""

    def __init__(self, expected: tuple[int, ...], found: int, line: str | None = None) -> None:
        accepted = " or ".join(str(n) for n in expected)
        super().__init__(
            f"Invalid CSV line (expected {accepted} columns, got {found}): {line}",
            line=line,
        )
        self.expected = expected
        self.found = found


class FieldValueError(ReadingParseError):
    """A numeric or timestamp field is not parseable."""

    def __init__(self, field: str, message: str, line: str | None = None) -> None:
        super().__init__(f"{field}: {message}", line=line)
        self.field = field


class StorageError(AquaTrackError):
    """Reading from or writing to the data file failed."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class SchemaMismatchError(AquaTrackError, TypeError):
    """A reading of one schema was given to a collection of another."""
