"""
aquatrack/data/store.py
───────────────────────
Flat-file store for the reading collection.

Provides:
  - hydrate() : load the data file into a collection at startup
  - save()    : write the collection back to the data file

The file is overwritten in place on save; there is no atomic rename, so a
crash mid-write can leave it truncated.
"""
from __future__ import annotations

import logging
from pathlib import Path

from aquatrack.data.collection import ReadingCollection
from aquatrack.data.errors import AquaTrackError

logger = logging.getLogger(__name__)


def hydrate(collection: ReadingCollection, path: str | Path) -> AquaTrackError | None:
    """
    Fill `collection` from `path`.

    A missing file is a first run and not an error. Parse and storage
    failures are logged and returned to the caller; the collection keeps
    its previous (normally empty) content.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No data file at %s, starting empty", path)
        return None
    try:
        collection.load_all(path)
    except AquaTrackError as exc:
        logger.warning("Could not load readings from %s: %s", path, exc)
        return exc
    logger.info("Loaded %d readings from %s", collection.size(), path)
    return None


def save(collection: ReadingCollection, path: str | Path) -> None:
    """Write every reading to `path`. Raises StorageError on I/O failure."""
    collection.save_all(path)
    logger.info("Saved %d readings to %s", collection.size(), path)
