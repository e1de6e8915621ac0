"""
tests/test_store.py
───────────────────
Tests for startup hydration and saving.
"""
import logging

from aquatrack.data import store
from aquatrack.data.collection import ReadingCollection
from aquatrack.data.errors import ColumnCountError, FieldValueError, StorageError


class TestHydrate:
    def test_missing_file_is_first_run(self, tmp_path):
        c = ReadingCollection()
        assert store.hydrate(c, tmp_path / "readings.csv") is None
        assert c.size() == 0

    def test_loads_existing_file(self, data_file):
        c = ReadingCollection()
        assert store.hydrate(c, data_file) is None
        assert c.size() == 2

    def test_malformed_file_returns_error_and_stays_empty(self, tmp_path, caplog):
        path = tmp_path / "readings.csv"
        path.write_text("a,2024-01-01T00:00:00Z,7.0\n", encoding="utf-8")
        c = ReadingCollection()
        with caplog.at_level(logging.WARNING, logger="aquatrack.data.store"):
            error = store.hydrate(c, path)
        assert isinstance(error, ColumnCountError)
        assert c.size() == 0
        assert "Could not load readings" in caplog.text

    def test_bad_value_returns_field_error(self, tmp_path):
        path = tmp_path / "readings.csv"
        path.write_text("a,not-a-time,7.0,1.0,0.0,0.0,0.0\n", encoding="utf-8")
        assert isinstance(store.hydrate(ReadingCollection(), path), FieldValueError)

    def test_unreadable_path_returns_storage_error(self, tmp_path):
        # a directory exists but cannot be opened as a file
        error = store.hydrate(ReadingCollection(), tmp_path)
        assert isinstance(error, StorageError)


class TestSave:
    def test_save_writes_file(self, tmp_path, clean_reading):
        c = ReadingCollection()
        c.insert_back(clean_reading)
        path = tmp_path / "readings.csv"
        store.save(c, path)
        assert path.read_text(encoding="utf-8").strip() == clean_reading.to_csv()

    def test_empty_collection_writes_empty_file(self, tmp_path):
        path = tmp_path / "readings.csv"
        store.save(ReadingCollection(), path)
        assert path.read_text(encoding="utf-8") == ""
