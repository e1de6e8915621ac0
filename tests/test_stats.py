"""
tests/test_stats.py
───────────────────
Tests for collection statistics.
"""
import math

import pytest

from aquatrack.analytics.stats import ReadingStats, risk_level_breakdown, summarize
from aquatrack.data.collection import ReadingCollection
from aquatrack.data.errors import SchemaMismatchError
from aquatrack.data.models import ReadingSchema


@pytest.fixture
def loaded(data_file) -> ReadingCollection:
    c = ReadingCollection()
    c.load_all(data_file)
    return c


class TestSummarize:
    def test_example_file(self, loaded):
        stats = summarize(loaded)
        assert isinstance(stats, ReadingStats)
        assert stats.metric == "risk"
        assert stats.count == 2
        # a scores 0, b scores 15 + 20 + 30 + 10 + 10
        assert stats.average == pytest.approx(42.5)
        assert stats.minimum.id == "a"
        assert stats.maximum.id == "b"

    def test_empty(self):
        stats = summarize(ReadingCollection())
        assert stats.count == 0
        assert math.isnan(stats.average)
        assert stats.minimum is None
        assert stats.maximum is None

    def test_level_schema_uses_level(self, tmp_path):
        path = tmp_path / "levels.csv"
        path.write_text(
            "w1,2024-03-01T06:00:00Z,2.0,7.1,12.0\n"
            "w2,2024-03-01T07:00:00Z,3.0,7.0,10.0\n"
            "w3,2024-03-01T08:00:00Z,1.0,7.2,15.0\n",
            encoding="utf-8",
        )
        c = ReadingCollection(ReadingSchema.HYDROLOGICAL)
        c.load_all(path)
        stats = summarize(c)
        assert stats.metric == "level"
        assert stats.average == pytest.approx(2.0)
        assert stats.minimum.id == "w3"
        assert stats.maximum.id == "w2"

    def test_custom_key(self, loaded):
        stats = summarize(loaded, key=lambda r: r.ph, metric="ph")
        assert stats.metric == "ph"
        assert stats.average == pytest.approx(8.0)
        assert stats.maximum.id == "b"

    def test_keeps_reading_subclass(self, loaded):
        stats = summarize(loaded)
        assert stats.maximum.risk_score == pytest.approx(85.0)


class TestRiskLevelBreakdown:
    def test_counts_in_severity_order(self, loaded):
        assert risk_level_breakdown(loaded) == {"LOW": 1, "MEDIUM": 0, "HIGH": 0, "CRITICAL": 1}

    def test_empty_has_all_levels(self):
        assert risk_level_breakdown(ReadingCollection()) == {"LOW": 0, "MEDIUM": 0, "HIGH": 0, "CRITICAL": 0}

    def test_not_defined_for_level_schema(self):
        with pytest.raises(SchemaMismatchError):
            risk_level_breakdown(ReadingCollection(ReadingSchema.HYDROLOGICAL))
