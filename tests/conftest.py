"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the AquaTrack test suite.
"""
import os
import pytest
from datetime import datetime, timezone

# Keep tests away from a real readings.csv
os.environ.setdefault("DATA_FILE", "test-readings.csv")
os.environ.setdefault("READING_SCHEMA", "contamination")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clean_reading(now):
    """Neutral pH, nothing else present: zero risk."""
    from aquatrack.data.models import ContaminationReading
    return ContaminationReading(
        id="a",
        timestamp=now,
        ph=7.0,
        magnesium_mg_l=10.0,
        mercury_mg_l=0.0,
        oil_mg_l=0.0,
        trash_items_m3=0.0,
    )


@pytest.fixture
def polluted_reading(now):
    """Every term at or past saturation except pH (deviation 2)."""
    from aquatrack.data.models import ContaminationReading
    return ContaminationReading(
        id="b",
        timestamp=now,
        ph=9.0,
        magnesium_mg_l=60.0,
        mercury_mg_l=0.002,
        oil_mg_l=1.0,
        trash_items_m3=20.0,
    )


@pytest.fixture
def level_reading(now):
    from aquatrack.data.models import LevelReading
    return LevelReading(id="lvl1", timestamp=now, level_m=2.35, ph=7.2, turbidity_ntu=4.5)


@pytest.fixture
def example_lines() -> list[str]:
    return [
        "a,2024-01-01T00:00:00Z,7.0,10.0,0.0,0.0,0.0",
        "b,2024-01-02T00:00:00Z,9.0,60.0,0.002,1.0,20.0",
    ]


@pytest.fixture
def data_file(tmp_path, example_lines):
    path = tmp_path / "readings.csv"
    path.write_text("\n".join(example_lines) + "\n", encoding="utf-8")
    return path
