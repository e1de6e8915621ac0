"""
aquatrack/data/models.py
────────────────────────
Pydantic v2 models for water-quality sensor readings.

Two reading schemas share one CSV code path on ``SensorReading``:

  contamination  id,timestamp,ph,magnesium,mercury,oil,trash   (7 columns)
                 id,timestamp,ph,magnesium,mercury             (5, legacy)
  hydrological   id,timestamp,level,ph,turbidity               (5 columns)

Readings are frozen after construction. Numeric fields accept any finite
float; no physical bounds are enforced.
"""
from __future__ import annotations

import uuid
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, ValidationError, computed_field, field_validator

from aquatrack.data.errors import ColumnCountError, FieldValueError
from config.risk import RiskLevel

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def new_reading_id() -> str:
    """Short opaque id: first 8 hex digits of a random UUID."""
    return uuid.uuid4().hex[:8]


def format_instant(ts: datetime) -> str:
    """ISO-8601 UTC with a ``Z`` suffix; microseconds kept when non-zero."""
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


class SensorReading(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    id: str
    timestamp: datetime

    # Measurement field names in CSV order (after id, timestamp)
    MEASUREMENTS: ClassVar[tuple[str, ...]] = ()
    # Column counts accepted by from_csv; shorter layouts fall back to
    # field defaults for the trailing measurements.
    ACCEPTED_COLUMNS: ClassVar[tuple[int, ...]] = ()
    # Prompt labels for interactive entry
    FIELD_LABELS: ClassVar[dict[str, str]] = {}
    METRIC_NAME: ClassVar[str] = ""

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_instant(cls, value: Any) -> Any:
        # Strict ISO-8601 only; pydantic would otherwise accept unix seconds.
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        return value

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def _build(cls, values: dict[str, Any], line: str | None = None) -> Self:
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or cls.__name__
            raise FieldValueError(field, first["msg"], line=line) from exc

    @classmethod
    def create(cls, **measurements: float | str) -> Self:
        """
        New reading stamped with a fresh id and the current UTC time.

        String values are parsed as floats. Raises FieldValueError for
        anything that is not a finite number.
        """
        values = {"id": new_reading_id(), "timestamp": datetime.now(tz=UTC), **measurements}
        return cls._build(values)

    # ── CSV ──────────────────────────────────────────────────────────────────

    @classmethod
    def csv_columns(cls) -> tuple[str, ...]:
        return ("id", "timestamp", *cls.MEASUREMENTS)

    def to_csv(self) -> str:
        parts = [self.id, format_instant(self.timestamp)]
        parts.extend(repr(float(getattr(self, name))) for name in self.MEASUREMENTS)
        return ",".join(parts)

    @classmethod
    def from_csv(cls, line: str) -> Self:
        """
        Parse one CSV line.

        Raises:
            ColumnCountError: column count not in ACCEPTED_COLUMNS
            FieldValueError: a numeric or timestamp field does not parse
        """
        line = line.rstrip("\r\n")
        parts = line.split(",")
        if len(parts) not in cls.ACCEPTED_COLUMNS:
            raise ColumnCountError(cls.ACCEPTED_COLUMNS, len(parts), line=line)
        return cls._build(dict(zip(cls.csv_columns(), parts)), line=line)

    # ── Display ──────────────────────────────────────────────────────────────

    @property
    def metric(self) -> float:
        """Primary metric aggregated by the stats view."""
        raise NotImplementedError

    def _display_time(self) -> str:
        return self.timestamp.strftime(DISPLAY_TIME_FORMAT)

    def format(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.format()


class ContaminationReading(SensorReading):
    """pH plus pollutant concentrations (mg/L) and floating trash."""

    ph: float
    magnesium_mg_l: float
    mercury_mg_l: float
    oil_mg_l: float = 0.0
    trash_items_m3: float = 0.0

    MEASUREMENTS: ClassVar[tuple[str, ...]] = (
        "ph",
        "magnesium_mg_l",
        "mercury_mg_l",
        "oil_mg_l",
        "trash_items_m3",
    )
    ACCEPTED_COLUMNS: ClassVar[tuple[int, ...]] = (7, 5)
    FIELD_LABELS: ClassVar[dict[str, str]] = {
        "ph": "pH",
        "magnesium_mg_l": "magnesium (mg/L)",
        "mercury_mg_l": "mercury (mg/L)",
        "oil_mg_l": "oil (mg/L)",
        "trash_items_m3": "trash (items/m^3)",
    }
    METRIC_NAME: ClassVar[str] = "risk"

    @computed_field
    @property
    def risk_score(self) -> float:
        # Import here to avoid circular deps
        from aquatrack.analytics.risk import compute_risk_score

        return compute_risk_score(self)

    @computed_field
    @property
    def risk_level(self) -> RiskLevel:
        from aquatrack.analytics.risk import classify_risk

        return classify_risk(self.risk_score)

    @property
    def metric(self) -> float:
        return self.risk_score

    def format(self) -> str:
        return (
            f"{self.id} | {self._display_time()} | "
            f"pH={self.ph:.2f} mg={self.magnesium_mg_l:.2f}mg/L "
            f"hg={self.mercury_mg_l:.4f}mg/L oil={self.oil_mg_l:.2f}mg/L "
            f"trash={self.trash_items_m3:.1f} "
            f"risk={self.risk_score:.1f}({self.risk_level.value})"
        )


class LevelReading(SensorReading):
    """Hydrological sample: water level, pH and turbidity."""

    level_m: float
    ph: float
    turbidity_ntu: float

    MEASUREMENTS: ClassVar[tuple[str, ...]] = ("level_m", "ph", "turbidity_ntu")
    ACCEPTED_COLUMNS: ClassVar[tuple[int, ...]] = (5,)
    FIELD_LABELS: ClassVar[dict[str, str]] = {
        "level_m": "level (m)",
        "ph": "pH",
        "turbidity_ntu": "turbidity (NTU)",
    }
    METRIC_NAME: ClassVar[str] = "level"

    @property
    def metric(self) -> float:
        return self.level_m

    def format(self) -> str:
        return (
            f"{self.id} | {self._display_time()} | "
            f"level={self.level_m:.3f}m pH={self.ph:.2f} "
            f"turbidity={self.turbidity_ntu:.2f}NTU"
        )


class ReadingSchema(str, Enum):
    CONTAMINATION = "contamination"
    HYDROLOGICAL = "hydrological"

    @property
    def model(self) -> type[SensorReading]:
        return _SCHEMA_MODELS[self]


_SCHEMA_MODELS: dict[ReadingSchema, type[SensorReading]] = {
    ReadingSchema.CONTAMINATION: ContaminationReading,
    ReadingSchema.HYDROLOGICAL: LevelReading,
}
