"""
aquatrack/analytics/stats.py
────────────────────────────
Collection-level statistics for the stats view.

  summarize()             : count, mean, min and max reading of a metric
  risk_level_breakdown()  : readings per risk level (contamination only)
"""
from __future__ import annotations

from pydantic import BaseModel

from aquatrack.data.collection import KeyFunc, ReadingCollection
from aquatrack.data.errors import SchemaMismatchError
from aquatrack.data.models import ReadingSchema, SensorReading
from config.risk import RISK_LEVEL_ORDER, RiskLevel


class ReadingStats(BaseModel):
    metric: str
    count: int
    average: float            # NaN when count == 0
    minimum: SensorReading | None = None
    maximum: SensorReading | None = None


def _primary_metric(reading: SensorReading) -> float:
    return reading.metric


def summarize(
    collection: ReadingCollection,
    key: KeyFunc | None = None,
    metric: str = "value",
) -> ReadingStats:
    """
    Aggregate a collection over `key`.

    Defaults to the schema's primary metric (risk score for contamination,
    level for hydrological readings).
    """
    if key is None:
        key, metric = _primary_metric, collection.schema.model.METRIC_NAME
    return ReadingStats(
        metric=metric,
        count=collection.size(),
        average=collection.average_of(key),
        minimum=collection.min_by(key),
        maximum=collection.max_by(key),
    )


def risk_level_breakdown(collection: ReadingCollection) -> dict[str, int]:
    """Number of readings per risk level, least to most severe, zeros kept."""
    if collection.schema is not ReadingSchema.CONTAMINATION:
        raise SchemaMismatchError(
            f"risk levels are not defined for the {collection.schema.value} schema"
        )
    levels = [level.value for level in sorted(RiskLevel, key=RISK_LEVEL_ORDER.__getitem__)]
    df = collection.to_frame()
    if df.empty:
        return dict.fromkeys(levels, 0)
    counts = df.groupby("risk_level").size().reindex(levels, fill_value=0)
    return {level: int(n) for level, n in counts.items()}
