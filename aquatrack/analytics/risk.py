"""
aquatrack/analytics/risk.py
───────────────────────────
Contamination risk score calculation.

Score ∈ [0, 100] where 0 = clean water, 100 = severely contaminated.

Additive sub-terms (points):
  ph         30  linear in |pH - 7|, saturating at a deviation of 4
  magnesium  20  0 up to 30 mg/L, ramp to 10 at 50 mg/L, 20 above
  mercury    30  linear up to 0.002 mg/L
  oil        10  linear up to 1.0 mg/L
  trash      10  linear up to 20 items/m³

Negative concentrations contribute 0. The total is clamped to [0, 100].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from config.risk import RISK_LEVEL_CUTOFFS, RISK_SCORE_MAX, RISK_SCORE_MIN, RiskLevel
from config.water import MAGNESIUM_RAMP_MAX, RISK_WEIGHTS, WATER_LIMITS, ContaminationLimits

if TYPE_CHECKING:
    from aquatrack.data.models import ContaminationReading

# ── Sub-term helpers ──────────────────────────────────────────────────────────


def _saturating(value: float, critical: float) -> float:
    """Fraction of the critical level reached, clipped to [0, 1]."""
    return min(1.0, max(0.0, value / critical))


def _ph_term(ph: float, limits: ContaminationLimits = WATER_LIMITS) -> float:
    deviation = abs(ph - limits.ph_neutral)
    return min(1.0, deviation / limits.ph_max_deviation) * RISK_WEIGHTS["ph"]


def _magnesium_term(magnesium: float, limits: ContaminationLimits = WATER_LIMITS) -> float:
    """Stepped: nothing while safe, a partial ramp, then the full weight."""
    safe, high = limits.magnesium_safe_mg_l, limits.magnesium_high_mg_l
    if magnesium > high:
        return RISK_WEIGHTS["magnesium"]
    if magnesium > safe:
        return MAGNESIUM_RAMP_MAX * ((magnesium - safe) / (high - safe))
    return 0.0


def _mercury_term(mercury: float, limits: ContaminationLimits = WATER_LIMITS) -> float:
    return _saturating(mercury, limits.mercury_critical_mg_l) * RISK_WEIGHTS["mercury"]


def _oil_term(oil: float, limits: ContaminationLimits = WATER_LIMITS) -> float:
    return _saturating(oil, limits.oil_critical_mg_l) * RISK_WEIGHTS["oil"]


def _trash_term(trash: float, limits: ContaminationLimits = WATER_LIMITS) -> float:
    return _saturating(trash, limits.trash_critical_items_m3) * RISK_WEIGHTS["trash"]


# ── Main API ──────────────────────────────────────────────────────────────────


def risk_terms(reading: ContaminationReading) -> dict[str, float]:
    """Per-pollutant contribution to the risk score."""
    return {
        "ph": _ph_term(reading.ph),
        "magnesium": _magnesium_term(reading.magnesium_mg_l),
        "mercury": _mercury_term(reading.mercury_mg_l),
        "oil": _oil_term(reading.oil_mg_l),
        "trash": _trash_term(reading.trash_items_m3),
    }


def compute_risk_score(reading: ContaminationReading) -> float:
    """Weighted contamination risk of a single reading, in [0, 100]."""
    score = sum(risk_terms(reading).values())
    return float(np.clip(score, RISK_SCORE_MIN, RISK_SCORE_MAX))


def classify_risk(score: float) -> RiskLevel:
    """
    Map a risk score to its level.

    Returns: LOW (<20) | MEDIUM (<50) | HIGH (<75) | CRITICAL
    """
    for upper, level in RISK_LEVEL_CUTOFFS:
        if score < upper:
            return level
    return RiskLevel.CRITICAL
