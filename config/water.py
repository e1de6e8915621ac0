"""
config/water.py
───────────────
Water-quality reference limits used by the contamination risk score.

Each pollutant term saturates at its "critical" concentration:
  pH         deviation from neutral, saturates at ±4 units
  magnesium  safe up to 30 mg/L, ramps to 50 mg/L, flat penalty above
  mercury    saturates at 0.002 mg/L (drinking-water limit order)
  oil        saturates at 1.0 mg/L
  trash      saturates at 20 items per m³
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ContaminationLimits:
    ph_neutral: float
    ph_max_deviation: float       # deviation at which the pH term saturates
    magnesium_safe_mg_l: float    # ≤ safe → no penalty
    magnesium_high_mg_l: float    # > high → full penalty
    mercury_critical_mg_l: float
    oil_critical_mg_l: float
    trash_critical_items_m3: float


WATER_LIMITS = ContaminationLimits(
    ph_neutral=7.0,
    ph_max_deviation=4.0,
    magnesium_safe_mg_l=30.0,
    magnesium_high_mg_l=50.0,
    mercury_critical_mg_l=0.002,
    oil_critical_mg_l=1.0,
    trash_critical_items_m3=20.0,
)

# ── Risk term weights (points, sum = 100) ─────────────────────────────────────
# The magnesium ramp between safe and high only reaches half its weight;
# crossing the high limit jumps to the full weight.
RISK_WEIGHTS: dict[str, float] = {
    "ph": 30.0,
    "magnesium": 20.0,
    "mercury": 30.0,
    "oil": 10.0,
    "trash": 10.0,
}

MAGNESIUM_RAMP_MAX = 10.0
