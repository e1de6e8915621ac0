"""
config/risk.py
──────────────
Risk levels, score cutoffs, and display ordering.
"""

from enum import Enum


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


# Upper (exclusive) score bound per level; anything at or above the last
# bound is CRITICAL.
RISK_LEVEL_CUTOFFS: list[tuple[float, RiskLevel]] = [
    (20.0, RiskLevel.LOW),
    (50.0, RiskLevel.MEDIUM),
    (75.0, RiskLevel.HIGH),
]

# Severity ordering for sorting (higher = more severe)
RISK_LEVEL_ORDER: dict[str, int] = {
    RiskLevel.LOW: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.HIGH: 3,
    RiskLevel.CRITICAL: 4,
}

RISK_SCORE_MIN = 0.0
RISK_SCORE_MAX = 100.0
