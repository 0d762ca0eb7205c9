"""Complexity, risk and duration scoring."""

from planwright.planning.scoring.scorer import (
    SignalScore,
    compute_complexity,
    compute_duration_weeks,
    compute_risk_level,
    format_duration,
    score,
)

__all__ = [
    "SignalScore",
    "compute_complexity",
    "compute_duration_weeks",
    "compute_risk_level",
    "format_duration",
    "score",
]
