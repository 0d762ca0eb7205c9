# planwright/planning/scoring/scorer.py
"""
Signal scorer: complexity, risk level and duration from extracted requirements.

Pure arithmetic over counts and flags. The same inputs always give the same
scores, so the complexity value can be recomputed whenever it is read.
"""

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planwright.planning.schemas.requirements import Requirements

logger = logging.getLogger(__name__)

# (attribute, cap, weight): count contributions saturate at the cap
COUNT_WEIGHTS: tuple[tuple[str, int, float], ...] = (
    ("components", 10, 0.05),
    ("integrations", 5, 0.10),
    ("user_roles", 5, 0.05),
    ("features", 20, 0.03),
    ("pages", 15, 0.02),
)

REALTIME_BONUS = 0.20
HIGH_SECURITY_BONUS = 0.15
CRITICAL_PERFORMANCE_BONUS = 0.10
ENTERPRISE_SCALE_BONUS = 0.15

BASE_WEEKS = 2.0
WEEKS_PER_FEATURE = 0.5
WEEKS_PER_INTEGRATION = 1.0


@dataclass(frozen=True)
class SignalScore:
    """Scores derived from one Requirements value."""

    complexity: float
    risk_level: str
    duration_weeks: int


def compute_complexity(req: "Requirements") -> float:
    """
    Weighted, capped sum of extraction counts plus modifier bonuses.

    Returns:
        Complexity clamped to [0.0, 1.0], rounded to 4 places
    """
    score = 0.0
    for attr, cap, weight in COUNT_WEIGHTS:
        score += min(len(getattr(req, attr)), cap) * weight

    if req.realtime:
        score += REALTIME_BONUS
    if req.security_level == "high":
        score += HIGH_SECURITY_BONUS
    if req.performance_level == "critical":
        score += CRITICAL_PERFORMANCE_BONUS
    if req.scalability_level == "enterprise":
        score += ENTERPRISE_SCALE_BONUS

    return round(max(0.0, min(score, 1.0)), 4)


def compute_risk_level(req: "Requirements", complexity: float | None = None) -> str:
    """Bucket accumulated risk points into low, medium or high."""
    if complexity is None:
        complexity = compute_complexity(req)

    points = 0
    if complexity > 0.7:
        points += 2
    if len(req.integrations) > 3:
        points += 2
    if req.security_level == "high":
        points += 1
    if len(req.features) > 10:
        points += 1

    if points >= 4:
        return "high"
    if points >= 2:
        return "medium"
    return "low"


def compute_duration_weeks(req: "Requirements", complexity: float | None = None) -> int:
    """Base weeks plus per-feature and per-integration effort, scaled by complexity."""
    if complexity is None:
        complexity = compute_complexity(req)

    base = (
        BASE_WEEKS
        + WEEKS_PER_FEATURE * len(req.features)
        + WEEKS_PER_INTEGRATION * len(req.integrations)
    )
    # round first so float noise (e.g. 5.0000000001) doesn't add a week
    return math.ceil(round(base * (1 + complexity), 6))


def format_duration(weeks: int) -> str:
    """Human duration label: weeks up to four, months beyond."""
    if weeks <= 4:
        return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"
    months = math.ceil(weeks / 4)
    return f"{months} month" if months == 1 else f"{months} months"


def score(req: "Requirements") -> SignalScore:
    """
    Score requirements.

    Args:
        req: Extracted requirements

    Returns:
        SignalScore with complexity, risk level and duration in weeks
    """
    complexity = compute_complexity(req)
    result = SignalScore(
        complexity=complexity,
        risk_level=compute_risk_level(req, complexity),
        duration_weeks=compute_duration_weeks(req, complexity),
    )
    logger.debug(
        f"Scored '{req.title}': complexity={result.complexity}, "
        f"risk={result.risk_level}, weeks={result.duration_weeks}"
    )
    return result
