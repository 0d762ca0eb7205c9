# tests/unit/test_scoring.py
"""Tests for complexity, risk level and duration scoring."""

import pytest

from planwright.planning.schemas import Feature, Requirements
from planwright.planning.scoring import (
    compute_complexity,
    compute_duration_weeks,
    compute_risk_level,
    format_duration,
    score,
)


def _features(n: int) -> list[Feature]:
    return [Feature(name=f"feature {i}") for i in range(n)]


class TestComplexity:
    """Weighted, capped, clamped complexity."""

    def test_empty_requirements(self):
        assert compute_complexity(Requirements()) == 0.0

    def test_feature_weight(self):
        assert compute_complexity(Requirements(features=_features(3))) == 0.09

    def test_counts_saturate_at_cap(self):
        few = Requirements(components=[f"c{i}" for i in range(10)])
        many = Requirements(components=[f"c{i}" for i in range(40)])
        assert compute_complexity(few) == compute_complexity(many) == 0.5

    def test_clamped_to_one(self):
        req = Requirements(
            components=[f"c{i}" for i in range(10)],
            realtime=True,
            security_level="high",
            performance_level="critical",
            scalability_level="enterprise",
        )
        assert compute_complexity(req) == 1.0

    @pytest.mark.parametrize(
        "signal", ["components", "integrations", "user_roles", "features", "pages"]
    )
    @pytest.mark.parametrize("realtime", [False, True])
    def test_non_decreasing_per_signal(self, signal, realtime):
        """Adding one item at a time never lowers the score, past the cap included."""
        previous = 0.0
        for count in range(31):
            items = _features(count) if signal == "features" else [f"x{i}" for i in range(count)]
            current = compute_complexity(Requirements(realtime=realtime, **{signal: items}))
            assert current >= previous
            previous = current

    def test_computed_on_requirements(self):
        req = Requirements(features=_features(3))
        assert req.complexity == compute_complexity(req)


class TestRiskLevel:
    """Risk points bucketed into low, medium and high."""

    def test_low_by_default(self):
        assert compute_risk_level(Requirements()) == "low"

    def test_many_integrations_with_high_complexity(self):
        req = Requirements(
            integrations=["a", "b", "c", "d"],
            realtime=True,
            scalability_level="enterprise",
        )
        assert req.complexity == 0.75
        assert compute_risk_level(req) == "high"

    def test_many_integrations_alone_is_medium(self):
        req = Requirements(integrations=["a", "b", "c", "d"])
        assert compute_risk_level(req) == "medium"


class TestDuration:
    """Duration in weeks and its label."""

    def test_base_duration(self):
        assert compute_duration_weeks(Requirements()) == 2

    def test_scaled_by_complexity(self):
        req = Requirements(features=_features(2), integrations=["stripe"])
        assert req.complexity == 0.16
        assert compute_duration_weeks(req) == 5

    def test_format_weeks(self):
        assert format_duration(1) == "1 week"
        assert format_duration(4) == "4 weeks"

    def test_format_months(self):
        assert format_duration(5) == "2 months"
        assert format_duration(16) == "4 months"


class TestScore:
    def test_score_bundles_all_three(self):
        result = score(Requirements())
        assert result.complexity == 0.0
        assert result.risk_level == "low"
        assert result.duration_weeks == 2

    def test_deterministic(self):
        req = Requirements(features=_features(7), integrations=["slack", "github"])
        assert score(req) == score(req)
