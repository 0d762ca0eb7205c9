# tests/unit/test_viewpoints.py
"""Tests for the viewpoint catalog, auto-selection and phase templates."""

import pytest

from planwright.errors import UnknownViewpoint
from planwright.planning.schemas import AcceptanceCriterion, Feature, Requirements
from planwright.planning.viewpoints import (
    VIEWPOINTS,
    detect_viewpoint,
    get_viewpoint,
    list_viewpoints,
    select_viewpoint,
)


def _phase_names(viewpoint: str, req: Requirements) -> list[str]:
    return [phase.name for phase in get_viewpoint(viewpoint).build_phases(req)]


class TestRegistry:
    """Immutable viewpoint catalog."""

    def test_catalog_order(self):
        assert list_viewpoints() == [
            "architect", "frontend", "backend", "security", "devops", "qa",
        ]

    def test_lookup_is_case_insensitive(self):
        assert get_viewpoint("  QA ").name == "qa"

    def test_unknown_viewpoint(self):
        with pytest.raises(UnknownViewpoint, match="wizard"):
            get_viewpoint("wizard")

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            VIEWPOINTS["custom"] = VIEWPOINTS["qa"]

    @pytest.mark.parametrize("name", list(VIEWPOINTS))
    def test_every_viewpoint_has_practices_and_gates(self, name):
        viewpoint = VIEWPOINTS[name]
        assert viewpoint.best_practices()
        assert viewpoint.quality_gates()
        assert viewpoint.description


class TestSelection:
    """Auto-detection and explicit overrides."""

    def test_no_signals_falls_back_to_architect(self):
        assert detect_viewpoint([], []) == "architect"

    def test_frontend_checked_before_backend(self):
        assert detect_viewpoint(["backend", "frontend"], []) == "frontend"

    def test_pattern_indicator(self):
        assert detect_viewpoint(["security"], ["api"]) == "backend"

    def test_infrastructure_is_devops(self):
        assert detect_viewpoint(["infrastructure"], []) == "devops"

    def test_security_domain(self):
        assert detect_viewpoint(["security"], []) == "security"

    def test_override_wins(self):
        req = Requirements(domains=["frontend"])
        assert select_viewpoint(req, "Security") == "security"

    def test_auto_override_detects(self):
        req = Requirements(domains=["backend"])
        assert select_viewpoint(req, "auto") == "backend"
        assert select_viewpoint(req, None) == "backend"

    def test_unknown_override(self):
        with pytest.raises(UnknownViewpoint):
            select_viewpoint(Requirements(), "wizard")


class TestPhaseTemplates:
    """Conditional phases and per-item tasks."""

    @pytest.mark.parametrize("name", list(VIEWPOINTS))
    def test_no_empty_phases(self, name):
        for phase in get_viewpoint(name).build_phases(Requirements()):
            assert phase.tasks

    def test_backend_integrations_only_when_present(self):
        assert "External Integrations" not in _phase_names("backend", Requirements())

        phases = get_viewpoint("backend").build_phases(Requirements(integrations=["stripe"]))
        integration = next(p for p in phases if p.name == "External Integrations")
        task = next(t for t in integration.tasks if t.title == "Implement stripe integration")
        assert task.type == "integration"
        assert task.dependencies == ["Integration architecture design"]

    def test_backend_services_from_text(self):
        req = Requirements(title="Shop", overview="Payment processing and order history")
        phases = get_viewpoint("backend").build_phases(req)
        service = next(p for p in phases if p.name == "Service Implementation")
        titles = [t.title for t in service.tasks]
        assert "Implement payment service" in titles
        assert "Implement order service" in titles
        payment = next(t for t in service.tasks if t.title == "Implement payment service")
        assert payment.estimated_hours == 16

    def test_architect_scalability_needs_two_indicators(self):
        assert "Scalability & Performance Planning" not in _phase_names(
            "architect", Requirements(integrations=["a", "b", "c"])
        )
        assert "Scalability & Performance Planning" in _phase_names(
            "architect",
            Requirements(integrations=["a", "b", "c"], scalability_level="enterprise"),
        )

    def test_architect_legacy_analysis_with_integrations(self):
        phases = get_viewpoint("architect").build_phases(Requirements(integrations=["sap"]))
        assert "Legacy system analysis" in [t.title for t in phases[0].tasks]

    def test_frontend_components_from_catalog(self):
        req = Requirements(title="Dashboard with chart and table")
        phases = get_viewpoint("frontend").build_phases(req)
        components = next(p for p in phases if p.name == "Component Architecture")
        titles = [t.title for t in components.tasks]
        assert titles[-2:] == ["Implement table component", "Implement chart component"]
        assert components.tasks[-1].estimated_hours == 12

    def test_frontend_implementation_by_priority(self):
        req = Requirements(
            features=[
                Feature(name="login", priority="high"),
                Feature(name="export", priority="medium"),
                Feature(name="themes", priority="low"),
            ]
        )
        phases = get_viewpoint("frontend").build_phases(req)
        names = [p.name for p in phases]
        assert "Core Implementation" in names
        assert "Feature Enhancement" in names
        core = next(p for p in phases if p.name == "Core Implementation")
        assert [t.title for t in core.tasks] == ["Implement login"]

    def test_frontend_generic_implementation_without_features(self):
        phases = get_viewpoint("frontend").build_phases(Requirements())
        implementation = next(p for p in phases if p.name == "Implementation")
        assert implementation.tasks[0].title == "Core feature implementation"

    def test_qa_verifies_testable_criteria(self):
        req = Requirements(
            acceptance_criteria=[
                AcceptanceCriterion(description="User can log in", testable=True),
                AcceptanceCriterion(description="Looks tidy"),
            ]
        )
        phases = get_viewpoint("qa").build_phases(req)
        tests = next(p for p in phases if p.name == "Test Implementation")
        assert [t.title for t in tests.tasks] == ["Verify: User can log in"]
        assert tests.tasks[0].acceptance_criteria == ["User can log in"]

    def test_qa_falls_back_to_generic_suite(self):
        phases = get_viewpoint("qa").build_phases(Requirements())
        tests = next(p for p in phases if p.name == "Test Implementation")
        assert [t.title for t in tests.tasks] == ["Functional test suite"]

    def test_qa_load_testing_when_performance_matters(self):
        assert "Performance & Load Testing" not in _phase_names("qa", Requirements())
        assert "Performance & Load Testing" in _phase_names(
            "qa", Requirements(performance_level="critical")
        )

    def test_devops_scaling_for_realtime(self):
        assert "Scaling & Resilience" not in _phase_names("devops", Requirements())
        assert "Scaling & Resilience" in _phase_names("devops", Requirements(realtime=True))

    def test_security_integration_review(self):
        assert "Third-Party Integration Security" not in _phase_names(
            "security", Requirements()
        )
        assert "Third-Party Integration Security" in _phase_names(
            "security", Requirements(integrations=["stripe"])
        )
