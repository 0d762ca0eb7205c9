# tests/unit/test_quality_gates.py
"""Tests for the weighted quality gate validator."""

import pytest

from planwright.config.schema import QualityConfig
from planwright.planning.enrichment import QUALITY_GATES, validate_quality_gates
from planwright.planning.schemas import (
    DependencyAnalysis,
    Phase,
    RiskAssessment,
    Task,
    Workflow,
    WorkflowMetadata,
)


def _workflow(phases: list[Phase], viewpoint: str = "architect", **extra) -> Workflow:
    return Workflow(
        title="Notes",
        strategy="systematic",
        viewpoint=viewpoint,
        phases=phases,
        metadata=WorkflowMetadata(
            estimated_duration="2 weeks", duration_weeks=2, complexity=0.0, risk_level="low"
        ),
        **extra,
    )


class TestGateCatalog:
    def test_weights_sum_to_one(self):
        assert sum(gate.weight for gate in QUALITY_GATES) == pytest.approx(1.0)

    def test_gate_names(self):
        assert [gate.name for gate in QUALITY_GATES] == [
            "Requirements Validation",
            "Architecture Review",
            "Security Assessment",
            "Performance Validation",
            "Testing Strategy",
            "Documentation Review",
            "Risk Assessment",
        ]


class TestEmptyWorkflow:
    """A workflow with no phases fails requirements and overall."""

    def test_requirements_gate(self):
        result = validate_quality_gates(_workflow([]))
        gate = result.gates["Requirements Validation"]

        assert gate.score <= 0.7
        assert "No implementation phases defined" in gate.issues
        assert "Missing acceptance criteria" in gate.issues
        assert gate.passed is False

    def test_overall_fails(self):
        result = validate_quality_gates(_workflow([]))
        assert result.overall.passed is False
        assert 0.0 <= result.overall.score < 0.8

    def test_risk_gate_is_a_blocker(self):
        result = validate_quality_gates(_workflow([]))

        assert result.gates["Risk Assessment"].score == 0.0
        assert "Risk Assessment" in [b.gate for b in result.blockers]
        assert "Risk Assessment: Add risk assessment and mitigation" in result.recommendations


class TestIndividualGates:
    def test_security_gate_passes_with_full_coverage(self):
        phase = Phase(
            name="Security",
            type="security",
            tasks=[
                Task(
                    type="implement",
                    title="Authentication setup",
                    description="Input validation and encryption at rest",
                )
            ],
        )
        gate = validate_quality_gates(_workflow([phase])).gates["Security Assessment"]

        assert gate.score == 1.0
        assert gate.passed is True
        assert gate.issues == []
        assert gate.recommendations == []

    def test_risk_gate_with_attachments(self):
        workflow = _workflow(
            [], risks=RiskAssessment(), dependencies=DependencyAnalysis()
        )
        gate = validate_quality_gates(workflow).gates["Risk Assessment"]
        assert gate.score == 1.0

    def test_qa_viewpoint_expects_more_testing(self):
        phase = Phase(
            name="Test Implementation",
            type="testing",
            tasks=[
                Task(type="test", title="Unit tests", description="Unit test suite"),
                Task(type="test", title="Integration tests", description="Integration test suite"),
            ],
        )
        gate = validate_quality_gates(_workflow([phase], viewpoint="qa")).gates["Testing Strategy"]

        assert gate.score == 0.7
        assert "No test automation mentioned" in gate.issues
        assert "QA workflow should have comprehensive testing strategy" in gate.issues

    def test_documentation_of_apis(self):
        phase = Phase(
            name="API",
            type="api-design",
            tasks=[Task(type="design", title="API contract", deliverables=["OpenAPI file"])],
        )
        gate = validate_quality_gates(_workflow([phase])).gates["Documentation Review"]

        assert "No documentation tasks identified" in gate.issues
        assert "API development without documentation planning" in gate.issues
        assert gate.score == 0.3


class TestThresholds:
    def test_custom_pass_threshold(self):
        result = validate_quality_gates(_workflow([]), QualityConfig(pass_threshold=0.0))
        assert result.overall.passed is True

    def test_custom_blocker_threshold(self):
        result = validate_quality_gates(_workflow([]), QualityConfig(blocker_threshold=0.0))
        assert result.blockers == []

    def test_scores_in_range(self):
        result = validate_quality_gates(_workflow([]))
        for gate in result.gates.values():
            assert 0.0 <= gate.score <= 1.0
