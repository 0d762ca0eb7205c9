# tests/unit/test_pipeline.py
"""
End-to-end tests for the workflow pipeline.

Tests cover:
    - Viewpoint auto-selection from free text
    - Scoring of empty requirements
    - Structured documents and unsupported formats
    - Enrichment passes merged onto the workflow
    - Quality gates on a workflow without phases
    - Determinism
"""

import pytest

from planwright.config.schema import DefaultsConfig, PlanwrightConfig
from planwright.errors import UnknownStrategy, UnknownViewpoint, UnsupportedFormat
from planwright.planning.enrichment import estimate_effort
from planwright.planning.pipeline import PipelineOptions, WorkflowPipeline, run_pipeline
from planwright.planning.pipeline.orchestrator import _apply_estimates
from planwright.planning.schemas import Phase, Requirements, Task, Workflow, WorkflowMetadata

DASHBOARD = (
    "Build a responsive admin dashboard with React components, charts, "
    "and mobile-friendly design"
)
REST_API = "Implement REST API with authentication and PostgreSQL database integration"

PRD = """# Team Chat

## Overview
A chat app for small teams.

## Features
- Message threads (high priority)
- File sharing

## Acceptance Criteria
- User can post a message
- Threads are listed
"""


@pytest.fixture
def pipeline() -> WorkflowPipeline:
    return WorkflowPipeline()


class TestViewpointSelection:
    def test_dashboard_is_frontend(self, pipeline):
        """Scenario A: UI vocabulary selects the frontend viewpoint."""
        req = pipeline.extract(DASHBOARD)
        workflow = pipeline.build(req)

        assert "frontend" in req.domains
        assert {"ui-component", "responsive"} <= set(req.patterns)
        assert workflow.viewpoint == "frontend"
        assert workflow.strategy == "systematic"

    def test_rest_api_is_backend(self, pipeline):
        """Scenario B: API and database vocabulary selects the backend viewpoint."""
        req = pipeline.extract(REST_API)
        workflow = pipeline.build(req)

        assert {"api", "database", "authentication"} <= set(req.patterns)
        assert workflow.viewpoint == "backend"
        assert workflow.phases[0].name == "API Design & Specification"
        assert "External Integrations" not in [p.name for p in workflow.phases]

    def test_explicit_viewpoint(self, pipeline):
        workflow = pipeline.run(REST_API, PipelineOptions(viewpoint="qa"))
        assert workflow.viewpoint == "qa"
        assert workflow.best_practices[0] == "Design tests before implementation"
        assert workflow.priorities == [
            "Prevention", "Detection", "Correction", "Comprehensive coverage"
        ]

    def test_configured_default_viewpoint(self):
        config = PlanwrightConfig(defaults=DefaultsConfig(viewpoint="security"))
        workflow = run_pipeline(REST_API, config=config)
        assert workflow.viewpoint == "security"

    def test_unknown_viewpoint(self, pipeline):
        with pytest.raises(UnknownViewpoint):
            pipeline.run(REST_API, PipelineOptions(viewpoint="wizard"))

    def test_unknown_strategy(self, pipeline):
        with pytest.raises(UnknownStrategy):
            pipeline.run(REST_API, PipelineOptions(strategy="waterfall"))


class TestScoring:
    def test_empty_requirements(self, pipeline):
        """Scenario C: nothing extracted means zero complexity, low risk, two weeks."""
        workflow = pipeline.build(Requirements())

        assert workflow.metadata.complexity == 0
        assert workflow.metadata.risk_level == "low"
        assert workflow.metadata.duration_weeks == 2
        assert workflow.metadata.estimated_duration == "2 weeks"
        assert workflow.viewpoint == "architect"

    def test_rest_api_metadata(self, pipeline):
        workflow = pipeline.run(REST_API)
        assert workflow.metadata.complexity == 0.03
        assert workflow.metadata.estimated_duration == "3 weeks"
        assert workflow.title == REST_API


class TestStructuredInput:
    def test_markdown_document(self, pipeline):
        workflow = pipeline.run(PRD, source_kind="structured", file_name="prd.md")

        assert workflow.title == "Team Chat"
        assert workflow.acceptance_criteria == ["User can post a message", "Threads are listed"]

    def test_unsupported_extension(self, pipeline):
        """Scenario D: structured input with an unknown extension is rejected."""
        with pytest.raises(UnsupportedFormat):
            pipeline.run(PRD, source_kind="structured", file_name="prd.docx")


class TestEnrichment:
    def test_passes_off_by_default(self, pipeline):
        workflow = pipeline.run(REST_API)

        assert workflow.dependencies is None
        assert workflow.risks is None
        assert workflow.estimates is None
        assert workflow.parallel_streams is None
        assert workflow.milestones is None
        assert workflow.quality_gate_result is None

    def test_everything(self, pipeline):
        workflow = pipeline.run(REST_API, PipelineOptions.everything())

        assert workflow.dependencies is not None
        assert workflow.risks is not None
        assert workflow.estimates is not None
        assert workflow.parallel_streams
        assert len(workflow.milestones) == len(workflow.phases)
        assert workflow.quality_gate_result is not None

    def test_estimates_follow_task_order(self):
        """Tasks sharing a title each keep their own estimate."""
        wf = Workflow(
            title="Shop",
            strategy="systematic",
            viewpoint="backend",
            phases=[
                Phase(
                    name="Build",
                    type="implementation",
                    tasks=[
                        Task(type="implement", title="Wire up"),
                        Task(type="test", title="Wire up"),
                    ],
                )
            ],
            metadata=WorkflowMetadata(
                estimated_duration="1 week", duration_weeks=1, complexity=0.1, risk_level="low"
            ),
        )

        applied = _apply_estimates(wf, estimate_effort(wf))

        assert [t.estimated_hours for t in applied.phases[0].tasks] == [8.0, 3.0]
        assert applied.phases[0].estimated_duration == "2 days"

    def test_estimates_fill_tasks_and_phases(self, pipeline):
        workflow = pipeline.run(REST_API, PipelineOptions(include_estimates=True))

        for phase in workflow.phases:
            assert phase.estimated_duration
            for task in phase.tasks:
                assert task.estimated_hours is not None
        assert workflow.estimates.total_hours == sum(
            task.estimated_hours for phase in workflow.phases for task in phase.tasks
        )

    def test_quality_gates_see_other_attachments(self, pipeline):
        workflow = pipeline.run(REST_API, PipelineOptions.everything())
        gate = workflow.quality_gate_result.gates["Risk Assessment"]
        assert gate.score == 1.0

    def test_quality_gates_alone_miss_risk_analysis(self, pipeline):
        workflow = pipeline.run(REST_API, PipelineOptions(run_quality_gates=True))
        gate = workflow.quality_gate_result.gates["Risk Assessment"]
        assert "No risk assessment provided" in gate.issues

    def test_workflow_without_phases(self, pipeline):
        """Scenario E: no phases fails the gates and carries no risks."""
        options = PipelineOptions.everything(strategy="iterative")
        workflow = pipeline.run("A todo list.", options)

        assert workflow.phases == []
        assert workflow.risks.all_risks() == []
        assert workflow.dependencies.total == 0
        result = workflow.quality_gate_result
        assert result.overall.passed is False
        requirements = result.gates["Requirements Validation"]
        assert requirements.score <= 0.7
        assert "No implementation phases defined" in requirements.issues


class TestDeterminism:
    @pytest.mark.parametrize("strategy", ["systematic", "iterative", "minimum-scope"])
    def test_same_input_same_workflow(self, strategy):
        options = PipelineOptions.everything(strategy=strategy)
        first = run_pipeline(DASHBOARD, options)
        second = run_pipeline(DASHBOARD, options)
        assert first.model_dump() == second.model_dump()
