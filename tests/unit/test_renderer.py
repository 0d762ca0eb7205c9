# tests/unit/test_renderer.py
"""Tests for rendering workflows as markdown, JSON and YAML."""

import json

import pytest
import yaml

from planwright.errors import UnknownOutputFormat
from planwright.planning.enrichment import (
    analyze_dependencies,
    assess_risks,
    create_milestones,
    identify_parallel_streams,
    validate_quality_gates,
)
from planwright.planning.pipeline import WorkflowRenderer
from planwright.planning.pipeline.output import complexity_label
from planwright.planning.schemas import Phase, Task, Workflow, WorkflowMetadata


@pytest.fixture
def workflow() -> Workflow:
    """One design phase with a described, estimated task and a dependent review."""
    return Workflow(
        title="Shop",
        strategy="systematic",
        viewpoint="backend",
        phases=[
            Phase(
                name="Design",
                type="design",
                duration="1 week",
                tasks=[
                    Task(
                        type="design",
                        title="API spec",
                        description="Write the OpenAPI spec",
                        priority="high",
                        estimated_hours=6,
                        deliverables=["OpenAPI document"],
                    ),
                    Task(type="review", title="Spec review", dependencies=["API spec"]),
                ],
            )
        ],
        metadata=WorkflowMetadata(
            estimated_duration="3 weeks", duration_weeks=3, complexity=0.55, risk_level="medium"
        ),
        acceptance_criteria=["User can log in"],
        priorities=["Reliability", "Security"],
        best_practices=["Validate input"],
        quality_gates=["API review"],
    )


@pytest.fixture
def enriched(workflow: Workflow) -> Workflow:
    merged = workflow.model_copy(
        update={
            "dependencies": analyze_dependencies(workflow),
            "risks": assess_risks(workflow),
            "milestones": create_milestones(workflow),
            "parallel_streams": identify_parallel_streams(workflow),
        }
    )
    return merged.model_copy(update={"quality_gate_result": validate_quality_gates(merged)})


@pytest.fixture
def renderer() -> WorkflowRenderer:
    return WorkflowRenderer()


def _lines(text: str) -> list[str]:
    return text.splitlines()


class TestFormats:
    def test_available_formats(self, renderer):
        assert renderer.formats == ["roadmap", "tasks", "detailed", "json", "yaml"]

    def test_unknown_format(self, renderer, workflow):
        with pytest.raises(UnknownOutputFormat, match="pdf"):
            renderer.render(workflow, "pdf")

    def test_format_is_case_insensitive(self, renderer, workflow):
        assert renderer.render(workflow, "JSON") == renderer.render(workflow, "json")

    @pytest.mark.parametrize(
        "complexity,label",
        [(0.9, "High"), (0.8, "High"), (0.55, "Medium"), (0.2, "Low"), (0.1, "Very Low")],
    )
    def test_complexity_label(self, complexity, label):
        assert complexity_label(complexity) == label


class TestRoadmap:
    def test_header(self, renderer, workflow):
        lines = _lines(renderer.render(workflow))

        assert lines[0] == "# Shop"
        assert "## Roadmap" in lines
        assert "**Strategy:** Systematic" in lines
        assert "**Viewpoint:** Backend" in lines
        assert "**Estimated Duration:** 3 weeks" in lines
        assert "**Complexity:** Medium" in lines
        assert "**Risk Level:** Medium" in lines

    def test_phases_and_metadata(self, renderer, workflow):
        lines = _lines(renderer.render(workflow, "roadmap"))

        assert "## Phase 1: Design (1 week)" in lines
        assert "- [ ] API spec" in lines
        assert "  - Write the OpenAPI spec" in lines
        assert "## Project Metadata" in lines
        assert "**Complexity:** 0.55" in lines
        assert "## Milestones" not in lines

    def test_milestones_when_present(self, renderer, enriched):
        lines = _lines(renderer.render(enriched, "roadmap"))
        assert "- **Design Complete** (phase 1): All tasks in Design phase completed" in lines


class TestTaskBoard:
    def test_epics_and_stories(self, renderer, workflow):
        lines = _lines(renderer.render(workflow, "tasks"))

        assert "## Epic: Design" in lines
        assert "### Story: Design" in lines
        assert "### Story: Review" in lines
        assert "  - Priority: high" in lines
        assert "  - Estimated: 6h" in lines
        assert "## Acceptance Criteria" in lines
        assert "- [ ] User can log in" in lines
        assert "## Parallel Work Streams" not in lines


class TestDetailed:
    def test_tasks(self, renderer, workflow):
        lines = _lines(renderer.render(workflow, "detailed"))

        assert "### Task 1.1: API spec" in lines
        assert "**Estimated Time:** 6 hours" in lines
        assert "#### Deliverables:" in lines
        assert "- OpenAPI document" in lines
        assert "### Task 1.2: Spec review" in lines
        assert "**Dependencies:** API spec" in lines

    def test_viewpoint_guidance(self, renderer, workflow):
        lines = _lines(renderer.render(workflow, "detailed"))

        assert "## Quality Gates" in lines
        assert "- [ ] API review" in lines
        assert "## Best Practices" in lines
        assert "- Validate input" in lines
        assert "## Priorities" in lines
        assert "Reliability > Security" in lines
        assert "## Risk Assessment" not in lines

    def test_enrichment_sections(self, renderer, enriched):
        lines = _lines(renderer.render(enriched, "detailed"))

        assert "## Dependencies" in lines
        assert "## Risk Assessment" in lines
        assert "### Scope Creep" in lines
        assert "## Milestones" in lines
        assert "## Quality Gate Results" in lines


class TestStructuredFormats:
    def test_json_omits_missing_attachments(self, renderer, workflow):
        data = json.loads(renderer.render(workflow, "json"))

        assert data["title"] == "Shop"
        assert data["phases"][0]["tasks"][0]["estimated_hours"] == 6
        assert "risks" not in data

    def test_json_includes_attachments(self, renderer, enriched):
        data = json.loads(renderer.render(enriched, "json"))
        assert data["risks"]["summary"]["total"] == 4
        assert "overall" in data["quality_gate_result"]

    def test_yaml(self, renderer, workflow):
        data = yaml.safe_load(renderer.render(workflow, "yaml"))

        assert data["phases"][0]["name"] == "Design"
        assert data["metadata"]["risk_level"] == "medium"
