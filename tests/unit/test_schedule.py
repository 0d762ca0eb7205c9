# tests/unit/test_schedule.py
"""Tests for effort estimates, parallel streams and milestones."""

import pytest

from planwright.planning.enrichment import (
    create_milestones,
    estimate_effort,
    identify_parallel_streams,
)
from planwright.planning.enrichment.schedule import format_days, task_hours
from planwright.planning.schemas import Phase, Task, Workflow, WorkflowMetadata


@pytest.fixture
def workflow() -> Workflow:
    """Design phase with a dependency chain, then a single-task release."""
    return Workflow(
        title="Shop",
        strategy="systematic",
        viewpoint="backend",
        phases=[
            Phase(
                name="Design",
                type="design",
                tasks=[
                    Task(type="design", title="Wireframes"),
                    Task(type="implement", title="Prototype"),
                    Task(type="review", title="Design review", dependencies=["Wireframes"]),
                ],
            ),
            Phase(
                name="Release",
                type="deployment",
                tasks=[Task(type="deploy", title="Ship", estimated_hours=12)],
            ),
        ],
        metadata=WorkflowMetadata(
            estimated_duration="4 weeks", duration_weeks=4, complexity=0.2, risk_level="low"
        ),
    )


class TestTaskHours:
    @pytest.mark.parametrize(
        "task,hours",
        [
            (Task(type="design", title="Wireframes"), 4.0),
            (Task(type="chore", title="Integrate billing"), 6.0),
            (Task(type="chore", title="Coordinate"), 5.0),
            (Task(type="design", title="Wireframes", estimated_hours=12), 12),
        ],
    )
    def test_keyword_estimates(self, task, hours):
        assert task_hours(task) == hours

    @pytest.mark.parametrize(
        "hours,label",
        [(0, "1 day"), (8, "1 day"), (9, "2 days"), (40, "5 days"), (48, "2 weeks"), (200, "5 weeks")],
    )
    def test_format_days(self, hours, label):
        assert format_days(hours) == label


class TestEstimateEffort:
    def test_hours_per_task(self, workflow):
        estimate = estimate_effort(workflow)

        assert estimate.task_hours["Design"] == [4.0, 8.0, 4.0]
        assert estimate.task_hours["Release"] == [12]
        assert estimate.total_hours == 28

    def test_duplicate_titles_counted_separately(self):
        phase = Phase(
            name="Build",
            type="implementation",
            tasks=[
                Task(type="implement", title="Wire up API"),
                Task(type="implement", title="Wire up API", estimated_hours=3),
            ],
        )
        wf = Workflow(
            title="Shop",
            strategy="systematic",
            viewpoint="backend",
            phases=[phase],
            metadata=WorkflowMetadata(
                estimated_duration="1 week", duration_weeks=1, complexity=0.1, risk_level="low"
            ),
        )

        estimate = estimate_effort(wf)

        assert estimate.task_hours["Build"] == [8.0, 3]
        assert estimate.total_hours == 11

    def test_phase_durations(self, workflow):
        estimate = estimate_effort(workflow)
        assert estimate.phase_durations == {"Design": "2 days", "Release": "2 days"}


class TestParallelStreams:
    def test_independent_tasks_form_a_stream(self, workflow):
        streams = identify_parallel_streams(workflow)

        assert len(streams) == 1
        assert streams[0].name == "Design (parallel)"
        assert streams[0].phase == "Design"
        assert streams[0].tasks == ["Wireframes", "Prototype"]


class TestMilestones:
    def test_one_per_phase(self, workflow):
        milestones = create_milestones(workflow)

        assert [m.name for m in milestones] == ["Design Complete", "Release Complete"]
        assert [m.phase for m in milestones] == [1, 2]
        assert milestones[0].description == "All tasks in Design phase completed"
        assert milestones[0].criteria == ["Wireframes", "Prototype", "Design review"]
