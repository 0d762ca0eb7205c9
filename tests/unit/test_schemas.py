# tests/unit/test_schemas.py
"""Tests for requirements and workflow Pydantic schemas."""

import pytest
from pydantic import ValidationError

from planwright.planning.schemas import (
    Feature,
    Phase,
    Requirements,
    Task,
    Workflow,
    WorkflowMetadata,
)


def _workflow(**overrides) -> Workflow:
    data = {
        "title": "Shop",
        "strategy": "systematic",
        "viewpoint": "backend",
        "phases": [
            Phase(
                name="Design",
                type="design",
                tasks=[
                    Task(type="design", title="API spec"),
                    Task(type="review", title="Design review"),
                ],
            ),
            Phase(name="Release", type="deployment", tasks=[Task(type="deploy", title="Ship")]),
        ],
        "metadata": WorkflowMetadata(
            estimated_duration="3 weeks", duration_weeks=3, complexity=0.2, risk_level="low"
        ),
    }
    data.update(overrides)
    return Workflow(**data)


class TestRequirements:
    def test_defaults(self):
        req = Requirements()
        assert req.title == "Untitled Project"
        assert req.features == []
        assert req.security_level == "standard"
        assert req.complexity == 0.0

    def test_unknown_fields_ignored(self):
        req = Requirements(title="Chat", legacy_field="x")
        assert not hasattr(req, "legacy_field")

    def test_feature_levels_validated(self):
        with pytest.raises(ValidationError):
            Feature(name="search", priority="urgent")

    def test_complexity_serialized(self):
        assert "complexity" in Requirements().model_dump()


class TestWorkflow:
    def test_task_count(self):
        assert _workflow().task_count == 3

    def test_task_count_empty(self):
        assert _workflow(phases=[]).task_count == 0

    def test_attachments_default_to_none(self):
        wf = _workflow()
        assert wf.dependencies is None
        assert wf.risks is None
        assert wf.estimates is None
        assert wf.parallel_streams is None
        assert wf.milestones is None
        assert wf.quality_gate_result is None

    def test_dump_excludes_missing_attachments(self):
        data = _workflow().model_dump(mode="json", exclude_none=True)
        assert "risks" not in data
        assert data["phases"][0]["tasks"][0]["title"] == "API spec"

    def test_task_requires_type(self):
        with pytest.raises(ValidationError):
            Task(title="Ship")
