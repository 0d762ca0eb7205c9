# planwright/planning/pipeline/__init__.py
"""
Pipeline orchestration and rendering.

Exports:
    - WorkflowPipeline: Requirements-to-workflow orchestrator
    - PipelineOptions: Per-run switches
    - run_pipeline: One-off pipeline run
    - WorkflowRenderer: Text/JSON/YAML renderer
"""

from planwright.planning.pipeline.orchestrator import (
    PipelineOptions,
    WorkflowPipeline,
    run_pipeline,
)
from planwright.planning.pipeline.output import WorkflowRenderer

__all__ = ["PipelineOptions", "WorkflowPipeline", "WorkflowRenderer", "run_pipeline"]
