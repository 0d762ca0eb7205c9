# planwright/tools/generate_workflow.py
"""
generate_workflow tool implementation.

Validates inputs, runs the pipeline and renders the result.
"""

import logging

from fastmcp.exceptions import ToolError

from planwright.config.schema import PlanwrightConfig
from planwright.errors import PlanwrightError, UnsupportedFormat
from planwright.models.responses import GenerateWorkflowResponse
from planwright.planning.extraction import SUPPORTED_EXTENSIONS
from planwright.planning.pipeline import PipelineOptions, WorkflowPipeline, WorkflowRenderer
from planwright.validation.sanitize import sanitize_description, sanitize_input_path

logger = logging.getLogger(__name__)


async def generate_workflow(
    description: str | None,
    config: PlanwrightConfig,
    file_path: str | None = None,
    viewpoint: str | None = None,
    strategy: str | None = None,
    output_format: str | None = None,
    include_dependencies: bool = False,
    include_risks: bool = False,
    include_estimates: bool = False,
    include_parallel_streams: bool = False,
    include_milestones: bool = False,
    run_quality_gates: bool = False,
    include_all: bool = False,
) -> dict:
    """
    Generate an implementation workflow.

    Args:
        description: Feature description (ignored when file_path is given)
        config: Configuration instance
        file_path: Optional requirements document (.md, .markdown, .txt)
        viewpoint: Viewpoint name or "auto" (default from config)
        strategy: systematic, iterative/agile or minimum-scope/mvp
        output_format: roadmap, tasks, detailed, json or yaml
        include_*: Enrichment passes to run
        include_all: Run every enrichment pass

    Returns:
        GenerateWorkflowResponse as dict

    Raises:
        ToolError: If inputs are invalid or name unknown catalog entries
    """
    if file_path:
        path = sanitize_input_path(file_path)
        if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise ToolError(str(UnsupportedFormat(path.name)))
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ToolError(f"Cannot read {path}: {e}")
        source_kind, file_name = "structured", path.name
    else:
        text = sanitize_description(description or "")
        source_kind, file_name = "freeform", None

    flags = {
        "include_dependencies": include_dependencies,
        "include_risks": include_risks,
        "include_estimates": include_estimates,
        "include_parallel_streams": include_parallel_streams,
        "include_milestones": include_milestones,
        "run_quality_gates": run_quality_gates,
    }
    if include_all:
        flags = {key: True for key in flags}
    options = PipelineOptions(
        viewpoint=viewpoint or config.defaults.viewpoint,
        strategy=strategy or config.defaults.strategy,
        **flags,
    )
    fmt = output_format or config.output.format

    try:
        workflow = WorkflowPipeline(config).run(
            text, options, source_kind=source_kind, file_name=file_name
        )
        content = WorkflowRenderer().render(workflow, fmt)
    except PlanwrightError as e:
        raise ToolError(str(e))

    logger.info(
        f"Generated workflow '{workflow.title}' ({workflow.viewpoint}/{workflow.strategy}, "
        f"{len(workflow.phases)} phases)"
    )

    quality = workflow.quality_gate_result
    response = GenerateWorkflowResponse(
        title=workflow.title,
        viewpoint=workflow.viewpoint,
        strategy=workflow.strategy,
        format=fmt,
        content=content,
        phase_count=len(workflow.phases),
        task_count=workflow.task_count,
        quality_score=quality.overall.score if quality else None,
        workflow=workflow.model_dump(mode="json", exclude_none=True),
    )
    return response.model_dump()
