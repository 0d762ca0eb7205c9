# planwright/planning/pipeline/orchestrator.py
"""
Workflow pipeline orchestrator.

Runs the stages in order: extract, score, select viewpoint, synthesize,
enrich, assemble. Enrichment passes read the synthesized workflow and their
results are merged onto it in one step; the quality gates run last on the
merged workflow.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from planwright.config.schema import PlanwrightConfig
from planwright.planning.enrichment import (
    WorkflowView,
    analyze_dependencies,
    assess_risks,
    create_milestones,
    estimate_effort,
    identify_parallel_streams,
    validate_quality_gates,
)
from planwright.planning.enrichment.schedule import format_days
from planwright.planning.extraction import RequirementExtractor
from planwright.planning.extraction.extractor import SourceKind
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import EffortEstimate, Workflow, WorkflowMetadata
from planwright.planning.scoring import format_duration, score
from planwright.planning.synthesis import resolve_strategy, synthesize
from planwright.planning.viewpoints import get_viewpoint, select_viewpoint

logger = logging.getLogger(__name__)


class PipelineOptions(BaseModel):
    """Per-run switches. Every enrichment pass is off unless asked for."""

    model_config = ConfigDict(extra="ignore")

    viewpoint: str | None = Field(
        default=None, description="Viewpoint name, 'auto' or None to auto-detect"
    )
    strategy: str = Field(default="systematic", description="Strategy name or alias")
    include_dependencies: bool = False
    include_risks: bool = False
    include_estimates: bool = False
    include_parallel_streams: bool = False
    include_milestones: bool = False
    run_quality_gates: bool = False

    @classmethod
    def everything(cls, **overrides) -> "PipelineOptions":
        """Options with every enrichment pass switched on."""
        values = {
            "include_dependencies": True,
            "include_risks": True,
            "include_estimates": True,
            "include_parallel_streams": True,
            "include_milestones": True,
            "run_quality_gates": True,
        }
        values.update(overrides)
        return cls(**values)


def _apply_estimates(workflow: Workflow, estimate: EffortEstimate) -> Workflow:
    """Fill missing task hours and phase durations from an estimate."""
    phases = []
    for phase in workflow.phases:
        hours = estimate.task_hours.get(phase.name, [])
        tasks = [
            task
            if task.estimated_hours is not None or index >= len(hours)
            else task.model_copy(update={"estimated_hours": hours[index]})
            for index, task in enumerate(phase.tasks)
        ]
        duration = estimate.phase_durations.get(phase.name) or format_days(
            sum(t.estimated_hours or 0 for t in tasks)
        )
        phases.append(
            phase.model_copy(
                update={
                    "tasks": tasks,
                    "estimated_duration": phase.estimated_duration or duration,
                }
            )
        )
    return workflow.model_copy(update={"phases": phases})


class WorkflowPipeline:
    """
    Requirements-to-workflow pipeline.

    Example:
        pipeline = WorkflowPipeline(load_config())
        workflow = pipeline.run(text, PipelineOptions(include_risks=True))
    """

    def __init__(self, config: PlanwrightConfig | None = None) -> None:
        self.config = config or PlanwrightConfig()
        self._extractor = RequirementExtractor(self.config.extraction)

    def extract(
        self,
        raw_text: str,
        source_kind: SourceKind = "freeform",
        file_name: str | None = None,
    ) -> Requirements:
        logger.info("Stage 1/4: extract requirements")
        return self._extractor.extract(raw_text, source_kind, file_name)

    def synthesize(self, req: Requirements, options: PipelineOptions) -> Workflow:
        """
        Score, pick a viewpoint and build the bare workflow.

        Raises:
            UnknownViewpoint: If options.viewpoint names no known viewpoint
            UnknownStrategy: If options.strategy names no known strategy
        """
        logger.info("Stage 2/4: score and select viewpoint")
        signals = score(req)
        override = options.viewpoint or self.config.defaults.viewpoint
        viewpoint = get_viewpoint(select_viewpoint(req, override))
        strategy = resolve_strategy(options.strategy or self.config.defaults.strategy)

        logger.info(f"Stage 3/4: synthesize ({strategy}/{viewpoint.name})")
        phases = synthesize(req, viewpoint.name, strategy, self.config.synthesis)

        return Workflow(
            title=req.title,
            strategy=strategy,
            viewpoint=viewpoint.name,
            phases=phases,
            metadata=WorkflowMetadata(
                estimated_duration=format_duration(signals.duration_weeks),
                duration_weeks=signals.duration_weeks,
                complexity=signals.complexity,
                risk_level=signals.risk_level,
                team_size=req.resources.team_size,
            ),
            priorities=list(viewpoint.priority_hierarchy),
            best_practices=viewpoint.best_practices(),
            quality_gates=viewpoint.quality_gates(),
            acceptance_criteria=[c.description for c in req.acceptance_criteria],
        )

    def enrich(self, workflow: Workflow, options: PipelineOptions) -> Workflow:
        """Run the selected passes and merge their results onto the workflow."""
        logger.info("Stage 4/4: enrich")

        if options.include_estimates:
            estimate = estimate_effort(workflow)
            workflow = _apply_estimates(workflow, estimate).model_copy(
                update={"estimates": estimate}
            )

        view = WorkflowView.of(workflow)
        attachments: dict = {}
        if options.include_dependencies:
            attachments["dependencies"] = analyze_dependencies(workflow, view)
        if options.include_risks:
            attachments["risks"] = assess_risks(workflow, view)
        if options.include_parallel_streams:
            attachments["parallel_streams"] = identify_parallel_streams(workflow)
        if options.include_milestones:
            attachments["milestones"] = create_milestones(workflow)
        if attachments:
            workflow = workflow.model_copy(update=attachments)

        if options.run_quality_gates:
            result = validate_quality_gates(workflow, self.config.quality)
            workflow = workflow.model_copy(update={"quality_gate_result": result})

        return workflow

    def build(self, req: Requirements, options: PipelineOptions | None = None) -> Workflow:
        """Synthesize and enrich from already extracted requirements."""
        options = options or PipelineOptions()
        return self.enrich(self.synthesize(req, options), options)

    def run(
        self,
        raw_text: str,
        options: PipelineOptions | None = None,
        *,
        source_kind: SourceKind = "freeform",
        file_name: str | None = None,
    ) -> Workflow:
        """
        Run the full pipeline.

        Args:
            raw_text: Description or document contents
            options: Per-run switches (defaults: auto viewpoint, systematic, no passes)
            source_kind: "freeform" or "structured"
            file_name: Source file name for structured input

        Returns:
            Assembled Workflow

        Raises:
            PlanwrightError: On unsupported format, viewpoint or strategy
        """
        options = options or PipelineOptions()
        req = self.extract(raw_text, source_kind, file_name)
        workflow = self.build(req, options)
        logger.info(
            f"Workflow '{workflow.title}' ready: {len(workflow.phases)} phases, "
            f"{workflow.task_count} tasks"
        )
        return workflow


def run_pipeline(
    raw_text: str,
    options: PipelineOptions | None = None,
    *,
    source_kind: SourceKind = "freeform",
    file_name: str | None = None,
    config: PlanwrightConfig | None = None,
) -> Workflow:
    """Run a one-off WorkflowPipeline."""
    return WorkflowPipeline(config).run(
        raw_text, options, source_kind=source_kind, file_name=file_name
    )
