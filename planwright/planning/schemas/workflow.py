# planwright/planning/schemas/workflow.py
"""Schema for the synthesized workflow and its phases, tasks and schedule attachments."""

from pydantic import BaseModel, ConfigDict, Field

from planwright.planning.schemas.dependencies import DependencyAnalysis
from planwright.planning.schemas.quality import QualityGateResult
from planwright.planning.schemas.risk import RiskAssessment


class Task(BaseModel):
    """A unit of work inside a phase."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., description="Task kind (analysis, design, implementation, ...)")
    title: str
    description: str | None = None
    deliverables: list[str] = Field(default_factory=list)
    estimated_hours: float | None = None
    priority: str | None = Field(
        default=None, description="low, medium, high or critical"
    )
    dependencies: list[str] = Field(
        default_factory=list, description="Titles of tasks this task waits on"
    )
    tools: list[str] = Field(default_factory=list)
    acceptance_criteria: list[str] = Field(default_factory=list)
    story_points: int | None = None


class Phase(BaseModel):
    """An ordered group of tasks. Phases run sequentially."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    duration: str | None = Field(default=None, description="Template duration label")
    estimated_duration: str | None = Field(
        default=None, description="Duration derived from task hours"
    )
    description: str | None = None
    tasks: list[Task] = Field(default_factory=list)


class WorkflowMetadata(BaseModel):
    """Scores carried from the signal scorer."""

    model_config = ConfigDict(extra="ignore")

    estimated_duration: str
    duration_weeks: int
    complexity: float
    risk_level: str
    team_size: int | None = None


class EffortEstimate(BaseModel):
    """Hours per task and durations per phase."""

    model_config = ConfigDict(extra="ignore")

    task_hours: dict[str, list[float]] = Field(
        default_factory=dict, description="phase name -> hours per task, in task order"
    )
    phase_durations: dict[str, str] = Field(default_factory=dict)
    total_hours: float = 0.0


class ParallelStream(BaseModel):
    """Tasks within one phase that can be worked on side by side."""

    model_config = ConfigDict(extra="ignore")

    name: str
    phase: str
    tasks: list[str] = Field(default_factory=list)


class Milestone(BaseModel):
    """Completion checkpoint for a phase."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    phase: int = Field(..., description="Phase number (1-indexed)")
    criteria: list[str] = Field(default_factory=list)


class Workflow(BaseModel):
    """A phased implementation plan.

    Built by the synthesizer; enrichment results are attached by the
    assembler in one merge. Attachments stay None when their pass is off.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    strategy: str
    viewpoint: str
    phases: list[Phase] = Field(default_factory=list)
    metadata: WorkflowMetadata

    priorities: list[str] = Field(
        default_factory=list, description="Viewpoint priority order, highest first"
    )
    best_practices: list[str] = Field(default_factory=list)
    quality_gates: list[str] = Field(
        default_factory=list, description="Viewpoint review checkpoints"
    )
    acceptance_criteria: list[str] = Field(default_factory=list)

    dependencies: DependencyAnalysis | None = None
    risks: RiskAssessment | None = None
    estimates: EffortEstimate | None = None
    parallel_streams: list[ParallelStream] | None = None
    milestones: list[Milestone] | None = None
    quality_gate_result: QualityGateResult | None = None

    @property
    def task_count(self) -> int:
        return sum(len(phase.tasks) for phase in self.phases)
