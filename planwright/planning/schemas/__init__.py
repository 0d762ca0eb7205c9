"""Pydantic schemas for requirements, workflows and enrichment results."""

from planwright.planning.schemas.requirements import (
    AcceptanceCriterion,
    Constraint,
    Feature,
    Requirements,
    Resources,
    TechnicalRequirements,
    Timeline,
    UserStory,
)
from planwright.planning.schemas.dependencies import (
    Bottleneck,
    CriticalPathEntry,
    Dependency,
    DependencyAnalysis,
)
from planwright.planning.schemas.risk import (
    MitigationAction,
    MitigationPlan,
    Risk,
    RiskAssessment,
    RiskSummary,
)
from planwright.planning.schemas.quality import (
    Blocker,
    GateResult,
    OverallQuality,
    QualityGateResult,
)
from planwright.planning.schemas.workflow import (
    EffortEstimate,
    Milestone,
    ParallelStream,
    Phase,
    Task,
    Workflow,
    WorkflowMetadata,
)

__all__ = [
    "AcceptanceCriterion",
    "Constraint",
    "Feature",
    "Requirements",
    "Resources",
    "TechnicalRequirements",
    "Timeline",
    "UserStory",
    "Bottleneck",
    "CriticalPathEntry",
    "Dependency",
    "DependencyAnalysis",
    "MitigationAction",
    "MitigationPlan",
    "Risk",
    "RiskAssessment",
    "RiskSummary",
    "Blocker",
    "GateResult",
    "OverallQuality",
    "QualityGateResult",
    "EffortEstimate",
    "Milestone",
    "ParallelStream",
    "Phase",
    "Task",
    "Workflow",
    "WorkflowMetadata",
]
