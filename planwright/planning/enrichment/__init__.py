# planwright/planning/enrichment/__init__.py
"""Post-synthesis analysis passes. Each is a pure function of a Workflow."""

from planwright.planning.enrichment.dependencies import analyze_dependencies
from planwright.planning.enrichment.quality_gates import QUALITY_GATES, validate_quality_gates
from planwright.planning.enrichment.risk import RISK_RULES, assess_risks
from planwright.planning.enrichment.schedule import (
    create_milestones,
    estimate_effort,
    identify_parallel_streams,
)
from planwright.planning.enrichment.view import WorkflowView

__all__ = [
    "QUALITY_GATES",
    "RISK_RULES",
    "WorkflowView",
    "analyze_dependencies",
    "assess_risks",
    "create_milestones",
    "estimate_effort",
    "identify_parallel_streams",
    "validate_quality_gates",
]
