# planwright/planning/enrichment/quality_gates.py
"""
Quality gate validator.

Seven weighted gates, each starting from a perfect score and losing a fixed
penalty per failed check. The overall score is the weighted average of the
gate scores. Runs last so it can see the other enrichment attachments.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from planwright.config.schema import QualityConfig
from planwright.planning.enrichment.view import WorkflowView
from planwright.planning.schemas.quality import (
    Blocker,
    GateResult,
    OverallQuality,
    QualityGateResult,
)
from planwright.planning.schemas.workflow import Workflow

logger = logging.getLogger(__name__)

GATE_PASS_SCORE = 0.8
TEST_TYPES = ("unit test", "integration test", "e2e test", "acceptance test")


@dataclass
class Scorecard:
    """Running score for one gate."""

    score: float = 1.0
    issues: list[str] = field(default_factory=list)

    def check(self, ok: bool, issue: str, penalty: float) -> None:
        if not ok:
            self.issues.append(issue)
            self.score -= penalty


def _task_titles(view: WorkflowView) -> list[str]:
    return [task.title.lower() for _, task in view.tasks]


def requirements_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(bool(wf.title), "Missing workflow title", 0.1)
    card.check(bool(wf.phases), "No implementation phases defined", 0.3)
    tasks = [task for _, task in view.tasks]
    undescribed = sum(1 for task in tasks if not task.description)
    card.check(
        not tasks or undescribed / len(tasks) <= 0.5,
        "Many tasks lack detailed descriptions",
        0.2,
    )
    card.check(bool(wf.acceptance_criteria), "Missing acceptance criteria", 0.2)
    return card


def architecture_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(
        any(p.type == "architecture" or "architecture" in p.name.lower() for p in wf.phases),
        "No dedicated architecture planning phase",
        0.3,
    )
    card.check(
        any("technology" in t or "framework" in t for t in _task_titles(view)),
        "No technology selection tasks identified",
        0.2,
    )
    card.check(view.mentions("scalability"), "No scalability considerations mentioned", 0.2)
    if wf.viewpoint == "architect":
        card.check(
            card.score >= 0.9, "Architecture workflow should have more detailed planning", 0.1
        )
    return card


def security_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(
        any(
            "security" in task.title.lower() or "auth" in task.title.lower()
            or task.type == "security"
            for _, task in view.tasks
        ),
        "No security implementation tasks identified",
        0.4,
    )
    card.check(view.mentions("auth"), "No authentication considerations", 0.2)
    card.check(view.mentions("validation"), "No input validation mentioned", 0.2)
    card.check(view.mentions("encrypt"), "No encryption considerations", 0.2)
    return card


def performance_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(
        any(
            "performance" in task.title.lower() or "optimization" in task.title.lower()
            or task.type == "optimize"
            for _, task in view.tasks
        ),
        "No performance optimization tasks",
        0.3,
    )
    card.check(view.mentions("monitor"), "No performance monitoring planned", 0.3)
    card.check(view.mentions("load test"), "No load testing planned", 0.2)
    card.check(view.mentions("cach"), "No caching strategy mentioned", 0.2)
    return card


def testing_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(
        any(p.type == "testing" or "test" in p.name.lower() for p in wf.phases),
        "No dedicated testing phase",
        0.3,
    )
    missing = [kind for kind in TEST_TYPES if not view.mentions(kind)]
    card.check(len(missing) <= 2, f"Missing test types: {', '.join(missing)}", 0.3)
    card.check(view.mentions("automat"), "No test automation mentioned", 0.2)
    if wf.viewpoint == "qa":
        card.check(
            card.score >= 0.9, "QA workflow should have comprehensive testing strategy", 0.1
        )
    return card


def documentation_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    tasks = [task for _, task in view.tasks]
    card.check(
        any(
            "document" in task.title.lower()
            or any("document" in d.lower() for d in task.deliverables)
            for task in tasks
        ),
        "No documentation tasks identified",
        0.4,
    )
    with_deliverables = sum(1 for task in tasks if task.deliverables)
    card.check(
        not tasks or with_deliverables / len(tasks) >= 0.5,
        "Many tasks lack deliverable specifications",
        0.3,
    )
    if view.mentions("api"):
        card.check(
            view.mentions("api doc"), "API development without documentation planning", 0.3
        )
    return card


def risk_gate(wf: Workflow, view: WorkflowView) -> Scorecard:
    card = Scorecard()
    card.check(wf.risks is not None, "No risk assessment provided", 0.5)
    card.check(
        wf.risks is not None and wf.risks.mitigation is not None,
        "No risk mitigation strategies",
        0.3,
    )
    card.check(wf.dependencies is not None, "No dependency analysis", 0.2)
    return card


@dataclass(frozen=True)
class QualityGate:
    name: str
    weight: float
    description: str
    recommendation: str
    run: Callable[[Workflow, WorkflowView], Scorecard]


QUALITY_GATES: tuple[QualityGate, ...] = (
    QualityGate(
        "Requirements Validation", 0.20,
        "Ensures all requirements are clearly defined and traceable",
        "Add missing requirements details",
        requirements_gate,
    ),
    QualityGate(
        "Architecture Review", 0.15,
        "Validates architectural decisions and technology choices",
        "Add architecture planning tasks",
        architecture_gate,
    ),
    QualityGate(
        "Security Assessment", 0.15,
        "Ensures security considerations are properly addressed",
        "Add security implementation tasks",
        security_gate,
    ),
    QualityGate(
        "Performance Validation", 0.15,
        "Validates performance requirements and optimization strategies",
        "Add performance optimization tasks",
        performance_gate,
    ),
    QualityGate(
        "Testing Strategy", 0.15,
        "Ensures comprehensive testing approach across all levels",
        "Add comprehensive testing strategy",
        testing_gate,
    ),
    QualityGate(
        "Documentation Review", 0.10,
        "Validates documentation completeness and quality",
        "Add documentation tasks and deliverables",
        documentation_gate,
    ),
    QualityGate(
        "Risk Assessment", 0.10,
        "Ensures risks are identified and mitigation strategies are in place",
        "Add risk assessment and mitigation",
        risk_gate,
    ),
)


def run_gate(gate: QualityGate, workflow: Workflow, view: WorkflowView) -> GateResult:
    card = gate.run(workflow, view)
    score = round(max(0.0, card.score), 2)
    return GateResult(
        name=gate.name,
        description=gate.description,
        weight=gate.weight,
        score=score,
        passed=score >= GATE_PASS_SCORE,
        issues=card.issues,
        recommendations=[gate.recommendation] if card.issues else [],
    )


def validate_quality_gates(
    workflow: Workflow,
    settings: QualityConfig | None = None,
    view: WorkflowView | None = None,
) -> QualityGateResult:
    """
    Run every quality gate against a workflow.

    Args:
        workflow: Workflow, ideally with its other attachments merged
        settings: Pass and blocker thresholds
        view: Precomputed flattened view (built if omitted)

    Returns:
        QualityGateResult with per-gate results, recommendations and blockers
    """
    settings = settings or QualityConfig()
    view = view or WorkflowView.of(workflow)

    gates = {gate.name: run_gate(gate, workflow, view) for gate in QUALITY_GATES}
    total_weight = sum(g.weight for g in gates.values())
    overall = sum(g.score * g.weight for g in gates.values()) / total_weight if total_weight else 0.0
    overall = round(overall, 4)

    result = QualityGateResult(
        overall=OverallQuality(passed=overall >= settings.pass_threshold, score=overall),
        gates=gates,
        recommendations=[
            f"{name}: {', '.join(g.recommendations) or 'Needs improvement'}"
            for name, g in gates.items()
            if not g.passed
        ],
        blockers=[
            Blocker(gate=name, issues=g.issues)
            for name, g in gates.items()
            if g.score < settings.blocker_threshold
        ],
    )
    logger.info(
        f"Quality gates: score {overall:.2f} "
        f"({'passed' if result.overall.passed else 'failed'}), {len(result.blockers)} blockers"
    )
    return result
