# planwright/planning/enrichment/dependencies.py
"""
Dependency analyzer.

Builds internal (phase/task), external service, technical, team-skill and
infrastructure dependency lists, plus the critical path and bottlenecks.
Phases are sequential: each one depends on its predecessor.
"""

import logging

from planwright.planning.enrichment import catalogs as c
from planwright.planning.enrichment.view import WorkflowView
from planwright.planning.schemas.dependencies import (
    Bottleneck,
    CriticalPathEntry,
    Dependency,
    DependencyAnalysis,
)
from planwright.planning.schemas.workflow import Phase, Task, Workflow

logger = logging.getLogger(__name__)

CRITICAL_PRIORITIES = frozenset({"high", "critical"})
MAX_PHASE_TASKS = 5
MAX_DEPENDENT_TASKS = 3


def _is_integration(task: Task) -> bool:
    return task.type == "integration" or "integrat" in task.title.lower()


def _service_name(task: Task) -> str | None:
    """Known vendor in the task text, else the subject of "Implement X integration"."""
    text = f"{task.title} {task.description or ''}".lower()
    for service in c.EXTERNAL_SERVICES:
        if service in text:
            return service
    title = task.title.lower()
    if title.startswith("implement ") and title.endswith(" integration"):
        return title[len("implement "): -len(" integration")].strip() or None
    return None


def _service_risk(service: str) -> str:
    if any(hint in service for hint in c.HIGH_RISK_SERVICE_HINTS):
        return "high"
    if any(hint in service for hint in c.MEDIUM_RISK_SERVICE_HINTS):
        return "medium"
    return "low"


def internal_dependencies(workflow: Workflow) -> list[Dependency]:
    deps: list[Dependency] = []
    for index, phase in enumerate(workflow.phases):
        if index > 0:
            previous = workflow.phases[index - 1]
            deps.append(
                Dependency(
                    name=f"{phase.name} depends on {previous.name}",
                    type="phase",
                    critical=True,
                    description=f"Phase {index + 1} cannot start until Phase {index} is complete",
                    source=phase.name,
                )
            )
        for task in phase.tasks:
            for dep in task.dependencies:
                deps.append(
                    Dependency(
                        name=f"{task.title} depends on {dep}",
                        type="task",
                        critical=task.priority in CRITICAL_PRIORITIES,
                        description=f"Task requires completion of {dep}",
                        source=phase.name,
                    )
                )
    return deps


def external_dependencies(view: WorkflowView) -> list[Dependency]:
    services: dict[str, str] = {}
    for phase, task in view.tasks:
        if _is_integration(task):
            name = _service_name(task)
            if name:
                services.setdefault(name, task.title)
        for tool in task.tools:
            if tool.lower() in c.EXTERNAL_SERVICES:
                services.setdefault(tool.lower(), task.title)

    return [
        Dependency(
            name=service,
            type="external",
            critical=any(hint in service for hint in c.CRITICAL_SERVICE_HINTS),
            description=f"Integration with {service} service (risk: {_service_risk(service)})",
            source=source,
        )
        for service, source in services.items()
    ]


def technical_dependencies(view: WorkflowView) -> list[Dependency]:
    found: list[str] = []
    for _, task in view.tasks:
        text = " ".join([task.description or "", *task.tools]).lower()
        for tech in c.TECHNOLOGIES:
            if tech in text and tech not in found:
                found.append(tech)

    return [
        Dependency(
            name=tech,
            type="technical",
            critical=tech in c.CRITICAL_TECHNOLOGIES,
            description=f"Framework/library dependency: {tech}",
            version=c.SUGGESTED_VERSIONS.get(tech, "latest"),
        )
        for tech in found
    ]


def required_skills(phase: Phase) -> list[str]:
    phase_type = phase.type.lower()
    skills: list[str] = []
    for hints, phase_skills in c.SKILL_MAP:
        if any(hint in phase_type for hint in hints):
            skills.extend(s for s in phase_skills if s not in skills)
    return skills


def team_dependencies(workflow: Workflow) -> list[Dependency]:
    """One entry per skill, listing every phase that needs it."""
    phases_by_skill: dict[str, list[str]] = {}
    for phase in workflow.phases:
        for skill in required_skills(phase):
            phases_by_skill.setdefault(skill, []).append(phase.name)

    return [
        Dependency(
            name=f"{skill} expertise required",
            type="team",
            critical=skill in c.CRITICAL_SKILLS,
            description=f"Required by: {', '.join(phases)}",
            source=phases[0],
        )
        for skill, phases in phases_by_skill.items()
    ]


def infrastructure_dependencies(workflow: Workflow) -> list[Dependency]:
    tools: dict[str, str] = {}
    for phase in workflow.phases:
        if phase.type not in c.INFRASTRUCTURE_PHASE_TYPES:
            continue
        for task in phase.tasks:
            for tool in task.tools:
                if tool.lower() in c.INFRASTRUCTURE_TOOLS:
                    tools.setdefault(tool.lower(), phase.name)

    return [
        Dependency(
            name=tool,
            type="infrastructure",
            critical=True,
            description=f"Infrastructure requirement: {tool}",
            source=phase_name,
        )
        for tool, phase_name in tools.items()
    ]


def critical_path(workflow: Workflow) -> list[CriticalPathEntry]:
    """Phases that contain at least one high or critical priority task."""
    entries = []
    for phase in workflow.phases:
        tasks = [t.title for t in phase.tasks if t.priority in CRITICAL_PRIORITIES]
        if tasks:
            entries.append(
                CriticalPathEntry(
                    phase=phase.name,
                    tasks=tasks,
                    duration=phase.estimated_duration or phase.duration,
                )
            )
    return entries


def bottlenecks(workflow: Workflow) -> list[Bottleneck]:
    found = []
    for phase in workflow.phases:
        if len(phase.tasks) > MAX_PHASE_TASKS:
            found.append(
                Bottleneck(
                    type="complexity",
                    location=phase.name,
                    description=f"Phase has {len(phase.tasks)} tasks - potential complexity bottleneck",
                    recommendation="Consider breaking into smaller phases",
                )
            )
        dependent = [t for t in phase.tasks if t.dependencies]
        if len(dependent) > MAX_DEPENDENT_TASKS:
            found.append(
                Bottleneck(
                    type="sequential",
                    location=phase.name,
                    description=f"{len(dependent)} tasks wait on other tasks",
                    recommendation="Look for parallelization opportunities",
                )
            )
    return found


def analyze_dependencies(
    workflow: Workflow, view: WorkflowView | None = None
) -> DependencyAnalysis:
    """
    Analyze dependencies of a workflow.

    Args:
        workflow: Synthesized workflow
        view: Precomputed flattened view (built if omitted)

    Returns:
        DependencyAnalysis; every list is empty for a workflow with no phases
    """
    view = view or WorkflowView.of(workflow)
    analysis = DependencyAnalysis(
        internal=internal_dependencies(workflow),
        external=external_dependencies(view),
        technical=technical_dependencies(view),
        team=team_dependencies(workflow),
        infrastructure=infrastructure_dependencies(workflow),
        critical_path=critical_path(workflow),
        bottlenecks=bottlenecks(workflow),
    )
    logger.info(
        f"Dependency analysis: {analysis.total} dependencies, "
        f"{len(analysis.critical_path)} critical-path phases, "
        f"{len(analysis.bottlenecks)} bottlenecks"
    )
    return analysis
