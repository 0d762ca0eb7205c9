# planwright/planning/enrichment/schedule.py
"""Effort estimates, parallel work streams and milestones."""

import logging
import math

from planwright.planning.schemas.workflow import (
    EffortEstimate,
    Milestone,
    ParallelStream,
    Phase,
    Task,
    Workflow,
)

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 8
DAYS_PER_WEEK = 5
DEFAULT_TASK_HOURS = 5.0

# first keyword found in type/title/description wins
TASK_HOURS: tuple[tuple[str, float], ...] = (
    ("design", 4.0),
    ("implement", 8.0),
    ("test", 3.0),
    ("deploy", 2.0),
    ("review", 2.0),
    ("setup", 3.0),
    ("integrat", 6.0),
    ("optimiz", 5.0),
)


def task_hours(task: Task) -> float:
    """Declared hours, else a keyword estimate."""
    if task.estimated_hours is not None:
        return task.estimated_hours
    text = f"{task.type} {task.title} {task.description or ''}".lower()
    for keyword, hours in TASK_HOURS:
        if keyword in text:
            return hours
    return DEFAULT_TASK_HOURS


def format_days(hours: float) -> str:
    days = max(1, math.ceil(hours / HOURS_PER_DAY))
    if days <= DAYS_PER_WEEK:
        return f"{days} day" if days == 1 else f"{days} days"
    weeks = math.ceil(days / DAYS_PER_WEEK)
    return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"


def phase_duration(phase: Phase) -> str:
    return format_days(sum(task_hours(task) for task in phase.tasks))


def estimate_effort(workflow: Workflow) -> EffortEstimate:
    """Hours per task and a duration per phase (8 h days, 5 day weeks)."""
    estimate = EffortEstimate()
    for phase in workflow.phases:
        hours = [task_hours(task) for task in phase.tasks]
        estimate.task_hours[phase.name] = hours
        estimate.phase_durations[phase.name] = format_days(sum(hours))
        estimate.total_hours += sum(hours)

    logger.info(f"Effort estimate: {estimate.total_hours:g} hours over {len(workflow.phases)} phases")
    return estimate


def identify_parallel_streams(workflow: Workflow) -> list[ParallelStream]:
    """Per phase, the tasks that wait on nothing (two or more form a stream)."""
    streams = []
    for phase in workflow.phases:
        independent = [task.title for task in phase.tasks if not task.dependencies]
        if len(independent) >= 2:
            streams.append(
                ParallelStream(name=f"{phase.name} (parallel)", phase=phase.name, tasks=independent)
            )
    return streams


def create_milestones(workflow: Workflow) -> list[Milestone]:
    return [
        Milestone(
            name=f"{phase.name} Complete",
            description=f"All tasks in {phase.name} phase completed",
            phase=number,
            criteria=[task.title for task in phase.tasks],
        )
        for number, phase in enumerate(workflow.phases, start=1)
    ]
