# planwright/planning/synthesis/strategies.py
"""
Workflow strategies.

systematic     - the viewpoint's ordered phase catalog
iterative      - user stories packed into fixed-capacity sprints
minimum-scope  - definition, build of the high-priority features, validation
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

from planwright.config.schema import SynthesisConfig
from planwright.errors import UnknownStrategy
from planwright.planning.schemas.requirements import Feature, Requirements
from planwright.planning.schemas.workflow import Phase, Task
from planwright.planning.viewpoints import get_viewpoint
from planwright.planning.viewpoints.base import implementation_task, task

logger = logging.getLogger(__name__)

STORY_POINTS = {"high": 8, "medium": 5, "low": 3}

STRATEGY_ALIASES: Mapping[str, str] = MappingProxyType(
    {"agile": "iterative", "mvp": "minimum-scope"}
)


@dataclass
class Sprint:
    """Stories assigned to one sprint."""

    number: int
    stories: list[Task] = field(default_factory=list)
    total_points: int = 0


def story_for(feature: Feature) -> Task:
    return Task(
        type="user-story",
        title=f"User can {feature.name}",
        description=feature.description or f"As a user, I want to {feature.name}",
        priority=feature.priority,
        story_points=STORY_POINTS.get(feature.complexity, 5),
    )


def pack_sprints(stories: list[Task], capacity: int) -> list[Sprint]:
    """
    Fill sprints in story order.

    A story that would overflow the current sprint closes it and opens the
    next one. Stories are never reordered, so an oversized story gets a
    sprint to itself.
    """
    sprints: list[Sprint] = []
    current = Sprint(number=1)
    for story in stories:
        points = story.story_points or 0
        if current.stories and current.total_points + points > capacity:
            sprints.append(current)
            current = Sprint(number=current.number + 1)
        current.stories.append(story)
        current.total_points += points
    if current.stories:
        sprints.append(current)
    return sprints


def systematic(req: Requirements, viewpoint: str, settings: SynthesisConfig) -> list[Phase]:
    return get_viewpoint(viewpoint).build_phases(req, settings)


def iterative(req: Requirements, viewpoint: str, settings: SynthesisConfig) -> list[Phase]:
    """One story per feature, packed into sprints in feature order."""
    stories = [story_for(feature) for feature in req.features]
    sprints = pack_sprints(stories, settings.sprint_capacity)
    return [
        Phase(
            name=f"Sprint {sprint.number}",
            type="sprint",
            duration=settings.sprint_duration,
            description=f"{sprint.total_points} story points",
            tasks=sprint.stories,
        )
        for sprint in sprints
    ]


def minimum_scope(req: Requirements, viewpoint: str, settings: SynthesisConfig) -> list[Phase]:
    """Definition, rapid build of high-priority features, validation."""
    core = [f for f in req.features if f.priority in ("high", "critical")]
    core = core[: settings.mvp_feature_limit]

    build_tasks = [implementation_task(feature, "high") for feature in core]
    if not build_tasks:
        build_tasks = [
            task("implement", "Core feature implementation",
                 "Implement the smallest feature set that delivers user value",
                 priority="high")
        ]

    return [
        Phase(
            name="MVP Definition",
            type="planning",
            tasks=[
                task("analysis", "Define MVP scope",
                     "Identify minimum viable features for initial release"),
                task("design", "Create MVP wireframes",
                     "Design core user flows and interfaces"),
            ],
        ),
        Phase(name="Rapid Development", type="implementation", tasks=build_tasks),
        Phase(
            name="MVP Validation",
            type="validation",
            tasks=[
                task("test", "User acceptance testing",
                     "Validate core functionality with target users"),
                task("deploy", "MVP deployment",
                     "Deploy MVP to production environment"),
            ],
        ),
    ]


StrategyFn = Callable[[Requirements, str, SynthesisConfig], list[Phase]]

STRATEGIES: Mapping[str, StrategyFn] = MappingProxyType(
    {
        "systematic": systematic,
        "iterative": iterative,
        "minimum-scope": minimum_scope,
    }
)

STRATEGY_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "systematic": "Full phased plan from the viewpoint's phase catalog",
        "iterative": "Feature user stories packed into fixed-capacity sprints",
        "minimum-scope": "Smallest releasable product built from high-priority features",
    }
)


def list_strategies() -> list[str]:
    """Canonical strategy names."""
    return list(STRATEGIES)


def resolve_strategy(name: str) -> str:
    """
    Canonical strategy name for a name or alias.

    Raises:
        UnknownStrategy: If the name is neither a strategy nor an alias
    """
    key = name.strip().lower()
    key = STRATEGY_ALIASES.get(key, key)
    if key not in STRATEGIES:
        raise UnknownStrategy(name, list_strategies())
    return key


def synthesize(
    req: Requirements,
    viewpoint: str,
    strategy: str = "systematic",
    settings: SynthesisConfig | None = None,
) -> list[Phase]:
    """
    Build the ordered phase list for a viewpoint and strategy.

    Args:
        req: Extracted requirements
        viewpoint: Canonical viewpoint name
        strategy: Strategy name or alias
        settings: Synthesis settings

    Returns:
        Phases, none of them empty

    Raises:
        UnknownStrategy: If the strategy is not in the catalog
        UnknownViewpoint: If the viewpoint is not in the catalog
    """
    settings = settings or SynthesisConfig()
    key = resolve_strategy(strategy)
    phases = [phase for phase in STRATEGIES[key](req, viewpoint, settings) if phase.tasks]
    logger.info(
        f"Synthesized {len(phases)} phases "
        f"({sum(len(p.tasks) for p in phases)} tasks) with {key}/{viewpoint}"
    )
    return phases
