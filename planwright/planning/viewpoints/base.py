# planwright/planning/viewpoints/base.py
"""
Viewpoint capability base class.

A viewpoint is an expert perspective (architect, frontend, ...) that knows
which phases a systematic workflow needs and what good practice looks like.
Concrete viewpoints list their phase builders in order; each builder returns
a Phase, a list of Phases, or None when the phase does not apply.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Sequence

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Feature, Requirements
from planwright.planning.schemas.workflow import Phase, Task

logger = logging.getLogger(__name__)

PhaseBuilder = Callable[[Requirements, SynthesisConfig], "Phase | list[Phase] | None"]


def task(
    type: str,
    title: str,
    description: str,
    deliverables: Sequence[str] = (),
    hours: float | None = None,
    tools: Sequence[str] = (),
    **extra,
) -> Task:
    """Shorthand Task constructor used by the phase templates."""
    return Task(
        type=type,
        title=title,
        description=description,
        deliverables=list(deliverables),
        estimated_hours=hours,
        tools=list(tools),
        **extra,
    )


def implementation_task(feature: Feature, priority: str) -> Task:
    return Task(
        type="implement",
        title=f"Implement {feature.name}",
        description=feature.description or f"Implementation of {feature.name} feature",
        priority=priority,
    )


def feature_implementation_phases(req: Requirements) -> list[Phase]:
    """
    Implementation phases grouped by feature priority.

    High-priority features go into "Core Implementation", medium ones into
    "Feature Enhancement". When neither exists a single generic
    implementation phase is returned.
    """
    high = [f for f in req.features if f.priority == "high"]
    medium = [f for f in req.features if f.priority == "medium"]

    phases: list[Phase] = []
    if high:
        phases.append(
            Phase(
                name="Core Implementation",
                type="implementation",
                duration="2-4 weeks",
                tasks=[implementation_task(f, "high") for f in high],
            )
        )
    if medium:
        phases.append(
            Phase(
                name="Feature Enhancement",
                type="implementation",
                duration="1-3 weeks",
                tasks=[implementation_task(f, "medium") for f in medium],
            )
        )
    if not phases:
        phases.append(
            Phase(
                name="Implementation",
                type="implementation",
                duration="2-4 weeks",
                tasks=[
                    task(
                        "implement",
                        "Core feature implementation",
                        "Implement main application features",
                        priority="high",
                    )
                ],
            )
        )
    return phases


class Viewpoint(ABC):
    """Expert perspective that shapes a systematic workflow."""

    name: str = ""
    description: str = ""
    priority_hierarchy: tuple[str, ...] = ()

    BEST_PRACTICES: tuple[str, ...] = ()
    QUALITY_GATES: tuple[str, ...] = ()

    @abstractmethod
    def phase_builders(self) -> Sequence[PhaseBuilder]:
        """Ordered phase builders for the systematic strategy."""

    def build_phases(
        self, req: Requirements, settings: SynthesisConfig | None = None
    ) -> list[Phase]:
        """
        Run every builder in order and keep the phases that have work.

        Args:
            req: Extracted requirements
            settings: Synthesis settings (task caps)

        Returns:
            Ordered phases; None results and empty phases are dropped
        """
        settings = settings or SynthesisConfig()
        phases: list[Phase] = []
        for builder in self.phase_builders():
            result = builder(req, settings)
            if result is None:
                continue
            candidates: Iterable[Phase] = result if isinstance(result, list) else [result]
            phases.extend(phase for phase in candidates if phase.tasks)

        logger.debug(f"{self.name} viewpoint built {len(phases)} phases")
        return phases

    def best_practices(self) -> list[str]:
        return list(self.BEST_PRACTICES)

    def quality_gates(self) -> list[str]:
        return list(self.QUALITY_GATES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
