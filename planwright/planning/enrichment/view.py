# planwright/planning/enrichment/view.py
"""
Flattened read-only view of a workflow for keyword checks.

Several passes ask "does the plan mention X anywhere?". The lower-cased text
is built once per workflow and shared instead of re-serialized per check.
"""

from dataclasses import dataclass
from typing import Any

from planwright.planning.schemas.workflow import Phase, Task, Workflow


def _strings(value: Any) -> list[str]:
    """All string leaves of a dumped model, depth first."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, dict):
        return [s for item in value.values() for s in _strings(item)]
    if isinstance(value, (list, tuple)):
        return [s for item in value for s in _strings(item)]
    return []


@dataclass(frozen=True)
class WorkflowView:
    """Lower-cased text and flat task list of one workflow."""

    text: str
    tasks: tuple[tuple[Phase, Task], ...]

    @classmethod
    def of(cls, workflow: Workflow) -> "WorkflowView":
        dumped = workflow.model_dump(exclude_none=True)
        text = "\n".join(_strings(dumped)).lower()
        tasks = tuple((phase, task) for phase in workflow.phases for task in phase.tasks)
        return cls(text=text, tasks=tasks)

    def mentions(self, *keywords: str) -> bool:
        """True if any keyword occurs as a substring."""
        return any(keyword in self.text for keyword in keywords)

    def matching(self, keywords: tuple[str, ...] | list[str]) -> list[str]:
        """Keywords that occur, in the given order."""
        return [keyword for keyword in keywords if keyword in self.text]
