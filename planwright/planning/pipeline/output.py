# planwright/planning/pipeline/output.py
"""
Workflow renderer.

Renders a Workflow as a markdown roadmap, a task board, a detailed
implementation guide, or as JSON/YAML.
"""

from collections.abc import Callable

import yaml

from planwright.errors import UnknownOutputFormat
from planwright.planning.schemas.workflow import Task, Workflow

DEPENDENCY_GROUPS = ("internal", "external", "technical", "team", "infrastructure")


def complexity_label(complexity: float) -> str:
    if complexity >= 0.8:
        return "High"
    if complexity >= 0.5:
        return "Medium"
    if complexity >= 0.2:
        return "Low"
    return "Very Low"


def _cap(text: str) -> str:
    return text[:1].upper() + text[1:]


class WorkflowRenderer:
    """
    Converts a Workflow to text.

    Markdown formats share a header:

        # {title}

        ## {subtitle}

        **Strategy:** ...
        **Viewpoint:** ...
        **Estimated Duration:** ...
        **Complexity:** ...
        **Risk Level:** ...
    """

    def __init__(self) -> None:
        self._formats: dict[str, Callable[[Workflow], str]] = {
            "roadmap": self.render_roadmap,
            "tasks": self.render_tasks,
            "detailed": self.render_detailed,
            "json": self.render_json,
            "yaml": self.render_yaml,
        }

    @property
    def formats(self) -> list[str]:
        return list(self._formats)

    def render(self, workflow: Workflow, fmt: str = "roadmap") -> str:
        """
        Render a workflow.

        Args:
            workflow: Assembled workflow
            fmt: One of roadmap, tasks, detailed, json, yaml

        Returns:
            Rendered text

        Raises:
            UnknownOutputFormat: If fmt is not a known format
        """
        renderer = self._formats.get(fmt.strip().lower())
        if renderer is None:
            raise UnknownOutputFormat(fmt, self.formats)
        return renderer(workflow)

    # ------------------------------------------------------------------
    # Formats
    # ------------------------------------------------------------------

    def render_roadmap(self, workflow: Workflow) -> str:
        sections = self._header(workflow, "Roadmap")

        for number, phase in enumerate(workflow.phases, start=1):
            duration = phase.estimated_duration or phase.duration
            heading = f"## Phase {number}: {phase.name}"
            sections.append(f"{heading} ({duration})" if duration else heading)
            sections.append("")
            for task in phase.tasks:
                sections.append(f"- [ ] {task.title}")
                if task.description:
                    sections.append(f"  - {task.description}")
            sections.append("")

        sections.append("## Project Metadata")
        sections.append("")
        for key, value in workflow.metadata.model_dump(exclude_none=True).items():
            sections.append(f"**{_cap(key.replace('_', ' '))}:** {value}")
        sections.append("")

        if workflow.milestones:
            sections.extend(self._milestones(workflow))

        return "\n".join(sections)

    def render_tasks(self, workflow: Workflow) -> str:
        sections = self._header(workflow, "Tasks")

        for phase in workflow.phases:
            sections.append(f"## Epic: {phase.name}")
            sections.append("")
            groups: dict[str, list[Task]] = {}
            for task in phase.tasks:
                groups.setdefault(task.type or "general", []).append(task)

            for task_type, tasks in groups.items():
                sections.append(f"### Story: {_cap(task_type)}")
                for task in tasks:
                    sections.append(f"- [ ] {task.title}")
                    if task.description:
                        sections.append(f"  - {task.description}")
                    if task.priority:
                        sections.append(f"  - Priority: {task.priority}")
                    if task.story_points:
                        sections.append(f"  - Story points: {task.story_points}")
                    if task.estimated_hours:
                        sections.append(f"  - Estimated: {task.estimated_hours:g}h")
                sections.append("")

        if workflow.acceptance_criteria:
            sections.append("## Acceptance Criteria")
            sections.append("")
            for criterion in workflow.acceptance_criteria:
                sections.append(f"- [ ] {criterion}")
            sections.append("")

        if workflow.parallel_streams:
            sections.append("## Parallel Work Streams")
            sections.append("")
            for stream in workflow.parallel_streams:
                sections.append(f"**{stream.name}:** {', '.join(stream.tasks)}")
            sections.append("")

        return "\n".join(sections)

    def render_detailed(self, workflow: Workflow) -> str:
        sections = self._header(workflow, "Detailed Implementation Workflow")

        for p_num, phase in enumerate(workflow.phases, start=1):
            sections.append(f"## Phase {p_num}: {phase.name}")
            sections.append("")
            if phase.description:
                sections.append(phase.description)
                sections.append("")
            if phase.estimated_duration or phase.duration:
                sections.append(f"**Duration:** {phase.estimated_duration or phase.duration}")
            sections.append(f"**Type:** {phase.type}")
            sections.append("")

            for t_num, task in enumerate(phase.tasks, start=1):
                sections.append(f"### Task {p_num}.{t_num}: {task.title}")
                sections.append("")
                sections.append(f"**Viewpoint:** {_cap(workflow.viewpoint)}")
                if task.estimated_hours:
                    sections.append(f"**Estimated Time:** {task.estimated_hours:g} hours")
                if task.dependencies:
                    sections.append(f"**Dependencies:** {', '.join(task.dependencies)}")
                if task.tools:
                    sections.append(f"**Tools:** {', '.join(task.tools)}")
                sections.append("")
                if task.description:
                    sections.append(task.description)
                    sections.append("")
                if task.deliverables:
                    sections.append("#### Deliverables:")
                    sections.extend(f"- {d}" for d in task.deliverables)
                    sections.append("")
                if task.acceptance_criteria:
                    sections.append("#### Acceptance Criteria:")
                    sections.extend(f"- [ ] {c}" for c in task.acceptance_criteria)
                    sections.append("")
                sections.append("---")
                sections.append("")

        if workflow.quality_gates:
            sections.append("## Quality Gates")
            sections.append("")
            sections.extend(f"- [ ] {gate}" for gate in workflow.quality_gates)
            sections.append("")

        if workflow.priorities:
            sections.append("## Priorities")
            sections.append("")
            sections.append(" > ".join(workflow.priorities))
            sections.append("")

        if workflow.best_practices:
            sections.append("## Best Practices")
            sections.append("")
            sections.extend(f"- {practice}" for practice in workflow.best_practices)
            sections.append("")

        if workflow.dependencies:
            sections.extend(self._dependencies(workflow))
        if workflow.risks:
            sections.extend(self._risks(workflow))
        if workflow.milestones:
            sections.extend(self._milestones(workflow))
        if workflow.quality_gate_result:
            sections.extend(self._quality_result(workflow))

        return "\n".join(sections)

    def render_json(self, workflow: Workflow) -> str:
        return workflow.model_dump_json(indent=2, exclude_none=True)

    def render_yaml(self, workflow: Workflow) -> str:
        data = workflow.model_dump(mode="json", exclude_none=True)
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    # ------------------------------------------------------------------
    # Shared blocks
    # ------------------------------------------------------------------

    def _header(self, workflow: Workflow, subtitle: str) -> list[str]:
        meta = workflow.metadata
        return [
            f"# {workflow.title or 'Implementation Workflow'}",
            "",
            f"## {subtitle}",
            "",
            f"**Strategy:** {_cap(workflow.strategy)}",
            f"**Viewpoint:** {_cap(workflow.viewpoint)}",
            f"**Estimated Duration:** {meta.estimated_duration}",
            f"**Complexity:** {complexity_label(meta.complexity)}",
            f"**Risk Level:** {_cap(meta.risk_level)}",
            "",
        ]

    def _dependencies(self, workflow: Workflow) -> list[str]:
        lines = ["## Dependencies", ""]
        for group in DEPENDENCY_GROUPS:
            for dep in getattr(workflow.dependencies, group):
                lines.append(f"### {dep.name}")
                lines.append(f"- **Type:** {dep.type}")
                if dep.critical:
                    lines.append("- **Critical:** Yes")
                if dep.version:
                    lines.append(f"- **Version:** {dep.version}")
                if dep.description:
                    lines.append(f"- **Description:** {dep.description}")
                lines.append("")
        if workflow.dependencies.bottlenecks:
            lines.append("### Bottlenecks")
            for b in workflow.dependencies.bottlenecks:
                lines.append(f"- {b.location}: {b.description} ({b.recommendation})")
            lines.append("")
        return lines

    def _risks(self, workflow: Workflow) -> list[str]:
        summary = workflow.risks.summary
        lines = [
            "## Risk Assessment",
            "",
            f"**Overall:** {_cap(summary.overall_level)} (average score {summary.risk_score})",
            "",
        ]
        for risk in workflow.risks.all_risks():
            lines.append(f"### {risk.name}")
            lines.append(f"- **Category:** {risk.category}")
            lines.append(f"- **Probability:** {risk.probability}")
            lines.append(f"- **Impact:** {risk.impact}")
            if risk.mitigation:
                lines.append(f"- **Mitigation:** {', '.join(risk.mitigation)}")
            lines.append("")
        return lines

    def _milestones(self, workflow: Workflow) -> list[str]:
        lines = ["## Milestones", ""]
        for milestone in workflow.milestones:
            lines.append(f"- **{milestone.name}** (phase {milestone.phase}): {milestone.description}")
        lines.append("")
        return lines

    def _quality_result(self, workflow: Workflow) -> list[str]:
        result = workflow.quality_gate_result
        verdict = "PASSED" if result.overall.passed else "FAILED"
        lines = ["## Quality Gate Results", "", f"**Overall:** {verdict} ({result.overall.score:.2f})", ""]
        for name, gate in result.gates.items():
            mark = "x" if gate.passed else " "
            lines.append(f"- [{mark}] {name}: {gate.score:.2f}")
            for issue in gate.issues:
                lines.append(f"  - {issue}")
        lines.append("")
        if result.blockers:
            lines.append("**Blockers:** " + ", ".join(b.gate for b in result.blockers))
            lines.append("")
        return lines
