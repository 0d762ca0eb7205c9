# planwright/planning/schemas/dependencies.py
"""Schema for dependency analysis output."""

from pydantic import BaseModel, ConfigDict, Field


class Dependency(BaseModel):
    """A single dependency of any kind (phase, task, service, technology, skill, tool)."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str = Field(..., description="phase, task, external, technical, team, infrastructure")
    description: str = ""
    critical: bool = False
    version: str | None = Field(
        default=None, description="Suggested version for technical dependencies"
    )
    source: str | None = Field(
        default=None, description="Phase or task that introduced the dependency"
    )


class CriticalPathEntry(BaseModel):
    """A phase on the critical path and its high-priority tasks."""

    model_config = ConfigDict(extra="ignore")

    phase: str
    tasks: list[str] = Field(default_factory=list)
    duration: str | None = None


class Bottleneck(BaseModel):
    """A phase likely to slow the plan down."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., description="complexity or sequential")
    location: str
    description: str
    recommendation: str


class DependencyAnalysis(BaseModel):
    """Output of the dependency analyzer."""

    model_config = ConfigDict(extra="ignore")

    internal: list[Dependency] = Field(default_factory=list)
    external: list[Dependency] = Field(default_factory=list)
    technical: list[Dependency] = Field(default_factory=list)
    team: list[Dependency] = Field(default_factory=list)
    infrastructure: list[Dependency] = Field(default_factory=list)
    critical_path: list[CriticalPathEntry] = Field(default_factory=list)
    bottlenecks: list[Bottleneck] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.internal)
            + len(self.external)
            + len(self.technical)
            + len(self.team)
            + len(self.infrastructure)
        )
