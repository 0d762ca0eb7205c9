# planwright/planning/schemas/requirements.py
"""Schema for requirements extracted from a feature description or PRD."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from planwright.planning.scoring.scorer import compute_complexity

Level = Literal["low", "medium", "high"]


class Feature(BaseModel):
    """A single feature with its classified priority and complexity."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Feature name or phrase")
    priority: Level = Field(default="medium", description="low, medium or high")
    complexity: Level = Field(default="medium", description="low, medium or high")
    description: str | None = Field(
        default=None, description="Full source line the feature came from"
    )


class UserStory(BaseModel):
    """A user story, parsed into role/want/benefit when it follows the template."""

    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    want: str | None = None
    benefit: str | None = None
    description: str | None = Field(
        default=None, description="Raw story text when it does not follow the template"
    )
    priority: Level = "medium"


class AcceptanceCriterion(BaseModel):
    """A criterion sentence and whether it reads as testable."""

    model_config = ConfigDict(extra="ignore")

    description: str
    testable: bool = False
    priority: Level = "medium"


class TechnicalRequirements(BaseModel):
    """Open maps of performance, security and scalability requirements.

    Each map is None when the input says nothing about that concern.
    """

    model_config = ConfigDict(extra="ignore")

    performance: dict[str, Any] | None = None
    security: dict[str, Any] | None = None
    scalability: dict[str, Any] | None = None


class Constraint(BaseModel):
    """A project constraint with its classified type."""

    model_config = ConfigDict(extra="ignore")

    description: str
    type: Literal["budget", "timeline", "technical", "resource", "regulatory", "other"] = (
        "other"
    )


class Timeline(BaseModel):
    """Stated delivery window and urgency."""

    model_config = ConfigDict(extra="ignore")

    duration: str | None = Field(default=None, description='e.g. "6 weeks"')
    urgency: Level = "medium"


class Resources(BaseModel):
    """Stated team size and skills."""

    model_config = ConfigDict(extra="ignore")

    team_size: int | None = None
    skills: list[str] = Field(default_factory=list)


class Requirements(BaseModel):
    """Everything the extractor learned about the input.

    Frozen after extraction. ``complexity`` is computed from the current
    field values on every access and never stored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(default="Untitled Project")
    overview: str = Field(default="")

    features: list[Feature] = Field(default_factory=list)
    user_stories: list[UserStory] = Field(default_factory=list)

    components: list[str] = Field(default_factory=list)
    integrations: list[str] = Field(default_factory=list)
    user_roles: list[str] = Field(default_factory=list)
    pages: list[str] = Field(default_factory=list)

    domains: list[str] = Field(
        default_factory=list,
        description="Subset of frontend, backend, security, infrastructure, mobile",
    )
    patterns: list[str] = Field(
        default_factory=list,
        description="Detected technical patterns (api, database, realtime, ...)",
    )

    acceptance_criteria: list[AcceptanceCriterion] = Field(default_factory=list)
    technical_requirements: TechnicalRequirements = Field(
        default_factory=TechnicalRequirements
    )
    constraints: list[Constraint] = Field(default_factory=list)
    timeline: Timeline = Field(default_factory=Timeline)
    resources: Resources = Field(default_factory=Resources)

    realtime: bool = False
    security_level: Literal["standard", "high"] = "standard"
    performance_level: Literal["standard", "critical"] = "standard"
    scalability_level: Literal["standard", "enterprise"] = "standard"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def complexity(self) -> float:
        """Complexity in [0, 1], derived from the extracted signals."""
        return compute_complexity(self)
