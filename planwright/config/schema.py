# planwright/config/schema.py
"""
Pydantic configuration models for planwright.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ExtractionLimits(BaseModel):
    """Per-input caps on extracted lists, bounding the size of generated plans."""

    model_config = ConfigDict(extra="ignore")

    features: int = Field(
        default=10, ge=1, description="Max features found by verb-object phrase matching"
    )
    listed_features: int = Field(
        default=25, ge=1, description="Max features taken from a features section list"
    )
    components: int = Field(default=15, ge=1, description="Max UI/system components")
    pages: int = Field(default=12, ge=1, description="Max pages/screens/views")
    integrations: int = Field(default=10, ge=1, description="Max external integrations")
    user_roles: int = Field(default=8, ge=1, description="Max user roles")
    acceptance_criteria: int = Field(
        default=20, ge=1, description="Max acceptance criteria"
    )
    skills: int = Field(default=10, ge=1, description="Max team skills")


class SynthesisConfig(BaseModel):
    """Phase and task synthesis settings."""

    model_config = ConfigDict(extra="ignore")

    sprint_capacity: int = Field(
        default=20, ge=1, description="Story points per sprint (iterative strategy)"
    )
    sprint_duration: str = Field(
        default="2 weeks", description="Duration label attached to each sprint"
    )
    mvp_feature_limit: int = Field(
        default=5, ge=1, description="Max features built in the minimum-scope strategy"
    )
    max_component_tasks: int = Field(
        default=5, ge=0, description="Max per-component tasks in component architecture"
    )
    max_service_tasks: int = Field(
        default=5, ge=0, description="Max per-service tasks in service implementation"
    )
    max_integration_tasks: int = Field(
        default=3, ge=0, description="Max per-integration tasks in external integrations"
    )
    max_test_tasks: int = Field(
        default=8, ge=0, description="Max per-criterion tasks in test implementation"
    )


class QualityConfig(BaseModel):
    """Quality gate thresholds."""

    model_config = ConfigDict(extra="ignore")

    pass_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Weighted overall score needed for the workflow to pass",
    )
    blocker_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Gates scoring below this are reported as blockers",
    )


class DefaultsConfig(BaseModel):
    """Defaults used when the caller does not choose."""

    model_config = ConfigDict(extra="ignore")

    viewpoint: str = Field(
        default="auto", description="Viewpoint name, or 'auto' to detect from the input"
    )
    strategy: str = Field(default="systematic", description="Workflow strategy")


class OutputConfig(BaseModel):
    """Output rendering configuration."""

    model_config = ConfigDict(extra="ignore")

    format: Literal["roadmap", "tasks", "detailed", "json", "yaml"] = Field(
        default="roadmap", description="Default output format"
    )
    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class PlanwrightConfig(BaseModel):
    """Root configuration model for planwright."""

    model_config = ConfigDict(extra="ignore")

    extraction: ExtractionLimits = Field(default_factory=ExtractionLimits)
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    quality: QualityConfig = Field(default_factory=QualityConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
