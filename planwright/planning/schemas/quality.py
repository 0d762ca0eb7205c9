# planwright/planning/schemas/quality.py
"""Schema for quality gate validation output."""

from pydantic import BaseModel, ConfigDict, Field


class GateResult(BaseModel):
    """Score and findings for one gate."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    weight: float
    score: float = Field(..., ge=0.0, le=1.0)
    passed: bool
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class Blocker(BaseModel):
    """A gate that failed badly enough to block the plan."""

    model_config = ConfigDict(extra="ignore")

    gate: str
    issues: list[str] = Field(default_factory=list)
    severity: str = "critical"


class OverallQuality(BaseModel):
    """Weighted verdict across all gates."""

    model_config = ConfigDict(extra="ignore")

    passed: bool
    score: float = Field(..., ge=0.0, le=1.0)


class QualityGateResult(BaseModel):
    """Output of the quality gate validator."""

    model_config = ConfigDict(extra="ignore")

    overall: OverallQuality
    gates: dict[str, GateResult] = Field(default_factory=dict)
    recommendations: list[str] = Field(default_factory=list)
    blockers: list[Blocker] = Field(default_factory=list)
