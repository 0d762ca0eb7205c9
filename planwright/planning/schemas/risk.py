# planwright/planning/schemas/risk.py
"""Schema for risk assessment output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RISK_CATEGORIES = ("technical", "timeline", "security", "business", "resource")

IMPACT_SCORES = {"low": 1, "medium": 2, "high": 3, "critical": 4}
PROBABILITY_SCORES = {"low": 1, "medium": 2, "high": 3, "certain": 4}


class Risk(BaseModel):
    """A single identified risk."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category: str
    description: str = ""
    probability: Literal["low", "medium", "high", "certain"] = "medium"
    impact: Literal["low", "medium", "high", "critical"] = "medium"
    indicators: list[str] = Field(default_factory=list)
    mitigation: list[str] = Field(default_factory=list)
    risk_score: int = Field(default=0, description="impact score x probability score")


class RiskSummary(BaseModel):
    """Counts and averages across all risks."""

    model_config = ConfigDict(extra="ignore")

    total: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    by_impact: dict[str, int] = Field(default_factory=dict)
    by_probability: dict[str, int] = Field(default_factory=dict)
    risk_score: float = 0.0
    overall_level: str = "low"
    top_risks: list[Risk] = Field(default_factory=list)


class MitigationAction(BaseModel):
    """A scheduled mitigation or monitoring entry for one risk."""

    model_config = ConfigDict(extra="ignore")

    risk: str
    actions: list[str] = Field(default_factory=list)
    frequency: str | None = None


class MitigationPlan(BaseModel):
    """Mitigations bucketed by urgency, plus monitoring cadence."""

    model_config = ConfigDict(extra="ignore")

    immediate: list[MitigationAction] = Field(default_factory=list)
    short_term: list[MitigationAction] = Field(default_factory=list)
    long_term: list[MitigationAction] = Field(default_factory=list)
    monitoring: list[MitigationAction] = Field(default_factory=list)


class RiskAssessment(BaseModel):
    """Output of the risk assessor."""

    model_config = ConfigDict(extra="ignore")

    technical: list[Risk] = Field(default_factory=list)
    timeline: list[Risk] = Field(default_factory=list)
    security: list[Risk] = Field(default_factory=list)
    business: list[Risk] = Field(default_factory=list)
    resource: list[Risk] = Field(default_factory=list)
    summary: RiskSummary = Field(default_factory=RiskSummary)
    mitigation: MitigationPlan = Field(default_factory=MitigationPlan)

    def all_risks(self) -> list[Risk]:
        """All risks in category order."""
        return [risk for category in RISK_CATEGORIES for risk in getattr(self, category)]
