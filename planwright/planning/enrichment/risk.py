# planwright/planning/enrichment/risk.py
"""
Risk assessor.

A fixed catalog of rules in five categories. Each rule inspects the workflow
and, when it fires, yields a risk scored as impact x probability. Risks are
only assessed for workflows that have phases.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from planwright.planning.enrichment import catalogs as c
from planwright.planning.enrichment.dependencies import (
    critical_path,
    external_dependencies,
    required_skills,
)
from planwright.planning.enrichment.view import WorkflowView
from planwright.planning.schemas.risk import (
    IMPACT_SCORES,
    PROBABILITY_SCORES,
    RISK_CATEGORIES,
    MitigationAction,
    MitigationPlan,
    Risk,
    RiskAssessment,
    RiskSummary,
)
from planwright.planning.schemas.workflow import Workflow

logger = logging.getLogger(__name__)

IMMEDIATE_THRESHOLD = 9
SHORT_TERM_THRESHOLD = 6
TOP_RISKS = 5

# A check returns None when the rule does not fire, otherwise the indicators
# it found (an empty list means "use the rule's default indicators").
Check = Callable[[Workflow, WorkflowView], "list[str] | None"]


@dataclass(frozen=True)
class RiskRule:
    category: str
    name: str
    probability: str
    impact: str
    description: str
    indicators: tuple[str, ...]
    mitigation: tuple[str, ...]
    check: Check

    @property
    def id(self) -> str:
        return f"{self.category}-" + re.sub(r"[^a-z0-9]+", "-", self.name.lower()).strip("-")


def _when(condition: bool) -> list[str] | None:
    return [] if condition else None


def _found(items: list[str]) -> list[str] | None:
    return items or None


def _integration_count(wf: Workflow, view: WorkflowView) -> int:
    return sum(
        1 for _, task in view.tasks
        if task.type == "integration" or "integrat" in task.title.lower()
    )


def _specialized_skills(wf: Workflow) -> list[str]:
    skills: list[str] = []
    for phase in wf.phases:
        for skill in required_skills(phase):
            if skill in c.CRITICAL_SKILLS and skill not in skills:
                skills.append(skill)
    return skills


def _aggressive_timeline(wf: Workflow, view: WorkflowView) -> list[str] | None:
    short = wf.metadata.duration_weeks <= 4
    return _when(short and (wf.metadata.complexity >= 0.5 or len(wf.phases) >= 6))


def _team_too_small(wf: Workflow, view: WorkflowView) -> list[str] | None:
    size = wf.metadata.team_size
    if size is None or size <= 0:
        return None
    return _when(len(view.tasks) / size > 15)


def _resource_availability(wf: Workflow, view: WorkflowView) -> list[str] | None:
    skills = _specialized_skills(wf)
    size = wf.metadata.team_size
    if len(skills) >= 3 and (size is None or size <= 3):
        return [f"{skill} specialists needed" for skill in skills]
    return None


RISK_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        "technical", "High Technical Complexity", "high", "high",
        "High system complexity may lead to implementation challenges",
        ("Complex architecture", "Multiple integrations", "Advanced features"),
        ("Break down into smaller components", "Conduct proof-of-concepts"),
        lambda wf, view: _when(wf.metadata.complexity > 0.7),
    ),
    RiskRule(
        "technical", "New Technology Adoption", "medium", "medium",
        "Adoption of new technologies may cause learning curve delays",
        (),
        ("Provide training", "Create prototypes", "Use stable versions"),
        lambda wf, view: _found(view.matching(c.EMERGING_TECHNOLOGIES)),
    ),
    RiskRule(
        "technical", "Multiple External Integrations", "medium", "high",
        "Multiple external integrations increase failure points",
        (),
        ("Implement circuit breakers", "Add fallback mechanisms", "Test integrations thoroughly"),
        lambda wf, view: (
            [f"{_integration_count(wf, view)} external integrations"]
            if _integration_count(wf, view) > 3
            else None
        ),
    ),
    RiskRule(
        "technical", "Performance Requirements", "medium", "high",
        "Strict performance requirements may be challenging to meet",
        ("Performance-critical features", "Scalability requirements"),
        ("Early performance testing", "Optimization sprints", "Production monitoring"),
        lambda wf, view: _when(view.mentions(*c.PERFORMANCE_KEYWORDS)),
    ),
    RiskRule(
        "timeline", "Aggressive Timeline", "high", "high",
        "Timeline may be too aggressive for scope of work",
        ("Short duration", "High complexity", "Multiple phases"),
        ("Reduce scope", "Parallel development", "Additional resources"),
        _aggressive_timeline,
    ),
    RiskRule(
        "timeline", "Critical Path Dependencies", "medium", "high",
        "Dependencies on critical path may cause delays",
        (),
        ("Engage dependencies early", "Run parallel work streams"),
        lambda wf, view: (
            [entry.phase for entry in critical_path(wf)] if len(critical_path(wf)) >= 3 else None
        ),
    ),
    RiskRule(
        "timeline", "Resource Availability", "medium", "medium",
        "Limited resource availability may impact timeline",
        (),
        ("Resource planning", "Skill development", "External contractors"),
        _resource_availability,
    ),
    RiskRule(
        "security", "Security Implementation", "medium", "critical",
        "Security implementation errors could expose system",
        ("Authentication required", "Data protection", "Compliance needs"),
        ("Security review", "Penetration testing", "Security training"),
        lambda wf, view: _when(view.mentions(*c.SECURITY_KEYWORDS)),
    ),
    RiskRule(
        "security", "Sensitive Data Handling", "medium", "critical",
        "Improper handling of sensitive data could cause breaches",
        ("User data", "Payment information", "Personal data"),
        ("Encryption", "Access controls", "Data minimization", "Compliance audit"),
        lambda wf, view: _when(view.mentions(*c.SENSITIVE_DATA_KEYWORDS)),
    ),
    RiskRule(
        "security", "Third-Party Security", "low", "high",
        "Third-party services may introduce security vulnerabilities",
        (),
        ("Security assessment of vendors", "Secure integration practices"),
        lambda wf, view: _found([dep.name for dep in external_dependencies(view)]),
    ),
    RiskRule(
        "business", "Scope Creep", "high", "medium",
        "Requirements may expand during development",
        ("Evolving requirements", "Stakeholder changes"),
        ("Clear scope definition", "Change control process", "Regular reviews"),
        lambda wf, view: [],
    ),
    RiskRule(
        "business", "Market Changes", "medium", "medium",
        "Market conditions may change during development",
        ("Competitive product", "Market-driven features"),
        ("Regular market analysis", "Flexible architecture", "MVP approach"),
        lambda wf, view: _when(view.mentions(*c.MARKET_KEYWORDS)),
    ),
    RiskRule(
        "business", "Stakeholder Alignment", "medium", "medium",
        "Stakeholders may have conflicting priorities",
        ("Multiple stakeholders", "Complex requirements"),
        ("Regular communication", "Clear decision-making process"),
        lambda wf, view: [],
    ),
    RiskRule(
        "resource", "Skill Gaps", "medium", "medium",
        "Team may lack required specialized skills",
        (),
        ("Training programs", "External expertise", "Mentoring"),
        lambda wf, view: _found(_specialized_skills(wf)),
    ),
    RiskRule(
        "resource", "Insufficient Team Size", "medium", "high",
        "Team size may be insufficient for project scope",
        ("Small team", "Large scope", "Tight timeline"),
        ("Additional hiring", "Contractors", "Scope reduction"),
        _team_too_small,
    ),
    RiskRule(
        "resource", "Key Person Dependency", "low", "high",
        "Project may be dependent on key individuals",
        ("Specialized knowledge", "Single points of failure"),
        ("Knowledge sharing", "Documentation", "Cross-training"),
        lambda wf, view: [],
    ),
)


def risk_score(impact: str, probability: str) -> int:
    return IMPACT_SCORES.get(impact, 1) * PROBABILITY_SCORES.get(probability, 1)


def _summarize(risks: list[Risk]) -> RiskSummary:
    average = sum(r.risk_score for r in risks) / max(len(risks), 1)
    if average >= 6:
        level = "high"
    elif average >= 3:
        level = "medium"
    else:
        level = "low"

    return RiskSummary(
        total=len(risks),
        by_category={cat: sum(1 for r in risks if r.category == cat) for cat in RISK_CATEGORIES},
        by_impact={imp: sum(1 for r in risks if r.impact == imp) for imp in IMPACT_SCORES},
        by_probability={
            prob: sum(1 for r in risks if r.probability == prob) for prob in PROBABILITY_SCORES
        },
        risk_score=round(average, 2),
        overall_level=level,
        top_risks=sorted(risks, key=lambda r: r.risk_score, reverse=True)[:TOP_RISKS],
    )


def _mitigation_plan(risks: list[Risk]) -> MitigationPlan:
    plan = MitigationPlan()
    for risk in risks:
        action = MitigationAction(risk=risk.name, actions=risk.mitigation)
        if risk.risk_score >= IMMEDIATE_THRESHOLD:
            plan.immediate.append(action)
        elif risk.risk_score >= SHORT_TERM_THRESHOLD:
            plan.short_term.append(action)
        else:
            plan.long_term.append(action)

        plan.monitoring.append(
            MitigationAction(
                risk=risk.name,
                actions=risk.indicators,
                frequency="weekly" if risk.risk_score >= SHORT_TERM_THRESHOLD else "monthly",
            )
        )
    return plan


def assess_risks(workflow: Workflow, view: WorkflowView | None = None) -> RiskAssessment:
    """
    Assess risks of a workflow.

    Args:
        workflow: Synthesized workflow
        view: Precomputed flattened view (built if omitted)

    Returns:
        RiskAssessment with risks per category, summary and mitigation plan
    """
    if not workflow.phases:
        return RiskAssessment()

    view = view or WorkflowView.of(workflow)
    by_category: dict[str, list[Risk]] = {cat: [] for cat in RISK_CATEGORIES}

    for rule in RISK_RULES:
        found = rule.check(workflow, view)
        if found is None:
            continue
        by_category[rule.category].append(
            Risk(
                id=rule.id,
                name=rule.name,
                category=rule.category,
                description=rule.description,
                probability=rule.probability,
                impact=rule.impact,
                indicators=found or list(rule.indicators),
                mitigation=list(rule.mitigation),
                risk_score=risk_score(rule.impact, rule.probability),
            )
        )

    all_risks = [risk for cat in RISK_CATEGORIES for risk in by_category[cat]]
    assessment = RiskAssessment(
        **by_category,
        summary=_summarize(all_risks),
        mitigation=_mitigation_plan(all_risks),
    )
    logger.info(
        f"Risk assessment: {assessment.summary.total} risks, "
        f"average score {assessment.summary.risk_score} ({assessment.summary.overall_level})"
    )
    return assessment
