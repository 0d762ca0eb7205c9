# planwright/planning/viewpoints/architect.py
"""Architect viewpoint: system design, technology choices and long-term evolution."""

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase
from planwright.planning.viewpoints.base import Viewpoint, task


class ArchitectViewpoint(Viewpoint):
    """Systems thinking, scalability and maintainability first."""

    name = "architect"
    description = "Systems design, scalability and long-term maintainability"
    priority_hierarchy = (
        "Long-term maintainability",
        "Scalability",
        "Performance",
        "Short-term gains",
    )

    BEST_PRACTICES = (
        "Design for change and evolution",
        "Separate concerns and minimize coupling",
        "Document architectural decisions and rationale",
        "Plan for failure and implement circuit breakers",
        "Use well-established patterns and avoid over-engineering",
        "Consider the total cost of ownership",
        "Design for observability and debugging",
        "Implement proper abstraction layers",
        "Plan for data consistency and integrity",
        "Consider security from the beginning",
        "Design for testability at all levels",
        "Plan for incremental delivery and rollback",
    )

    QUALITY_GATES = (
        "Architecture decision record review",
        "System design consistency check",
        "Scalability requirements validation",
        "Security architecture review",
        "Performance requirements verification",
        "Integration pattern compliance",
        "Code quality and maintainability assessment",
        "Documentation completeness review",
        "Risk assessment and mitigation validation",
        "Future evolution capability check",
    )

    def phase_builders(self):
        return (
            self.system_analysis,
            self.architectural_design,
            self.technology_selection,
            self.scalability_planning,
            self.implementation_roadmap,
            self.quality_assurance,
            self.evolution_strategy,
        )

    def system_analysis(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        tasks = [
            task("analysis", "Stakeholder analysis",
                 "Identify all stakeholders and their requirements",
                 ["Stakeholder matrix", "Requirements traceability"], 8),
            task("analysis", "System context mapping",
                 "Map system boundaries and external dependencies",
                 ["Context diagram", "Integration boundaries"], 12),
            task("analysis", "Quality attribute analysis",
                 "Define performance, security, and scalability requirements",
                 ["Quality attribute scenarios", "Non-functional requirements"], 10),
            task("analysis", "Constraint analysis",
                 "Identify technical, business, and regulatory constraints",
                 ["Constraint catalog", "Risk assessment"], 6),
        ]
        if req.integrations:
            tasks.append(
                task("analysis", "Legacy system analysis",
                     "Analyze existing systems and integration requirements",
                     ["Legacy system inventory", "Migration strategy"], 8)
            )
        return Phase(
            name="System Analysis & Context", type="analysis", duration="1-2 weeks", tasks=tasks
        )

    def architectural_design(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Architectural Design",
            type="architecture",
            duration="2-3 weeks",
            tasks=[
                task("design", "High-level architecture design",
                     "Create system overview and major component structure",
                     ["System architecture diagram", "Component overview"], 16,
                     priority="high"),
                task("design", "Data architecture design",
                     "Design data storage, flow, and management strategy",
                     ["Data architecture diagram", "Data governance plan"], 12,
                     dependencies=["High-level architecture design"]),
                task("design", "Integration architecture",
                     "Design service boundaries and communication patterns",
                     ["Integration patterns", "API strategy"], 14,
                     dependencies=["High-level architecture design"]),
                task("design", "Security architecture",
                     "Design security controls and threat mitigation",
                     ["Security architecture", "Threat model"], 10),
                task("design", "Deployment architecture",
                     "Design infrastructure and deployment strategy",
                     ["Deployment diagram", "Infrastructure plan"], 8),
            ],
        )

    def technology_selection(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Technology Selection & Standards",
            type="technology",
            duration="1 week",
            tasks=[
                task("research", "Technology landscape analysis",
                     "Research and evaluate technology options",
                     ["Technology comparison matrix", "Evaluation criteria"], 12),
                task("design", "Technology stack selection",
                     "Select frameworks, libraries, and platform technologies",
                     ["Technology stack document", "Decision rationale"], 8,
                     dependencies=["Technology landscape analysis"]),
                task("design", "Development standards definition",
                     "Define coding standards, patterns, and practices",
                     ["Development standards", "Architecture patterns catalog"], 6),
                task("design", "Tool chain selection",
                     "Select development, testing, and deployment tools",
                     ["Tool chain specification", "Development workflow"], 4),
            ],
        )

    def scalability_planning(
        self, req: Requirements, settings: SynthesisConfig
    ) -> Phase | None:
        """Only planned when at least two scale indicators are present."""
        indicators = [
            req.complexity > 0.6,
            len(req.integrations) > 2,
            req.scalability_level == "enterprise",
            len(req.features) > 8,
            len(req.user_roles) > 3,
        ]
        if sum(indicators) < 2:
            return None

        return Phase(
            name="Scalability & Performance Planning",
            type="scalability",
            duration="1-2 weeks",
            tasks=[
                task("analysis", "Load and performance modeling",
                     "Model expected load patterns and performance requirements",
                     ["Load model", "Performance targets"], 10, priority="high"),
                task("design", "Horizontal scaling strategy",
                     "Design horizontal scaling approach and auto-scaling",
                     ["Scaling strategy", "Auto-scaling configuration"], 8),
                task("design", "Caching strategy design",
                     "Design multi-level caching strategy",
                     ["Caching architecture", "Cache invalidation strategy"], 6),
                task("design", "Database scaling design",
                     "Design database scaling and partitioning strategy",
                     ["Database scaling plan", "Sharding strategy"], 12),
                task("design", "Performance monitoring design",
                     "Design performance monitoring and alerting",
                     ["Monitoring strategy", "Performance dashboards"], 4),
            ],
        )

    def implementation_roadmap(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Implementation Roadmap",
            type="planning",
            duration="1 week",
            tasks=[
                task("planning", "Module dependency analysis",
                     "Analyze dependencies between system modules",
                     ["Dependency matrix", "Implementation sequence"], 6),
                task("planning", "Incremental delivery planning",
                     "Plan incremental delivery milestones and MVPs",
                     ["Delivery roadmap", "Milestone definitions"], 8,
                     dependencies=["Module dependency analysis"]),
                task("planning", "Risk mitigation planning",
                     "Identify architectural risks and mitigation strategies",
                     ["Risk register", "Mitigation plans"], 6),
                task("planning", "Team structure planning",
                     "Plan team organization around architectural components",
                     ["Team topology", "Communication strategy"], 4),
            ],
        )

    def quality_assurance(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Quality Assurance Strategy",
            type="quality",
            duration="1 week",
            tasks=[
                task("design", "Testing strategy design",
                     "Design comprehensive testing strategy across all levels",
                     ["Testing strategy", "Test automation plan"], 8),
                task("design", "Code quality framework",
                     "Define code quality metrics and enforcement mechanisms",
                     ["Quality framework", "Code review guidelines"], 4),
                task("design", "Architecture review process",
                     "Define architecture review and governance process",
                     ["Review process", "Architecture decision records"], 3),
                task("design", "Continuous integration design",
                     "Design CI/CD pipeline and quality gates",
                     ["CI/CD pipeline design", "Quality gate definitions"], 6),
            ],
        )

    def evolution_strategy(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Evolution & Maintenance Strategy",
            type="evolution",
            duration="3-5 days",
            tasks=[
                task("planning", "Maintainability planning",
                     "Plan for long-term maintainability and evolution",
                     ["Maintainability plan", "Evolution strategy"], 6),
                task("planning", "Technical debt management",
                     "Define technical debt tracking and management process",
                     ["Debt management process", "Refactoring schedule"], 4),
                task("planning", "Knowledge management",
                     "Plan documentation and knowledge transfer strategy",
                     ["Documentation strategy", "Knowledge base structure"], 3),
                task("planning", "Future capability planning",
                     "Plan for anticipated future requirements and capabilities",
                     ["Future roadmap", "Capability evolution plan"], 5),
            ],
        )
