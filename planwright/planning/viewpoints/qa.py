# planwright/planning/viewpoints/qa.py
"""QA viewpoint: test strategy, coverage of acceptance criteria, automation."""

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase, Task
from planwright.planning.viewpoints.base import Viewpoint, task


class QAViewpoint(Viewpoint):
    """Prevention over detection; risk-based, automated testing."""

    name = "qa"
    description = "Test strategy, automation and quality validation"
    priority_hierarchy = ("Prevention", "Detection", "Correction", "Comprehensive coverage")

    BEST_PRACTICES = (
        "Design tests before implementation",
        "Focus on risk-based testing",
        "Automate repetitive tests",
        "Test early and often",
        "Include performance testing",
        "Test edge cases and error conditions",
        "Maintain test documentation",
    )

    QUALITY_GATES = (
        "Test plan approval",
        "Acceptance criteria traceability check",
        "Code coverage threshold",
        "Regression suite pass",
        "Defect triage with no open critical bugs",
    )

    def phase_builders(self):
        return (
            self.test_strategy,
            self.test_implementation,
            self.automation,
            self.performance_testing,
            self.quality_validation,
        )

    def test_strategy(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Test Strategy & Planning",
            type="test-planning",
            duration="1 week",
            tasks=[
                task("planning", "Test strategy development",
                     "Develop comprehensive testing strategy",
                     ["Test strategy document", "Test pyramid design"], 8, priority="high"),
                task("planning", "Test case design",
                     "Design test cases for all user scenarios",
                     ["Test case repository", "Traceability matrix"], 12,
                     dependencies=["Test strategy development"]),
            ],
        )

    def test_implementation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        """One test task per testable criterion, or per feature when there are none."""
        tasks: list[Task] = []
        testable = [c for c in req.acceptance_criteria if c.testable]
        if testable:
            for criterion in testable[: settings.max_test_tasks]:
                tasks.append(
                    task("test", f"Verify: {criterion.description}",
                         "Automated test covering this acceptance criterion",
                         ["Test case", "Test result"], 3,
                         acceptance_criteria=[criterion.description],
                         priority=criterion.priority)
                )
        else:
            for feature in req.features[: settings.max_test_tasks]:
                tasks.append(
                    task("test", f"Test {feature.name}",
                         f"Functional tests for {feature.name}",
                         ["Test cases", "Test results"], 4, priority=feature.priority)
                )
        if not tasks:
            tasks.append(
                task("test", "Functional test suite",
                     "Functional tests for the core user flows",
                     ["Test cases", "Test results"], 8)
            )
        return Phase(
            name="Test Implementation", type="testing", duration="1-2 weeks", tasks=tasks
        )

    def automation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Test Automation",
            type="testing",
            duration="1 week",
            tasks=[
                task("setup", "Test automation framework",
                     "Set up unit, integration and end-to-end test runners",
                     ["Automation framework", "Test data fixtures"], 8,
                     ["pytest", "Playwright", "Cypress"]),
                task("implement", "CI test integration",
                     "Run the automated suites on every change",
                     ["CI test stage", "Test reports"], 4,
                     dependencies=["Test automation framework"]),
                task("implement", "Regression suite",
                     "Automate regression coverage of critical paths",
                     ["Regression suite", "Flaky test policy"], 6),
            ],
        )

    def performance_testing(
        self, req: Requirements, settings: SynthesisConfig
    ) -> Phase | None:
        if not (
            "performance" in req.patterns
            or req.technical_requirements.performance
            or req.performance_level == "critical"
        ):
            return None
        return Phase(
            name="Performance & Load Testing",
            type="performance",
            duration="3-5 days",
            tasks=[
                task("test", "Load test scenarios",
                     "Script realistic load profiles against stated thresholds",
                     ["Load scripts", "Target thresholds"], 6, ["k6", "Locust", "JMeter"]),
                task("test", "Load test execution",
                     "Run load and stress tests and analyze bottlenecks",
                     ["Load test report", "Bottleneck analysis"], 6,
                     dependencies=["Load test scenarios"]),
            ],
        )

    def quality_validation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Quality Validation",
            type="validation",
            duration="3-5 days",
            tasks=[
                task("test", "User acceptance testing",
                     "Validate functionality against acceptance criteria",
                     ["UAT results", "Bug reports"], 8, priority="high"),
                task("review", "Release readiness review",
                     "Review open defects, coverage and exit criteria",
                     ["Quality report", "Go/no-go decision"], 2),
            ],
        )
