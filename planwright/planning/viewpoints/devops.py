# planwright/planning/viewpoints/devops.py
"""DevOps viewpoint: infrastructure, delivery pipelines and operations."""

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase
from planwright.planning.viewpoints.base import Viewpoint, task


class DevOpsViewpoint(Viewpoint):
    """Automation, observability and reliable releases."""

    name = "devops"
    description = "Infrastructure automation, delivery pipelines and operations"
    priority_hierarchy = ("Automation", "Observability", "Reliability", "Scalability", "Manual processes")

    BEST_PRACTICES = (
        "Automate everything possible",
        "Use Infrastructure as Code",
        "Implement comprehensive monitoring",
        "Design for failure and recovery",
        "Use container orchestration",
        "Implement proper CI/CD pipelines",
        "Monitor security and compliance",
    )

    QUALITY_GATES = (
        "Infrastructure code review",
        "Pipeline runs green on every commit",
        "Rollback procedure rehearsed",
        "Monitoring and alerting coverage check",
        "Disaster recovery test",
    )

    def phase_builders(self):
        return (
            self.infrastructure,
            self.ci_cd,
            self.scaling_and_resilience,
            self.monitoring,
            self.release,
        )

    def infrastructure(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Infrastructure Setup",
            type="infrastructure",
            duration="1-2 weeks",
            tasks=[
                task("setup", "Infrastructure as Code setup",
                     "Set up infrastructure automation with Terraform/CloudFormation",
                     ["IaC templates", "Infrastructure documentation"], 12,
                     ["Terraform", "CloudFormation", "Ansible"], priority="high"),
                task("setup", "Container orchestration setup",
                     "Set up container platform and orchestration",
                     ["Container platform", "Orchestration config"], 10,
                     ["Docker", "Kubernetes", "Docker Compose"],
                     dependencies=["Infrastructure as Code setup"]),
                task("setup", "Environment provisioning",
                     "Provision development, staging and production environments",
                     ["Environment inventory", "Access policies"], 6),
            ],
        )

    def ci_cd(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="CI/CD Pipeline",
            type="deployment",
            duration="1 week",
            tasks=[
                task("implement", "Continuous integration pipeline",
                     "Build, lint and test every change automatically",
                     ["CI pipeline", "Build artifacts"], 8,
                     ["GitHub Actions", "GitLab CI", "Jenkins"], priority="high"),
                task("implement", "Continuous delivery pipeline",
                     "Promote builds through staging to production",
                     ["CD pipeline", "Promotion rules"], 8,
                     dependencies=["Continuous integration pipeline"]),
                task("implement", "Artifact and image registry",
                     "Version and store build artifacts and container images",
                     ["Registry configuration", "Retention policy"], 3),
                task("implement", "Pipeline security scanning",
                     "Scan dependencies and images for known vulnerabilities",
                     ["Scan reports", "Failure thresholds"], 4, ["Trivy", "Dependabot"]),
            ],
        )

    def scaling_and_resilience(
        self, req: Requirements, settings: SynthesisConfig
    ) -> Phase | None:
        if not (
            req.realtime
            or req.scalability_level == "enterprise"
            or req.complexity > 0.6
        ):
            return None
        return Phase(
            name="Scaling & Resilience",
            type="infrastructure",
            duration="1 week",
            tasks=[
                task("implement", "Auto-scaling configuration",
                     "Configure horizontal auto-scaling on load metrics",
                     ["Scaling policies", "Capacity limits"], 6, ["Kubernetes HPA"]),
                task("implement", "Load balancing",
                     "Distribute traffic across instances and zones",
                     ["Load balancer configuration", "Health checks"], 4),
                task("test", "Disaster recovery drill",
                     "Rehearse failover and restore from backup",
                     ["Recovery runbook", "Drill report"], 6),
            ],
        )

    def monitoring(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Monitoring & Observability",
            type="monitoring",
            duration="3-5 days",
            tasks=[
                task("implement", "Metrics collection",
                     "Collect infrastructure and application metrics",
                     ["Metrics pipeline", "Dashboards"], 6, ["Prometheus", "Grafana"]),
                task("implement", "Log aggregation",
                     "Centralize logs with structured fields and retention",
                     ["Log pipeline", "Retention policy"], 5, ["ELK stack", "Loki"]),
                task("implement", "Alerting setup",
                     "Alert on service level objectives and error budgets",
                     ["Alert rules", "On-call rotation"], 4, ["PagerDuty", "Alertmanager"],
                     dependencies=["Metrics collection"]),
            ],
        )

    def release(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Deployment & Release",
            type="deployment",
            duration="3-5 days",
            tasks=[
                task("deploy", "Progressive rollout strategy",
                     "Release with blue-green or canary deployments",
                     ["Rollout plan", "Traffic shifting configuration"], 6),
                task("deploy", "Production deployment",
                     "Deploy application to production environment",
                     ["Production deployment", "Rollback procedures"], 3, priority="high",
                     dependencies=["Progressive rollout strategy"]),
                task("monitor", "Post-deployment monitoring",
                     "Monitor application performance and user feedback",
                     ["Monitoring dashboard", "Performance metrics"], 4),
            ],
        )
