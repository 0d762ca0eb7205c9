# planwright/planning/viewpoints/security.py
"""Security viewpoint: threat modeling, controls, and compliance."""

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase
from planwright.planning.viewpoints.base import Viewpoint, task


class SecurityViewpoint(Viewpoint):
    """Threat-first planning with defense in depth."""

    name = "security"
    description = "Threat modeling, security controls and compliance"
    priority_hierarchy = ("Security", "Compliance", "Reliability", "Performance", "Convenience")

    BEST_PRACTICES = (
        "Implement defense in depth strategy",
        "Follow principle of least privilege",
        "Use secure coding practices",
        "Implement proper input validation",
        "Use encryption for data at rest and in transit",
        "Implement proper session management",
        "Regular security testing and audits",
        "Keep security dependencies updated",
    )

    QUALITY_GATES = (
        "Threat model review",
        "Authentication and authorization test",
        "Vulnerability scan with no critical findings",
        "Penetration test sign-off",
        "Secrets and key management review",
        "Compliance evidence review",
    )

    def phase_builders(self):
        return (
            self.threat_modeling,
            self.security_architecture,
            self.authentication,
            self.data_protection,
            self.integration_security,
            self.security_testing,
            self.compliance_validation,
        )

    def threat_modeling(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Threat Modeling & Risk Assessment",
            type="security-analysis",
            duration="1 week",
            tasks=[
                task("analysis", "Attack surface analysis",
                     "Identify and map all potential attack vectors",
                     ["Attack surface map", "Entry point inventory"], 8, priority="high"),
                task("analysis", "Threat model creation",
                     "Create STRIDE-based threat model",
                     ["Threat model", "Risk assessment matrix"], 12, priority="high",
                     dependencies=["Attack surface analysis"]),
                task("analysis", "Security requirements definition",
                     "Define security requirements and controls",
                     ["Security requirements", "Control framework"], 6),
            ],
        )

    def security_architecture(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Security Architecture Design",
            type="security-design",
            duration="1-2 weeks",
            tasks=[
                task("design", "Zero trust architecture design",
                     "Design zero trust security architecture",
                     ["Security architecture", "Trust boundaries"], 10),
                task("design", "Defense in depth strategy",
                     "Design layered security controls",
                     ["Security layers", "Control mapping"], 8),
            ],
        )

    def authentication(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Authentication Implementation",
            type="security-implementation",
            duration="1-2 weeks",
            tasks=[
                task("implement", "Authentication system setup",
                     "Implement secure authentication with JWT/OAuth",
                     ["Authentication service", "Security configuration"], 12,
                     ["JWT", "OAuth 2.0"], priority="high"),
                task("implement", "Authorization framework",
                     "Implement role-based access control",
                     ["Authorization middleware", "Permission system"], 10,
                     dependencies=["Authentication system setup"]),
            ],
        )

    def data_protection(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        tasks = [
            task("implement", "Data encryption implementation",
                 "Implement encryption for sensitive data",
                 ["Encryption utilities", "Data protection policies"], 8),
        ]
        if req.technical_requirements.security and "compliance" in req.technical_requirements.security:
            tasks.append(
                task("implement", "Personal data handling",
                     "Implement data minimization, retention and subject access requests",
                     ["Data inventory", "Retention policy", "Subject request workflow"], 8)
            )
        return Phase(
            name="Data Protection", type="security-implementation", duration="1 week", tasks=tasks
        )

    def integration_security(
        self, req: Requirements, settings: SynthesisConfig
    ) -> Phase | None:
        if not req.integrations:
            return None
        return Phase(
            name="Third-Party Integration Security",
            type="security-implementation",
            duration="3-5 days",
            tasks=[
                task("analysis", "Third-party risk review",
                     f"Review data shared with {', '.join(req.integrations)}",
                     ["Vendor risk register", "Data flow inventory"], 4),
                task("implement", "Secrets management",
                     "Store integration credentials in a secrets manager and rotate them",
                     ["Secrets configuration", "Rotation procedure"], 4,
                     ["Vault", "AWS Secrets Manager"]),
            ],
        )

    def security_testing(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Security Testing",
            type="security-testing",
            duration="1 week",
            tasks=[
                task("test", "Security vulnerability testing",
                     "Conduct security testing and vulnerability assessment",
                     ["Security test results", "Vulnerability report"], 16,
                     ["OWASP ZAP", "Burp Suite"], priority="high"),
            ],
        )

    def compliance_validation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Compliance Validation",
            type="security-validation",
            duration="3-5 days",
            tasks=[
                task("validate", "Compliance audit",
                     "Validate against security compliance requirements",
                     ["Compliance report", "Audit documentation"], 8),
            ],
        )
