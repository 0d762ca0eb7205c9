# planwright/planning/viewpoints/backend.py
"""Backend viewpoint: APIs, data, service implementation and operability."""

import re

from planwright.config.schema import SynthesisConfig
from planwright.planning.schemas.requirements import Requirements
from planwright.planning.schemas.workflow import Phase
from planwright.planning.viewpoints.base import Viewpoint, task

SERVICE_CATALOG = (
    "user", "auth", "payment", "order", "product", "inventory",
    "notification", "email", "file", "image", "search", "analytics",
    "report", "admin", "customer", "billing", "subscription",
)
_SERVICE_PATTERNS = tuple(
    (name, re.compile(rf"\b{name}\w*", re.IGNORECASE)) for name in SERVICE_CATALOG
)
_SERVICE_SUFFIX = re.compile(r"\b(?:service|api)\b", re.IGNORECASE)

COMPLEX_SERVICES = frozenset({"payment", "auth", "search", "analytics", "notification"})
SIMPLE_SERVICES = frozenset({"user", "product", "file", "image"})


def extract_services(req: Requirements) -> list[str]:
    """Catalog services mentioned anywhere, plus features named "<x> service/api"."""
    text = " ".join(
        [req.title, req.overview, *(f.name for f in req.features), *req.components]
    )
    services = [name for name, pattern in _SERVICE_PATTERNS if pattern.search(text)]
    for feature in req.features:
        if _SERVICE_SUFFIX.search(feature.name):
            name = _SERVICE_SUFFIX.sub("", feature.name).strip().lower()
            if name and name not in services:
                services.append(name)
    return services


def estimate_service_hours(service: str) -> int:
    if service.lower() in COMPLEX_SERVICES:
        return 16
    if service.lower() in SIMPLE_SERVICES:
        return 8
    return 12


class BackendViewpoint(Viewpoint):
    """Reliability, security and data integrity first."""

    name = "backend"
    description = "APIs, data integrity, reliability and server-side performance"
    priority_hierarchy = ("Reliability", "Security", "Performance", "Features", "Convenience")

    BEST_PRACTICES = (
        "Implement proper error handling and logging",
        "Use connection pooling for database connections",
        "Implement comprehensive input validation",
        "Follow RESTful API design principles",
        "Use proper HTTP status codes and responses",
        "Implement rate limiting and request throttling",
        "Use database transactions for data consistency",
        "Implement proper authentication and authorization",
        "Use environment variables for configuration",
        "Implement health checks and monitoring endpoints",
        "Follow the principle of least privilege",
        "Implement proper backup and recovery procedures",
    )

    QUALITY_GATES = (
        "API specification compliance check",
        "Security vulnerability assessment",
        "Database integrity validation",
        "Performance benchmark validation",
        "Error handling completeness check",
        "Authentication and authorization test",
        "Data validation and sanitization test",
        "Load testing and stress testing",
        "Backup and recovery testing",
        "Monitoring and alerting validation",
    )

    def phase_builders(self):
        return (
            self.api_design,
            self.database_design,
            self.security_implementation,
            self.service_implementation,
            self.external_integrations,
            self.performance_optimization,
            self.monitoring,
            self.deployment,
        )

    def api_design(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="API Design & Specification",
            type="api-design",
            duration="1-2 weeks",
            tasks=[
                task("design", "API specification design",
                     "Design RESTful API endpoints and data contracts",
                     ["OpenAPI specification", "API documentation"], 12,
                     ["OpenAPI", "Swagger", "Postman"], priority="high"),
                task("design", "Data model design",
                     "Design request/response schemas and validation rules",
                     ["Data schemas", "Validation specifications"], 8),
                task("design", "Authentication & authorization design",
                     "Design API security and access control mechanisms",
                     ["Auth specification", "Security policies"], 10,
                     ["JWT", "OAuth 2.0", "API Keys"]),
                task("design", "Error handling design",
                     "Design consistent error responses and status codes",
                     ["Error handling specification", "Status code mapping"], 4),
                task("design", "Rate limiting & throttling design",
                     "Design API rate limiting and abuse protection",
                     ["Rate limiting specification", "Throttling policies"], 3),
            ],
        )

    def database_design(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Database Design & Architecture",
            type="database",
            duration="1-2 weeks",
            tasks=[
                task("design", "Database schema design",
                     "Design normalized database schema and relationships",
                     ["Database schema", "Entity relationship diagram"], 16,
                     ["PostgreSQL", "MySQL", "MongoDB"], priority="high"),
                task("design", "Data migration strategy",
                     "Design data migration and versioning strategy",
                     ["Migration scripts", "Version control strategy"], 6,
                     dependencies=["Database schema design"]),
                task("design", "Database performance optimization",
                     "Design indexing strategy and query optimization",
                     ["Index strategy", "Query optimization plan"], 8,
                     dependencies=["Database schema design"]),
                task("design", "Backup & recovery strategy",
                     "Design backup, recovery, and disaster recovery procedures",
                     ["Backup strategy", "Recovery procedures"], 4),
                task("implement", "Database setup & configuration",
                     "Set up database infrastructure and configurations",
                     ["Database infrastructure", "Configuration files"], 5),
            ],
        )

    def security_implementation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Security Implementation",
            type="security",
            duration="1-2 weeks",
            tasks=[
                task("implement", "Authentication system implementation",
                     "Implement user authentication and session management",
                     ["Authentication service", "Session management"], 12,
                     ["Passport.js", "bcrypt", "JWT"], priority="high"),
                task("implement", "Authorization & access control",
                     "Implement role-based access control and permissions",
                     ["Authorization middleware", "Permission system"], 10,
                     dependencies=["Authentication system implementation"]),
                task("implement", "Input validation & sanitization",
                     "Implement comprehensive input validation and sanitization",
                     ["Validation middleware", "Sanitization functions"], 8,
                     ["Joi", "express-validator", "DOMPurify"]),
                task("implement", "Security headers & middleware",
                     "Implement security headers and protective middleware",
                     ["Security middleware", "Headers configuration"], 4,
                     ["helmet", "cors", "express-rate-limit"]),
                task("implement", "Encryption & data protection",
                     "Implement data encryption and secure storage",
                     ["Encryption utilities", "Secure storage"], 6,
                     ["crypto", "bcrypt", "node-forge"]),
            ],
        )

    def service_implementation(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        tasks = [
            task("setup", "Project structure & dependencies",
                 "Set up project structure and install dependencies",
                 ["Project structure", "Package configuration"], 4),
            task("implement", "Core service layer implementation",
                 "Implement business logic and service layer",
                 ["Service classes", "Business logic"], 20, priority="high"),
            task("implement", "Data access layer implementation",
                 "Implement database repositories and data access",
                 ["Repository pattern", "Data access layer"], 16,
                 ["Sequelize", "TypeORM", "Mongoose"],
                 dependencies=["Core service layer implementation"]),
        ]
        for service in extract_services(req)[: settings.max_service_tasks]:
            tasks.append(
                task("implement", f"Implement {service} service",
                     f"Implement {service} service with full CRUD operations",
                     [f"{service} service", "API endpoints", "Unit tests"],
                     estimate_service_hours(service),
                     dependencies=["Core service layer implementation"])
            )
        tasks.append(
            task("implement", "Error handling & logging",
                 "Implement centralized error handling and logging",
                 ["Error middleware", "Logging system"], 6,
                 ["winston", "morgan", "sentry"])
        )
        return Phase(
            name="Service Implementation", type="implementation", duration="2-4 weeks", tasks=tasks
        )

    def external_integrations(
        self, req: Requirements, settings: SynthesisConfig
    ) -> Phase | None:
        if not req.integrations:
            return None

        tasks = [
            task("design", "Integration architecture design",
                 "Design integration patterns and error handling",
                 ["Integration architecture", "Error handling strategy"], 6),
        ]
        for integration in req.integrations[: settings.max_integration_tasks]:
            tasks.append(
                task("integration", f"Implement {integration} integration",
                     f"Integrate with {integration} service",
                     [f"{integration} client", "Integration tests"], 8,
                     dependencies=["Integration architecture design"])
            )
        tasks.append(
            task("implement", "Circuit breaker implementation",
                 "Implement circuit breaker pattern for external services",
                 ["Circuit breaker middleware", "Fallback mechanisms"], 4,
                 ["node-circuit-breaker"])
        )
        return Phase(
            name="External Integrations", type="integration", duration="1-2 weeks", tasks=tasks
        )

    def performance_optimization(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Performance Optimization",
            type="performance",
            duration="1 week",
            tasks=[
                task("implement", "Caching implementation",
                     "Implement multi-level caching strategy",
                     ["Caching layer", "Cache invalidation"], 8,
                     ["Redis", "node-cache", "memcached"]),
                task("optimize", "Database query optimization",
                     "Optimize database queries and add proper indexing",
                     ["Optimized queries", "Database indexes"], 6),
                task("implement", "Connection pooling",
                     "Implement database connection pooling",
                     ["Connection pool configuration"], 2),
                task("implement", "Response compression",
                     "Implement response compression and optimization",
                     ["Compression middleware"], 2, ["compression", "gzip"]),
                task("test", "Performance testing",
                     "Conduct load testing and performance benchmarking",
                     ["Performance test results", "Benchmarks"], 4,
                     ["Artillery", "k6", "Apache Bench"]),
            ],
        )

    def monitoring(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Monitoring & Observability",
            type="monitoring",
            duration="3-5 days",
            tasks=[
                task("implement", "Application monitoring setup",
                     "Set up application performance monitoring",
                     ["APM configuration", "Performance dashboards"], 4,
                     ["New Relic", "DataDog", "AppDynamics"]),
                task("implement", "Health check endpoints",
                     "Implement health check and status endpoints",
                     ["Health check endpoints", "Status monitoring"], 3),
                task("implement", "Structured logging implementation",
                     "Implement structured logging with correlation IDs",
                     ["Logging configuration", "Log aggregation"], 5,
                     ["winston", "bunyan", "ELK stack"]),
                task("implement", "Alerting & notifications",
                     "Set up alerting for critical issues and performance thresholds",
                     ["Alert configuration", "Notification setup"], 3,
                     ["PagerDuty", "Slack", "Email"]),
            ],
        )

    def deployment(self, req: Requirements, settings: SynthesisConfig) -> Phase:
        return Phase(
            name="Deployment & Infrastructure",
            type="deployment",
            duration="1 week",
            tasks=[
                task("setup", "Environment configuration",
                     "Configure development, staging, and production environments",
                     ["Environment configs", "Infrastructure as code"], 8,
                     ["Docker", "Terraform", "Ansible"]),
                task("implement", "CI/CD pipeline setup",
                     "Set up continuous integration and deployment pipeline",
                     ["CI/CD pipeline", "Automated deployment"], 6,
                     ["GitHub Actions", "Jenkins", "GitLab CI"]),
                task("implement", "Database deployment strategy",
                     "Implement database migration and deployment strategy",
                     ["Migration scripts", "Deployment procedures"], 4),
                task("deploy", "Production deployment",
                     "Deploy application to production environment",
                     ["Production deployment", "Rollback procedures"], 3,
                     priority="high",
                     dependencies=["Environment configuration", "CI/CD pipeline setup"]),
            ],
        )
