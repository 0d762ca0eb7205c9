# planwright/planning/enrichment/catalogs.py
"""Keyword catalogs shared by the dependency analyzer and risk assessor."""

EXTERNAL_SERVICES = (
    "stripe", "paypal", "twilio", "sendgrid", "mailchimp", "slack", "github",
    "salesforce", "shopify", "auth0", "okta", "firebase", "google", "facebook",
    "twitter", "aws", "gcp", "azure",
)
CRITICAL_SERVICE_HINTS = ("payment", "stripe", "paypal", "auth", "database", "storage")
HIGH_RISK_SERVICE_HINTS = ("payment", "stripe", "paypal", "financial", "banking")
MEDIUM_RISK_SERVICE_HINTS = ("email", "sendgrid", "mailchimp", "sms", "twilio", "notification")

TECHNOLOGIES = (
    "react", "vue", "angular", "node", "express", "django", "fastapi", "flask",
    "rails", "spring", "mongodb", "postgresql", "mysql", "redis", "kafka", "graphql",
)
CRITICAL_TECHNOLOGIES = frozenset({"postgresql", "mysql", "mongodb", "django", "spring", "rails"})
SUGGESTED_VERSIONS = {
    "react": "^18.0.0",
    "vue": "^3.0.0",
    "angular": "^16.0.0",
    "node": "^18.0.0",
    "express": "^4.18.0",
    "django": "^5.0",
    "fastapi": "^0.110",
    "postgresql": "^16",
    "redis": "^7",
}

INFRASTRUCTURE_TOOLS = (
    "docker", "kubernetes", "terraform", "ansible", "cloudformation", "aws", "gcp", "azure",
)
INFRASTRUCTURE_PHASE_TYPES = frozenset({"deployment", "infrastructure", "monitoring"})

# phase-type keyword -> skills that phase needs
SKILL_MAP: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("ux", "design-system", "accessibility"), ("UI/UX", "Design", "Figma")),
    (("security",), ("Security", "Cryptography", "OAuth")),
    (("infrastructure", "deployment", "monitoring"), ("DevOps", "Docker", "Kubernetes")),
    (("database",), ("Database", "SQL")),
    (("api-design", "integration"), ("API design", "Backend")),
    (("performance", "scalability"), ("Performance engineering",)),
)
CRITICAL_SKILLS = frozenset({"Security", "Database", "DevOps"})

EMERGING_TECHNOLOGIES = (
    "graphql", "kubernetes", "webassembly", "kafka", "serverless", "microservice",
    "machine learning", "blockchain", "zero trust", "websocket",
)
PERFORMANCE_KEYWORDS = ("performance", "speed", "fast", "optimization", "scalability")
SECURITY_KEYWORDS = ("auth", "security", "encrypt", "privacy", "compliance")
SENSITIVE_DATA_KEYWORDS = ("user data", "payment", "personal", "pii", "financial", "health")
MARKET_KEYWORDS = ("competitive", "market", "customer-facing", "public")
