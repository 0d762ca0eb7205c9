# planwright/planning/extraction/patterns.py
"""
Keyword and regex catalogs used by the requirement extractor.

Catalog order is significant: domains and patterns are reported in the order
they appear here.
"""

import re

_I = re.IGNORECASE


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, _I)


DOMAIN_PATTERNS: dict[str, re.Pattern[str]] = {
    "frontend": _compile(
        r"\b(?:ui|ux|frontend|front-end|react|vue|angular|components?|responsive|css|html|javascript)\b"
    ),
    "backend": _compile(
        r"\b(?:apis?|backend|back-end|server|database|node|python|java|sql|nosql|rest|graphql|postgres\w*|mysql)\b"
    ),
    "security": _compile(
        r"\b(?:security|secure|auth\w*|encrypt\w*|tokens?|oauth|ssl|https|privacy|gdpr)\b"
    ),
    "infrastructure": _compile(
        r"\b(?:deploy\w*|infrastructure|cloud|aws|docker|kubernetes|k8s|ci/cd|devops)\b"
    ),
    "mobile": _compile(r"\b(?:mobile|ios|android|react native|flutter|responsive)\b"),
}

TECHNICAL_PATTERNS: dict[str, re.Pattern[str]] = {
    "ui-component": _compile(r"\b(?:components?|widgets?|elements?|buttons?|forms?|inputs?|modals?)\b"),
    "api": _compile(r"\b(?:apis?|endpoints?|rest|restful|graphql|services?)\b"),
    "database": _compile(r"\b(?:databases?|db|sql|nosql|mongo\w*|postgres\w*|mysql)\b"),
    "authentication": _compile(
        r"\b(?:auth\w*|login|log in|register|registration|sign[ -]?in|sign[ -]?up|oauth|jwt)\b"
    ),
    "realtime": _compile(r"\b(?:real[ -]?time|websockets?|sockets?|live|streaming)\b"),
    "responsive": _compile(r"\b(?:responsive|mobile|tablet|desktop|adaptive)\b"),
    "testing": _compile(r"\b(?:tests?|testing|unit tests?|e2e|end-to-end)\b"),
    "deployment": _compile(r"\b(?:deploy\w*|ci/cd|pipelines?|releases?)\b"),
    "performance": _compile(r"\b(?:performance|optimi[sz]\w*|cach\w*|speed|latency)\b"),
    "security": _compile(r"\b(?:security|secure|encrypt\w*|ssl|tls|https|privacy)\b"),
}

FEATURE_VERBS = _compile(r"\b(?:implement|create|build|develop|add)\s+(.+?)(?=[.,;\n]|\Z)")
LEADING_ARTICLE = _compile(r"^(?:a|an|the)\s+")

COMPONENT = _compile(
    r"\b(\w+)\s+(?:components?|modules?|services?|widgets?|pages?|forms?|dialogs?|modals?)\b"
)
PAGE = _compile(r"\b(\w+)\s+(?:pages?|screens?|views?)\b")
NAVIGATE_TO = _compile(r"\bnavigates? to (?:the |a )?([\w-]+)")

INTEGRATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    _compile(r"\bintegrat\w* with (?:the |a |an )?([\w.-]+)"),
    _compile(r"\bconnect(?:s|ing)? to (?:the |a |an )?([\w.-]+)"),
    _compile(r"\b(\w+)\s+api\b"),
    _compile(r"\b(\w+)\s+service\b"),
    _compile(r"\bthird[- ]party\s+([\w-]+)"),
)

VENDORS = (
    "stripe",
    "paypal",
    "twilio",
    "sendgrid",
    "mailchimp",
    "slack",
    "github",
    "salesforce",
    "shopify",
    "auth0",
    "okta",
    "firebase",
    "google maps",
    "zendesk",
    "hubspot",
)
VENDOR_PATTERN = _compile(r"\b(" + "|".join(re.escape(v) for v in VENDORS) + r")\b")

# words that precede "api"/"service" without naming a system
GENERIC_INTEGRATION_WORDS = frozenset(
    {
        "rest", "restful", "graphql", "public", "internal", "external", "private",
        "web", "http", "json", "new", "own", "our", "your", "their", "the", "this",
        "that", "a", "an", "backend", "micro", "each", "every", "core",
    }
)

ROLE_CATALOG = _compile(
    r"\b(admin|administrator|user|customer|client|manager|operator|viewer|editor)s?\b"
)
AS_A_ROLE = _compile(r"\bas an? ([\w-]+)")

STOPWORDS = frozenset(
    {
        "the", "and", "with", "each", "every", "this", "that", "these", "those",
        "new", "our", "your", "their", "its", "for", "all", "any", "some", "one",
        "main", "into", "from", "via", "other", "separate", "single", "multiple",
    }
)

ACCEPTANCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    _compile(r"\b(?:must|should|shall|will)\s+[^.;\n]+"),
    _compile(r"\b(?:given|when|then)\s+[^.;\n]+"),
    _compile(r"\buser\s+(?:can|should|must)\s+[^.;\n]+"),
    _compile(r"\bsystem\s+(?:will|should|must)\s+[^.;\n]+"),
)
TESTABLE = _compile(
    r"\b(?:can|should|must|will|displays?|shows?|validates?|prevents?|allows?"
    r"|clicks?|selects?|enters?|submits?|navigates?"
    r"|appears?|disappears?|changes?|updates?|saves?)\b"
)

LOAD_TIME = _compile(
    r"\bload\w*[^.\n]*?(?:in|within|under|<)\s*(\d+(?:\.\d+)?)\s*(ms|milliseconds?|s|sec|seconds?)\b"
)
RESPONSE_TIME = _compile(
    r"\brespon\w*[^.\n]*?(?:in|within|under|<)\s*(\d+(?:\.\d+)?)\s*(ms|milliseconds?|s|sec|seconds?)\b"
)
CRITICAL_PERFORMANCE = _compile(
    r"\b(?:performance[- ]critical|critical performance|high[- ]performance|low[- ]latency)\b"
)

SECURITY_MECHANISMS: dict[str, re.Pattern[str]] = {
    "authentication": _compile(r"\b(?:oauth\w*|jwt|tokens?|sessions?|sso|saml|authenticat\w*)\b"),
    "encryption": _compile(r"\b(?:https|ssl|tls|encrypt\w*)\b"),
    "compliance": _compile(r"\b(?:gdpr|hipaa|pci(?:[- ]dss)?|soc ?2|compliance|privacy)\b"),
}

CONCURRENT_USERS = _compile(r"(\d+(?:,\d{3})*)\s*(k|m)?\s+(?:concurrent\s+|active\s+)?users\b")
CAPACITY = _compile(
    r"\bhandle[^.\n]*?(\d+(?:,\d{3})*)\s*(k|m)?\s+(requests?|transactions?|operations?)\b"
)
ENTERPRISE_SCALE = _compile(
    r"\benterprise[- ](?:scale|grade|level|wide)\b|\bmillions of (?:users|requests)\b"
)
ENTERPRISE_THRESHOLD = 10_000

PRIORITY_HIGH = _compile(r"\b(?:critical|urgent|high|important|must)\b")
PRIORITY_LOW = _compile(r"\b(?:low|nice|optional|future)\b")
COMPLEXITY_HIGH = _compile(r"\b(?:complex|advanced|sophisticated|difficult|challenging)\b")
COMPLEXITY_LOW = _compile(r"\b(?:simple|basic|easy|straightforward|trivial)\b")

CONSTRAINT_CUES = _compile(
    r"\b(?:budget|deadline|must use|must run|limited to|cannot|can't|no more than|"
    r"restricted to|compliant with|constraint)\b"
)
CONSTRAINT_TYPES: dict[str, re.Pattern[str]] = {
    "budget": _compile(r"\b(?:budget|cost|price|pricing|funding)\b|\$\d"),
    "timeline": _compile(r"\b(?:deadline|timeline|date|weeks?|months?|q[1-4])\b"),
    "regulatory": _compile(r"\b(?:gdpr|hipaa|compliance|compliant|regulat\w*|legal|law)\b"),
    "technical": _compile(
        r"\b(?:technology|platform|framework|language|browser|must use|compatible|stack|legacy)\b"
    ),
    "resource": _compile(r"\b(?:team|developers?|staff|resources?|people|headcount)\b"),
}

USER_STORY = _compile(
    r"\bas an? ([^,.\n]+?),\s*i (?:want|need|would like)(?: to)? ([^.\n]+?)"
    r"(?:,?\s*so that ([^.\n]+?))?(?=[.\n]|\Z)"
)

TIMELINE_DURATION = _compile(r"\b(?:in|within|over|during|by)\s+(\d+)\s+(days?|weeks?|months?)\b")
URGENCY_HIGH = _compile(r"\b(?:urgent|asap|immediately|rush|tight deadline)\b")
URGENCY_LOW = _compile(r"\b(?:flexible|no rush|whenever|long[- ]term)\b")

TEAM_SIZE = _compile(
    r"\bteam of (\d+)\b|\b(\d+)\s+(?:developers?|engineers?|people|members?)\b"
)
SKILLS = (
    "react", "vue", "angular", "typescript", "javascript", "python", "java", "go",
    "node", "sql", "graphql", "devops", "kubernetes", "docker", "aws", "design",
    "testing", "security", "mobile", "data science", "machine learning",
)
SKILL_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (skill, _compile(rf"\b{re.escape(skill)}\b")) for skill in SKILLS
)

BULLET = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.+?)\s*$", re.MULTILINE)
SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+|\n+")
MARKDOWN_EMPHASIS = re.compile(r"[*_`]+")
