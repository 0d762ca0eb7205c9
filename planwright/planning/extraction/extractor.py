# planwright/planning/extraction/extractor.py
"""
Requirement extractor.

Heuristic, regex-driven extraction of features, roles, integrations,
acceptance criteria and technical requirements from either free text or a
markdown PRD. Extraction never fails on odd input: anything it cannot find
comes back empty. The only error is an unsupported structured file type.
"""

import logging
from pathlib import PurePath
from typing import Any, Iterable, Literal

from planwright.config.schema import ExtractionLimits
from planwright.errors import UnsupportedFormat
from planwright.planning.extraction import patterns as p
from planwright.planning.extraction.sections import DocumentSections, split_sections
from planwright.planning.schemas.requirements import (
    AcceptanceCriterion,
    Constraint,
    Feature,
    Requirements,
    Resources,
    TechnicalRequirements,
    Timeline,
    UserStory,
)

logger = logging.getLogger(__name__)

SourceKind = Literal["freeform", "structured"]

# extension -> parser
SUPPORTED_EXTENSIONS = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".txt": "text",
}

DEFAULT_TITLE = "Untitled Project"
FALLBACK_TITLE = "Feature Implementation"


def _unique(items: Iterable[str], cap: int | None = None) -> list[str]:
    """Lower-case, strip and de-duplicate, keeping first-seen order."""
    seen: list[str] = []
    for item in items:
        value = item.strip().lower()
        if value and value not in seen:
            seen.append(value)
            if cap is not None and len(seen) >= cap:
                break
    return seen


def _clean(text: str) -> str:
    return p.MARKDOWN_EMPHASIS.sub("", text).strip()


def _sentences(text: str) -> list[str]:
    return [s.strip() for s in p.SENTENCE_SPLIT.split(text) if s.strip()]


def _bullets(text: str) -> list[str]:
    return [_clean(m.group(1)) for m in p.BULLET.finditer(text)]


def classify_priority(text: str) -> Literal["low", "medium", "high"]:
    """Keyword priority: high beats low, default medium."""
    if p.PRIORITY_HIGH.search(text):
        return "high"
    if p.PRIORITY_LOW.search(text):
        return "low"
    return "medium"


def classify_complexity(text: str) -> Literal["low", "medium", "high"]:
    """Keyword complexity: high beats low, default medium."""
    if p.COMPLEXITY_HIGH.search(text):
        return "high"
    if p.COMPLEXITY_LOW.search(text):
        return "low"
    return "medium"


def classify_constraint(text: str) -> str:
    """First matching constraint type, or ``other``."""
    for kind, pattern in p.CONSTRAINT_TYPES.items():
        if pattern.search(text):
            return kind
    return "other"


def _scaled_number(digits: str, suffix: str | None) -> int:
    value = int(digits.replace(",", ""))
    if suffix:
        value *= 1_000 if suffix.lower() == "k" else 1_000_000
    return value


def _to_ms(value: str, unit: str) -> float:
    number = float(value)
    return number if unit.lower().startswith("m") else number * 1000


def _threshold_label(value: str, unit: str) -> str:
    short = "ms" if unit.lower().startswith("m") else "s"
    return f"{value}{short}"


class RequirementExtractor:
    """
    Extracts Requirements from raw text.

    Free-form text is scanned as a whole. Markdown documents are split into
    sections first so that lists under "Features", "Acceptance Criteria" and
    "Constraints" are read as such; anything a section does not provide falls
    back to whole-document scanning.
    """

    def __init__(self, limits: ExtractionLimits | None = None):
        """
        Args:
            limits: Per-list caps (defaults to ExtractionLimits())
        """
        self.limits = limits or ExtractionLimits()

    def extract(
        self,
        raw_text: str,
        source_kind: SourceKind = "freeform",
        file_name: str | None = None,
    ) -> Requirements:
        """
        Extract requirements.

        Args:
            raw_text: Description or document contents
            source_kind: "freeform" for literal text, "structured" for a file
            file_name: Source file name; its extension picks the parser

        Returns:
            Frozen Requirements

        Raises:
            UnsupportedFormat: Structured input with an unknown extension
        """
        text = raw_text or ""

        if source_kind == "structured":
            parser = "markdown"
            if file_name is not None:
                ext = PurePath(file_name).suffix.lower()
                if ext not in SUPPORTED_EXTENSIONS:
                    raise UnsupportedFormat(file_name)
                parser = SUPPORTED_EXTENSIONS[ext]
            if parser == "markdown":
                req = self._extract_markdown(text)
            else:
                req = self._extract_freeform(text)
        else:
            req = self._extract_freeform(text)

        logger.info(
            f"Extracted '{req.title}': {len(req.features)} features, "
            f"{len(req.integrations)} integrations, domains={req.domains}, "
            f"patterns={req.patterns}"
        )
        return req

    # ------------------------------------------------------------------
    # Source-specific assembly
    # ------------------------------------------------------------------

    def _extract_freeform(self, text: str) -> Requirements:
        return self._build(
            text,
            title=self.extract_title(text),
            overview=text.strip(),
            features=self.extract_features(text),
            user_stories=self.extract_user_stories(text),
            acceptance_criteria=self.extract_acceptance_criteria(text),
            technical=self.extract_technical_requirements(text),
            constraints=self.extract_constraints(text),
        )

    def _extract_markdown(self, text: str) -> Requirements:
        doc = split_sections(text)

        features = self._section_features(doc) or self.extract_features(text)
        stories = self._section_user_stories(doc) or self.extract_user_stories(text)
        criteria = self._section_criteria(doc) or self.extract_acceptance_criteria(text)
        technical_text = doc.get("technical") if doc.has("technical") else text
        constraints = self._section_constraints(doc) or self.extract_constraints(text)

        return self._build(
            text,
            title=doc.title or DEFAULT_TITLE,
            overview=doc.get("overview") or doc.preamble,
            features=features,
            user_stories=stories,
            acceptance_criteria=criteria,
            technical=self.extract_technical_requirements(technical_text),
            constraints=constraints,
        )

    def _build(
        self,
        text: str,
        *,
        title: str,
        overview: str,
        features: list[Feature],
        user_stories: list[UserStory],
        acceptance_criteria: list[AcceptanceCriterion],
        technical: TechnicalRequirements,
        constraints: list[Constraint],
    ) -> Requirements:
        patterns = self.detect_patterns(text)
        return Requirements(
            title=title,
            overview=overview,
            features=features,
            user_stories=user_stories,
            components=self.extract_components(text),
            integrations=self.extract_integrations(text),
            user_roles=self.extract_user_roles(text),
            pages=self.extract_pages(text),
            domains=self.detect_domains(text),
            patterns=patterns,
            acceptance_criteria=acceptance_criteria,
            technical_requirements=technical,
            constraints=constraints,
            timeline=self.extract_timeline(text),
            resources=self.extract_resources(text),
            realtime="realtime" in patterns,
            security_level=self._security_level(technical),
            performance_level=self._performance_level(text, technical),
            scalability_level=self._scalability_level(text, technical),
        )

    # ------------------------------------------------------------------
    # Individual extractors (usable on any text)
    # ------------------------------------------------------------------

    def extract_title(self, text: str) -> str:
        """First short line, else first short sentence, else a generic title."""
        stripped = text.strip()
        if not stripped:
            return DEFAULT_TITLE

        first_line = _clean(stripped.splitlines()[0].lstrip("#"))
        if first_line and len(first_line) < 100 and "." not in first_line:
            return first_line

        first_sentence = _clean(stripped.split(".")[0])
        if first_sentence and len(first_sentence) < 50:
            return first_sentence

        return FALLBACK_TITLE

    def extract_features(self, text: str) -> list[Feature]:
        """Verb-object phrases ("build X", "add Y") in text order."""
        features: list[Feature] = []
        seen: set[str] = set()

        for match in p.FEATURE_VERBS.finditer(text):
            name = p.LEADING_ARTICLE.sub("", _clean(match.group(1)))
            if not 5 < len(name) < 100 or name.lower() in seen:
                continue
            seen.add(name.lower())
            features.append(
                Feature(
                    name=name,
                    priority=classify_priority(match.group(0)),
                    complexity=classify_complexity(match.group(0)),
                )
            )
            if len(features) >= self.limits.features:
                break

        return features

    def extract_components(self, text: str) -> list[str]:
        words = (m.group(1) for m in p.COMPONENT.finditer(text))
        return _unique(
            (w for w in words if len(w) > 2 and w.lower() not in p.STOPWORDS),
            self.limits.components,
        )

    def extract_pages(self, text: str) -> list[str]:
        found = [m.group(1) for m in p.PAGE.finditer(text)]
        found += [m.group(1) for m in p.NAVIGATE_TO.finditer(text)]
        return _unique(
            (w for w in found if 2 < len(w) < 30 and w.lower() not in p.STOPWORDS),
            self.limits.pages,
        )

    def extract_integrations(self, text: str) -> list[str]:
        """Named external systems, vendors first-seen in text order."""
        hits: list[tuple[int, str]] = []
        for pattern in p.INTEGRATION_PATTERNS:
            hits += [(m.start(), m.group(1)) for m in pattern.finditer(text)]
        hits += [(m.start(), m.group(1)) for m in p.VENDOR_PATTERN.finditer(text)]
        hits.sort(key=lambda hit: hit[0])

        names = (
            name.strip(".-")
            for _, name in hits
            if name.lower() not in p.GENERIC_INTEGRATION_WORDS
            and name.lower() not in p.STOPWORDS
        )
        return _unique((n for n in names if 2 < len(n) < 50), self.limits.integrations)

    def extract_user_roles(self, text: str) -> list[str]:
        hits = [(m.start(), m.group(1)) for m in p.ROLE_CATALOG.finditer(text)]
        hits += [(m.start(), m.group(1)) for m in p.AS_A_ROLE.finditer(text)]
        hits.sort(key=lambda hit: hit[0])
        roles = (role for _, role in hits if 2 < len(role) < 20)
        return _unique(roles, self.limits.user_roles)

    def detect_domains(self, text: str) -> list[str]:
        return [name for name, pattern in p.DOMAIN_PATTERNS.items() if pattern.search(text)]

    def detect_patterns(self, text: str) -> list[str]:
        return [name for name, pattern in p.TECHNICAL_PATTERNS.items() if pattern.search(text)]

    def extract_acceptance_criteria(self, text: str) -> list[AcceptanceCriterion]:
        """Modal and Given/When/Then sentences, 10-200 characters."""
        hits: list[tuple[int, str]] = []
        for pattern in p.ACCEPTANCE_PATTERNS:
            hits += [(m.start(), m.group(0)) for m in pattern.finditer(text)]
        hits.sort(key=lambda hit: hit[0])

        criteria: list[AcceptanceCriterion] = []
        seen: set[str] = set()
        for _, sentence in hits:
            description = _clean(sentence)
            if not 10 < len(description) < 200 or description.lower() in seen:
                continue
            seen.add(description.lower())
            criteria.append(self._criterion(description))
            if len(criteria) >= self.limits.acceptance_criteria:
                break
        return criteria

    def extract_technical_requirements(self, text: str) -> TechnicalRequirements:
        """Performance thresholds, security mechanisms and scale figures."""
        performance: dict[str, Any] = {}
        for key, pattern in (("load_time", p.LOAD_TIME), ("response_time", p.RESPONSE_TIME)):
            match = pattern.search(text)
            if match:
                performance[key] = _threshold_label(match.group(1), match.group(2))
                performance[f"{key}_ms"] = _to_ms(match.group(1), match.group(2))

        security = {
            name: "required"
            for name, pattern in p.SECURITY_MECHANISMS.items()
            if pattern.search(text)
        }

        scalability: dict[str, Any] = {}
        users = p.CONCURRENT_USERS.search(text)
        if users:
            scalability["concurrent_users"] = _scaled_number(users.group(1), users.group(2))
        capacity = p.CAPACITY.search(text)
        if capacity:
            scalability["capacity"] = _scaled_number(capacity.group(1), capacity.group(2))
            scalability["capacity_unit"] = capacity.group(3).lower()

        return TechnicalRequirements(
            performance=performance or None,
            security=security or None,
            scalability=scalability or None,
        )

    def extract_constraints(self, text: str) -> list[Constraint]:
        return [
            Constraint(description=sentence, type=classify_constraint(sentence))
            for sentence in _sentences(_clean(text))
            if p.CONSTRAINT_CUES.search(sentence)
        ]

    def extract_user_stories(self, text: str) -> list[UserStory]:
        """Stories written as "As a X, I want Y so that Z"."""
        stories = []
        for match in p.USER_STORY.finditer(text):
            stories.append(
                UserStory(
                    role=match.group(1).strip(),
                    want=match.group(2).strip(),
                    benefit=match.group(3).strip() if match.group(3) else None,
                    priority=classify_priority(match.group(0)),
                )
            )
        return stories

    def extract_timeline(self, text: str) -> Timeline:
        match = p.TIMELINE_DURATION.search(text)
        duration = f"{match.group(1)} {match.group(2).lower()}" if match else None
        if p.URGENCY_HIGH.search(text):
            urgency = "high"
        elif p.URGENCY_LOW.search(text):
            urgency = "low"
        else:
            urgency = "medium"
        return Timeline(duration=duration, urgency=urgency)

    def extract_resources(self, text: str) -> Resources:
        match = p.TEAM_SIZE.search(text)
        team_size = int(match.group(1) or match.group(2)) if match else None
        skills = [skill for skill, pattern in p.SKILL_PATTERNS if pattern.search(text)]
        return Resources(team_size=team_size, skills=skills[: self.limits.skills])

    # ------------------------------------------------------------------
    # Section readers
    # ------------------------------------------------------------------

    def _section_features(self, doc: DocumentSections) -> list[Feature]:
        features: list[Feature] = []
        seen: set[str] = set()
        for line in _bullets(doc.get("features")):
            name = line.split(":", 1)[0].split(" - ", 1)[0].strip()
            if not name or name.lower() in seen:
                continue
            seen.add(name.lower())
            features.append(
                Feature(
                    name=name,
                    priority=classify_priority(line),
                    complexity=classify_complexity(line),
                    description=line if line != name else None,
                )
            )
            if len(features) >= self.limits.listed_features:
                break
        return features

    def _section_user_stories(self, doc: DocumentSections) -> list[UserStory]:
        section = doc.get("user_stories")
        stories = self.extract_user_stories(section)
        if stories:
            return stories
        return [
            UserStory(description=line, priority=classify_priority(line))
            for line in _bullets(section)
        ]

    def _section_criteria(self, doc: DocumentSections) -> list[AcceptanceCriterion]:
        lines = _bullets(doc.get("acceptance"))
        return [self._criterion(line) for line in lines[: self.limits.acceptance_criteria]]

    def _section_constraints(self, doc: DocumentSections) -> list[Constraint]:
        return [
            Constraint(description=line, type=classify_constraint(line))
            for line in _bullets(doc.get("constraints"))
        ]

    # ------------------------------------------------------------------
    # Derived levels
    # ------------------------------------------------------------------

    @staticmethod
    def _criterion(description: str) -> AcceptanceCriterion:
        return AcceptanceCriterion(
            description=description,
            testable=bool(p.TESTABLE.search(description)),
            priority=classify_priority(description),
        )

    @staticmethod
    def _security_level(technical: TechnicalRequirements) -> str:
        security = technical.security or {}
        if "compliance" in security or len(security) >= 2:
            return "high"
        return "standard"

    @staticmethod
    def _performance_level(text: str, technical: TechnicalRequirements) -> str:
        performance = technical.performance or {}
        thresholds = [v for k, v in performance.items() if k.endswith("_ms")]
        if any(ms <= 200 for ms in thresholds) or p.CRITICAL_PERFORMANCE.search(text):
            return "critical"
        return "standard"

    @staticmethod
    def _scalability_level(text: str, technical: TechnicalRequirements) -> str:
        scalability = technical.scalability or {}
        volumes = [scalability.get("concurrent_users", 0), scalability.get("capacity", 0)]
        if max(volumes) >= p.ENTERPRISE_THRESHOLD or p.ENTERPRISE_SCALE.search(text):
            return "enterprise"
        return "standard"


def extract(
    raw_text: str,
    source_kind: SourceKind = "freeform",
    file_name: str | None = None,
    limits: ExtractionLimits | None = None,
) -> Requirements:
    """Extract requirements with a one-off RequirementExtractor."""
    return RequirementExtractor(limits).extract(raw_text, source_kind, file_name)
