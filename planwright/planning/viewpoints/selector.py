# planwright/planning/viewpoints/selector.py
"""
Viewpoint selection.

Auto-detection is a pure function of (domains, patterns, complexity) and
checks the specialist viewpoints in a fixed order, falling back to architect.
"""

import logging
from typing import Iterable

from planwright.planning.schemas.requirements import Requirements
from planwright.planning.viewpoints.registry import get_viewpoint

logger = logging.getLogger(__name__)

AUTO = "auto"
DEFAULT_VIEWPOINT = "architect"

# viewpoint -> (domains, patterns) that indicate it; checked in this order
INDICATORS: tuple[tuple[str, frozenset[str], frozenset[str]], ...] = (
    ("frontend", frozenset({"frontend"}), frozenset({"ui-component", "responsive"})),
    ("backend", frozenset({"backend"}), frozenset({"api", "database"})),
    ("security", frozenset({"security"}), frozenset({"authentication", "security"})),
    ("devops", frozenset({"infrastructure"}), frozenset({"deployment"})),
)


def detect_viewpoint(
    domains: Iterable[str], patterns: Iterable[str], complexity: float = 0.0
) -> str:
    """
    Pick the first viewpoint whose domain or pattern indicators are present.

    Complexity is part of the signature so the selection stays a function of
    all three signals; the current rules do not branch on it.
    """
    domain_set = set(domains)
    pattern_set = set(patterns)
    for name, indicator_domains, indicator_patterns in INDICATORS:
        if domain_set & indicator_domains or pattern_set & indicator_patterns:
            return name
    return DEFAULT_VIEWPOINT


def select_viewpoint(req: Requirements, override: str | None = None) -> str:
    """
    Resolve the viewpoint for a run.

    Args:
        req: Extracted requirements
        override: Explicit viewpoint name; None or "auto" auto-detects

    Returns:
        Canonical viewpoint name

    Raises:
        UnknownViewpoint: If override names no known viewpoint
    """
    if override is not None and override.strip().lower() != AUTO:
        return get_viewpoint(override).name

    name = detect_viewpoint(req.domains, req.patterns, req.complexity)
    logger.info(f"Auto-selected viewpoint '{name}' (domains={req.domains})")
    return name
