# planwright/planning/extraction/sections.py
"""
Markdown heading segmentation.

Splits a PRD into named sections by classifying ATX headings against an
ordered list of keyword matchers. More specific matchers come first, so
"Technical Requirements" lands in ``technical`` and not ``features``.
"""

import re
from dataclasses import dataclass, field

SECTION_MATCHERS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        ("acceptance", r"acceptance|criteria|definition of done"),
        ("user_stories", r"user stor|stories|scenarios|use cases"),
        ("technical", r"technical|architecture|non[- ]functional|tech stack"),
        ("constraints", r"constraint|limitation|assumption"),
        ("timeline", r"timeline|schedule|milestone|deadline"),
        ("resources", r"resource|team|budget|staffing"),
        ("features", r"feature|functionality|requirement|scope|capabilit"),
        ("overview", r"overview|summary|description|introduction|background|goal|purpose"),
    )
)

OTHER = "other"

_HEADING = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
_FENCE = re.compile(r"^\s*(```|~~~)")


def classify_heading(heading: str) -> str:
    """Map a heading to a section name, or ``other`` when nothing matches."""
    for name, pattern in SECTION_MATCHERS:
        if pattern.search(heading):
            return name
    return OTHER


@dataclass
class DocumentSections:
    """A markdown document split into its title, preamble and named sections."""

    title: str | None = None
    preamble: str = ""
    sections: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str:
        return self.sections.get(name, "")

    def has(self, name: str) -> bool:
        return bool(self.sections.get(name, "").strip())


def split_sections(text: str) -> DocumentSections:
    """
    Segment markdown text by headings.

    The first level-1 heading becomes the title. Unrecognized headings nested
    below a recognized section stay in that section as a bullet line, so
    "### Login" under "## Features" reads as a feature. Unrecognized
    top-level headings start an ``other`` section that callers ignore.
    Headings inside fenced code blocks are ignored.

    Args:
        text: Raw markdown

    Returns:
        DocumentSections
    """
    doc = DocumentSections()
    buffers: dict[str, list[str]] = {}
    preamble: list[str] = []

    current: str | None = None
    current_level = 0
    in_fence = False

    for line in text.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence

        match = None if in_fence else _HEADING.match(line)
        if match is None:
            if current is None:
                preamble.append(line)
            else:
                buffers.setdefault(current, []).append(line)
            continue

        level = len(match.group(1))
        heading = match.group(2).strip()

        if level == 1 and doc.title is None:
            doc.title = heading
            continue

        name = classify_heading(heading)
        if name == OTHER and current not in (None, OTHER) and level > current_level:
            buffers.setdefault(current, []).append(f"- {heading}")
            continue

        current = name
        current_level = level
        buffers.setdefault(current, [])

    doc.preamble = "\n".join(preamble).strip()
    doc.sections = {
        name: "\n".join(lines).strip()
        for name, lines in buffers.items()
        if name != OTHER
    }
    return doc
