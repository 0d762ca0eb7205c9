"""Requirement extraction from free text and markdown documents."""

from planwright.planning.extraction.extractor import (
    SUPPORTED_EXTENSIONS,
    RequirementExtractor,
    classify_complexity,
    classify_priority,
    extract,
)
from planwright.planning.extraction.sections import (
    DocumentSections,
    classify_heading,
    split_sections,
)

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "RequirementExtractor",
    "classify_complexity",
    "classify_priority",
    "extract",
    "DocumentSections",
    "classify_heading",
    "split_sections",
]
