# planwright/planning/documents.py
"""Input loading: a file path becomes a structured document, anything else is free text."""

import logging
from dataclasses import dataclass
from pathlib import Path

from planwright.errors import UnsupportedFormat
from planwright.planning.extraction.extractor import SUPPORTED_EXTENSIONS, SourceKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceDocument:
    """Raw input for the pipeline."""

    text: str
    source_kind: SourceKind = "freeform"
    file_name: str | None = None


def _as_file(value: str) -> Path | None:
    if not value or "\n" in value:
        return None
    try:
        path = Path(value).expanduser()
        return path if path.is_file() else None
    except (OSError, ValueError):
        return None


def load_document(value: str) -> SourceDocument:
    """
    Resolve a CLI/tool input to a document.

    Args:
        value: Path to an existing file, or literal description text

    Returns:
        SourceDocument tagged "structured" for files, "freeform" otherwise

    Raises:
        UnsupportedFormat: If the file extension has no parser
    """
    path = _as_file(value)
    if path is None:
        return SourceDocument(text=value, source_kind="freeform")

    # checked before decoding: binary formats are not UTF-8
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(path.name)

    text = path.read_text(encoding="utf-8")
    logger.info(f"Loaded {path.name} ({len(text)} chars)")
    return SourceDocument(text=text, source_kind="structured", file_name=path.name)
