# planwright/validation/sanitize.py
"""
Input sanitization and validation utilities.

Used by the MCP tools before anything reaches the pipeline.
"""

import logging
from pathlib import Path

from fastmcp.exceptions import ToolError

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 10


def sanitize_input_path(user_path: str) -> Path:
    """
    Sanitize and validate a requirements document path.

    Args:
        user_path: User-provided path string

    Returns:
        Resolved absolute Path object

    Raises:
        ToolError: If path doesn't exist or is not a file
    """
    try:
        resolved = Path(user_path).expanduser().resolve()
    except (ValueError, OSError) as e:
        raise ToolError(f"Invalid path '{user_path}': {e}")

    if not resolved.exists():
        raise ToolError(f"Path does not exist: {resolved}")

    if not resolved.is_file():
        raise ToolError(f"Path is not a file: {resolved}")

    logger.info(f"Sanitized input path: {resolved}")
    return resolved


def sanitize_description(text: str, max_length: int = 20000) -> str:
    """
    Sanitize and validate description text.

    Strips whitespace and validates a minimum length.
    Truncates to max_length if needed.

    Args:
        text: User-provided description text
        max_length: Maximum allowed length (default 20000)

    Returns:
        Cleaned description string

    Raises:
        ToolError: If description is empty or too short after stripping
    """
    cleaned = (text or "").strip()

    if not cleaned:
        raise ToolError("Description cannot be empty")

    if len(cleaned) < MIN_DESCRIPTION_LENGTH:
        raise ToolError(
            f"Description too short: {len(cleaned)} characters "
            f"(minimum {MIN_DESCRIPTION_LENGTH})"
        )

    if len(cleaned) > max_length:
        logger.warning(
            f"Description truncated from {len(cleaned)} to {max_length} characters"
        )
        cleaned = cleaned[:max_length]

    return cleaned
